"""Tests for the single opening tag parser."""

import pytest

from responsive_ui.errors import ConversionError
from responsive_ui.linter import ParsedAttribute, ParsedTag, parse_tag


class TestParseTag:
    def test_bare_tag(self):
        assert parse_tag("<span>") == ParsedTag(name="span")

    def test_quoted_attributes(self):
        tag = parse_tag("""<span class="Label Label--primary" title='New'>""")
        assert tag.name == "span"
        assert tag.attributes == (
            ParsedAttribute("class", "Label Label--primary"),
            ParsedAttribute("title", "New"),
        )

    def test_unquoted_and_bare_attributes(self):
        tag = parse_tag("<a href=/issues hidden>")
        assert tag.get("href") == ParsedAttribute("href", "/issues")
        assert tag.get("hidden") == ParsedAttribute("hidden", None)

    def test_self_closing(self):
        assert parse_tag('<div id="x" />').get("id").value == "x"

    def test_names_are_lowercased(self):
        tag = parse_tag('<SPAN Class="Label">')
        assert tag.name == "span"
        assert tag.get("class").value == "Label"

    def test_entities_are_unescaped(self):
        assert parse_tag('<span title="a &amp; b">').get("title").value == "a & b"

    def test_whitespace_is_ignored(self):
        assert parse_tag('  <span\n  id = "x"  >  ').get("id").value == "x"

    def test_missing_attribute(self):
        assert parse_tag("<span>").get("class") is None

    @pytest.mark.parametrize("source", ["span", "<span", "<span class=>", "</span>", ""])
    def test_invalid_source(self, source):
        with pytest.raises(ConversionError, match="Cannot parse tag"):
            parse_tag(source)
