"""Tests for the responsive-ui command line interface."""

import json

from click.testing import CliRunner

from responsive_ui import __version__
from responsive_ui.cli.main import cli


def _invoke(*args, env=None):
    return CliRunner().invoke(cli, list(args), env=env)


class TestVersion:
    def test_version(self):
        result = _invoke("--version")
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInspect:
    def test_inspect_label(self):
        result = _invoke("inspect", "label")
        assert result.exit_code == 0
        assert "Component:   Label" in result.output
        assert "Default tag: span" in result.output
        assert "Classes:     Label" in result.output
        assert "scheme=primary -> Label--primary" in result.output

    def test_inspect_stack_shows_breakpoint_entries(self):
        result = _invoke("inspect", "Stack")
        assert result.exit_code == 0
        assert "md.direction=horizontal -> Stack--dir-horizontal-md" in result.output

    def test_inspect_json(self):
        result = _invoke("inspect", "Stack", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["sm"]["hidden"]["True"] == ["Stack--hidden-sm"]
        assert "hidden" not in data["*"]

    def test_unknown_component(self):
        result = _invoke("inspect", "Missing")
        assert result.exit_code == 1
        assert "Unknown component" in result.output


class TestClasses:
    def test_resolves_classes_with_defaults(self):
        result = _invoke("classes", "Label", "-p", "scheme=primary", "-a", "classes=mt-2")
        assert result.exit_code == 0
        assert "Tag:        span" in result.output
        assert "Classes:    Label Label--primary mt-2" in result.output
        assert 'data-view-component="true"' in result.output

    def test_breakpoint_values(self):
        result = _invoke("classes", "Stack", "--no-defaults", "-p", "md.direction=horizontal", "-p", "sm.hidden=true")
        assert result.exit_code == 0
        assert "Classes:    Stack Stack--hidden-sm Stack--dir-horizontal-md" in result.output

    def test_invalid_value_exits_1(self):
        result = _invoke("classes", "Label", "-p", "scheme=rainbow")
        assert result.exit_code == 1
        assert "Invalid value 'rainbow'" in result.output

    def test_strict_mode_from_env(self):
        result = _invoke("classes", "Label", "-a", "onclick=x", env={"RESPONSIVE_UI_STRICT": "1"})
        assert result.exit_code == 1
        assert "onclick" in result.output

    def test_disallowed_attribute_is_dropped(self):
        result = _invoke("classes", "Label", "-a", "onclick=x")
        assert result.exit_code == 0
        assert "onclick" not in result.output

    def test_production_drops_test_selector(self):
        result = _invoke("classes", "Label", "--production")
        assert result.exit_code == 0
        assert "data-test-selector" not in result.output

    def test_bad_assignment(self):
        result = _invoke("classes", "Label", "-p", "scheme")
        assert result.exit_code != 0


class TestConvert:
    def test_convert(self):
        result = _invoke("convert", '<span class="Label Label--success" title="Done">')
        assert result.exit_code == 0
        assert (
            "Label(property_values={'scheme': 'success'}, html_attributes={'title': 'Done'})"
        ) in result.output

    def test_convert_with_classes(self):
        result = _invoke("convert", "--classes", '<span class="Label Label--success Label--large">')
        assert result.exit_code == 0
        assert "Classes: Label Label--success Label--large" in result.output

    def test_conversion_error(self):
        result = _invoke("convert", '<span class="Label mr-2">')
        assert result.exit_code == 1
        assert 'Cannot convert class "mr-2"' in result.output
