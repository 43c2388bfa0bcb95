"""Lark-based parser for a single HTML opening tag."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError
from markupsafe import Markup

from responsive_ui.errors import ConversionError

__all__ = ["ParsedAttribute", "ParsedTag", "parse_tag"]

GRAMMAR_PATH = Path(__file__).parent / "tag.lark"


@dataclass(frozen=True)
class ParsedAttribute:
    """One attribute of a parsed tag. ``value`` is None for bare attributes."""

    name: str
    value: str | None = None


@dataclass(frozen=True)
class ParsedTag:
    name: str
    attributes: tuple[ParsedAttribute, ...] = ()

    def get(self, name: str) -> ParsedAttribute | None:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None


class _TagTransformer(Transformer):
    def start(self, items: list) -> ParsedTag:
        name = str(items[0]).lower()
        attributes = tuple(item for item in items[1:] if isinstance(item, ParsedAttribute))
        return ParsedTag(name=name, attributes=attributes)

    def attribute(self, items: list) -> ParsedAttribute:
        name = str(items[0]).lower()
        value = items[1] if len(items) > 1 else None
        return ParsedAttribute(name=name, value=value)

    def value(self, items: list[Token]) -> str:
        token = items[0]
        raw = str(token)
        if token.type in ("DQ_STRING", "SQ_STRING"):
            raw = raw[1:-1]
        return Markup(raw).unescape()


_parser: Lark | None = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            transformer=_TagTransformer(),
        )
    return _parser


def parse_tag(source: str) -> ParsedTag:
    """Parse one opening tag, e.g. ``<span class="Label">``.

    Raises :class:`ConversionError` when *source* is not a single opening tag.
    """
    try:
        return _get_parser().parse(source.strip())
    except LarkError as exc:
        raise ConversionError(f"Cannot parse tag {source!r}: {exc}") from exc
