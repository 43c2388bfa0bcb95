"""HTML attribute allow-list checks, sanitization and serialization."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup, escape

from responsive_ui.config import BASE_ALLOWED_ATTRIBUTES
from responsive_ui.errors import ValidationError
from responsive_ui.model.diagnostic import Diagnostic, Severity

__all__ = ["AttributeSanitizer", "render_attributes"]

logger = logging.getLogger(__name__)

# Attributes rendered without a value when set to True.
BOOLEAN_ATTRIBUTES = frozenset({
    "allowfullscreen",
    "async",
    "autofocus",
    "autoplay",
    "checked",
    "controls",
    "default",
    "defer",
    "disabled",
    "formnovalidate",
    "hidden",
    "inert",
    "ismap",
    "loop",
    "multiple",
    "muted",
    "nomodule",
    "novalidate",
    "open",
    "readonly",
    "required",
    "reversed",
    "selected",
})

# Keys whose mapping values expand into prefixed attributes.
_NESTED_PREFIXES = {"data": "data-", "aria": "aria-"}


class AttributeSanitizer:
    """Filter HTML attribute mappings against an allow-list.

    Allow-list entries ending in ``*`` match by prefix, so ``data-*`` allows
    every ``data-`` attribute.
    """

    def __init__(self, base_allowed: Iterable[str] = BASE_ALLOWED_ATTRIBUTES) -> None:
        self.base_allowed = frozenset(base_allowed)

    def is_allowed(self, name: str, extra_allowed: Iterable[str] = ()) -> bool:
        if not isinstance(name, str):
            return False
        for pattern in (*self.base_allowed, *extra_allowed):
            if pattern.endswith("*"):
                if name.startswith(pattern[:-1]):
                    return True
            elif name == pattern:
                return True
        return False

    def violations(
        self, attrs: Mapping[str, Any], extra_allowed: Iterable[str] = ()
    ) -> list[Diagnostic]:
        """Return one ERROR diagnostic per attribute outside the allow-list."""
        extra = tuple(extra_allowed)
        return [
            Diagnostic(
                rule="disallowed_attribute",
                severity=Severity.ERROR,
                message=f"HTML attribute '{name}' is not allowed.",
                subject=name,
                value=value,
            )
            for name, value in attrs.items()
            if not self.is_allowed(name, extra)
        ]

    def validate(
        self, attrs: Mapping[str, Any], extra_allowed: Iterable[str] = ()
    ) -> None:
        """Raise :class:`ValidationError` if any attribute is not allowed."""
        diagnostics = self.violations(attrs, extra_allowed)
        if diagnostics:
            raise ValidationError(diagnostics)

    def sanitize(
        self, attrs: Mapping[str, Any], extra_allowed: Iterable[str] = ()
    ) -> dict[str, Any]:
        """Return a copy of *attrs* holding only allowed attributes."""
        extra = tuple(extra_allowed)
        sanitized: dict[str, Any] = {}
        for name, value in attrs.items():
            if self.is_allowed(name, extra):
                sanitized[name] = value
            else:
                logger.debug("Dropping disallowed HTML attribute %r", name)
        return sanitized


def _render_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value if item is not None)
    if value is True:
        return "true"
    return str(value)


def _flatten(attrs: Mapping[str, Any]) -> Iterable[tuple[str, Any]]:
    for name, value in attrs.items():
        prefix = _NESTED_PREFIXES.get(name)
        if prefix is not None and isinstance(value, Mapping):
            for key, nested in value.items():
                yield prefix + str(key).replace("_", "-"), nested
        else:
            yield name, value


def render_attributes(attrs: Mapping[str, Any]) -> Markup:
    """Serialize *attrs* as escaped ``name="value"`` pairs.

    ``None`` and ``False`` values are omitted. ``True`` renders a bare
    attribute for HTML boolean attributes and ``"true"`` for the rest.
    """
    parts: list[str] = []
    for name, value in _flatten(attrs):
        if value is None or value is False:
            continue
        if value is True and name in BOOLEAN_ATTRIBUTES:
            parts.append(str(escape(name)))
            continue
        parts.append(f'{escape(name)}="{escape(_render_value(value))}"')
    return Markup(" ".join(parts))
