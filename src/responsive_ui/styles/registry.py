"""Style map registry: declarative property/value to CSS class tables.

A style map is layered. Layer ``None`` holds the unqualified entries; every
other layer is named after a breakpoint and holds the responsive variants::

    {
        None: {"variant": {"primary": ("btn-primary",)}},
        "sm": {"size": {"large": ("size-lg",)}},
        "md": {"size": {"large": ("size-lg",)}},
    }

Declarations are plain ``{property: {value: classes}}`` tables where
``classes`` is a list of tokens or a whitespace-separated string.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from responsive_ui.errors import ConfigError
from responsive_ui.styles.resolver import resolve

__all__ = [
    "StyleMapRegistry",
    "deep_merge",
    "freeze_style_map",
    "normalize_table",
    "responsive_expand",
]

logger = logging.getLogger(__name__)

StyleTable = dict[str, dict[Any, tuple[str, ...]]]
LayeredStyleMap = dict[str | None, StyleTable]


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def _normalize_classes(prop: str, value: Any, classes: Any) -> tuple[str, ...]:
    if isinstance(classes, str):
        return tuple(classes.split())
    if not isinstance(classes, (list, tuple)):
        raise ConfigError(
            f"Style classes for {prop}={value!r} must be a string or a list of strings, "
            f"got {type(classes).__name__}"
        )
    tokens: list[str] = []
    for token in classes:
        if not isinstance(token, str) or not token.strip():
            raise ConfigError(
                f"Style classes for {prop}={value!r} contain an invalid token {token!r}"
            )
        tokens.extend(token.split())
    return tuple(tokens)


def normalize_table(
    table: Mapping[str, Any] | None, breakpoints: tuple[str, ...] = ()
) -> StyleTable:
    """Copy a declared ``{property: {value: classes}}`` table into tuple leaves."""
    if not table:
        return {}
    if not isinstance(table, Mapping):
        raise ConfigError(f"Style map must be a mapping, got {type(table).__name__}")
    normalized: StyleTable = {}
    for prop, value_table in table.items():
        if not isinstance(prop, str) or not prop:
            raise ConfigError(f"Style map property must be a non-empty string, got {prop!r}")
        if prop in breakpoints:
            raise ConfigError(
                f"Style map property '{prop}' collides with a breakpoint of the same name"
            )
        if not isinstance(value_table, Mapping):
            raise ConfigError(
                f"Style map entry for '{prop}' must map values to classes, "
                f"got {type(value_table).__name__}"
            )
        normalized[prop] = {
            value: _normalize_classes(prop, value, classes)
            for value, classes in value_table.items()
        }
    return normalized


# ---------------------------------------------------------------------------
# Merging and expansion
# ---------------------------------------------------------------------------


def deep_merge(base: Mapping[Any, Any], other: Mapping[Any, Any]) -> dict[Any, Any]:
    """Merge *other* into a copy of *base*.

    Keys are unioned at every nesting level. Where both sides hold a mapping
    the merge recurses; otherwise the value from *other* replaces the old one.
    """
    merged: dict[Any, Any] = {
        key: deep_merge(value, {}) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }
    for key, value in other.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        elif isinstance(value, Mapping):
            merged[key] = deep_merge(value, {})
        else:
            merged[key] = value
    return merged


def responsive_expand(
    table: Mapping[str, Any] | None,
    breakpoints: tuple[str, ...],
    remove_initial: bool = False,
    class_format: str = "{token}",
) -> LayeredStyleMap:
    """Expand *table* into one layer per breakpoint.

    Every token is rewritten with *class_format*, which may reference
    ``{token}`` and ``{breakpoint}``. The unqualified layer is kept unless
    *remove_initial* is set.
    """
    normalized = normalize_table(table, breakpoints)
    if not normalized:
        return {}

    layered: LayeredStyleMap = {}
    if not remove_initial:
        layered[None] = normalized
    for breakpoint in breakpoints:
        layered[breakpoint] = {
            prop: {
                value: tuple(
                    class_format.format(token=token, breakpoint=breakpoint)
                    for token in classes
                )
                for value, classes in value_table.items()
            }
            for prop, value_table in normalized.items()
        }
    return layered


def freeze_style_map(layered: Mapping[Any, Any]) -> Mapping[Any, Any]:
    """Wrap every mapping level of *layered* in a read-only proxy."""
    return MappingProxyType(
        {
            key: freeze_style_map(value) if isinstance(value, Mapping) else value
            for key, value in layered.items()
        }
    )


def _build_layers(
    general: Mapping[str, Any] | None,
    responsive: Mapping[str, Any] | None,
    with_responsive: Mapping[str, Any] | None,
    breakpoints: tuple[str, ...],
    class_format: str,
) -> LayeredStyleMap:
    layered: LayeredStyleMap = {}
    general_table = normalize_table(general, breakpoints)
    if general_table:
        layered[None] = general_table
    layered = deep_merge(
        layered,
        responsive_expand(responsive, breakpoints, remove_initial=True, class_format=class_format),
    )
    layered = deep_merge(
        layered,
        responsive_expand(with_responsive, breakpoints, class_format=class_format),
    )
    return layered


def _check_class_format(class_format: str) -> None:
    try:
        class_format.format(token="t", breakpoint="b")
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigError(f"Invalid class_format {class_format!r}: {exc}") from exc


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StyleMapRegistry:
    """Immutable layered style map for one component type."""

    style_map: Mapping[str | None, Mapping[str, Mapping[Any, tuple[str, ...]]]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    breakpoints: tuple[str, ...] = ()
    class_format: str = "{token}"

    def __post_init__(self) -> None:
        if not isinstance(self.style_map, MappingProxyType):
            object.__setattr__(self, "style_map", freeze_style_map(self.style_map))

    @classmethod
    def define(
        cls,
        general: Mapping[str, Any] | None = None,
        responsive: Mapping[str, Any] | None = None,
        with_responsive: Mapping[str, Any] | None = None,
        breakpoints: tuple[str, ...] = (),
        class_format: str = "{token}",
    ) -> StyleMapRegistry:
        """Build a style map from its three declaration tables.

        *general* is used as is. *responsive* only produces breakpoint
        variants. *with_responsive* produces breakpoint variants and keeps
        its unqualified entries.
        """
        _check_class_format(class_format)
        breakpoints = tuple(breakpoints)
        layered = _build_layers(general, responsive, with_responsive, breakpoints, class_format)
        logger.debug("Defined style map with layers %s", list(layered))
        return cls(style_map=layered, breakpoints=breakpoints, class_format=class_format)

    def extend(
        self,
        general: Mapping[str, Any] | None = None,
        responsive: Mapping[str, Any] | None = None,
        with_responsive: Mapping[str, Any] | None = None,
    ) -> StyleMapRegistry:
        """Return a new registry with the declarations merged over this map.

        A property declared again in a layer replaces this map's value table
        for that property in that layer.
        """
        child = _build_layers(
            general, responsive, with_responsive, self.breakpoints, self.class_format
        )
        merged: LayeredStyleMap = {
            layer: dict(table) for layer, table in self.style_map.items()
        }
        for layer, table in child.items():
            merged.setdefault(layer, {}).update(table)
        return StyleMapRegistry(
            style_map=merged, breakpoints=self.breakpoints, class_format=self.class_format
        )

    # -- lookup -----------------------------------------------------------

    def lookup(
        self, prop: str, value: Any, breakpoint: str | None = None
    ) -> tuple[str, ...] | None:
        """Return the classes for *prop*=*value* in a layer, or None."""
        table = self.style_map.get(breakpoint, {}).get(prop)
        if table is None:
            return None
        try:
            return table.get(value)
        except TypeError:
            return None

    def entries(self) -> Iterator[tuple[str | None, str, Any, tuple[str, ...]]]:
        """Yield ``(breakpoint, property, value, classes)`` in declaration order."""
        for layer, table in self.style_map.items():
            for prop, value_table in table.items():
                for value, classes in value_table.items():
                    yield layer, prop, value, classes

    def resolve(self, values: Mapping[str, Any]) -> tuple[str, ...]:
        """Return the ordered class tokens selected by *values*."""
        return resolve(self.style_map, values)

    def to_dict(self) -> dict[str, dict[str, dict[str, list[str]]]]:
        """Plain JSON-friendly copy; the unqualified layer is keyed ``"*"``."""
        return {
            "*" if layer is None else layer: {
                prop: {str(value): list(classes) for value, classes in value_table.items()}
                for prop, value_table in table.items()
            }
            for layer, table in self.style_map.items()
        }
