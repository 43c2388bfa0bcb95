"""Style resolution: apply property values to a layered style map."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["resolve"]


def resolve(
    style_map: Mapping[str | None, Mapping[str, Mapping[Any, tuple[str, ...]]]],
    values: Mapping[str, Any],
) -> tuple[str, ...]:
    """Return the CSS class tokens selected by *values*.

    The map is walked in declaration order: layers, then properties. The
    unqualified layer reads top-level values and a breakpoint layer reads the
    values of the breakpoint section with the same name, e.g.
    ``{"size": "small", "md": {"size": "large"}}``.

    Properties without a matching entry contribute nothing. Tokens are
    de-duplicated keeping their first position.
    """
    tokens: list[str] = []
    seen: set[str] = set()
    for layer, table in style_map.items():
        layer_values = values if layer is None else values.get(layer)
        if not isinstance(layer_values, Mapping):
            continue
        for prop, value_table in table.items():
            if prop not in layer_values:
                continue
            try:
                classes = value_table.get(layer_values[prop])
            except TypeError:  # unhashable value
                continue
            if not classes:
                continue
            for token in classes:
                if token not in seen:
                    seen.add(token)
                    tokens.append(token)
    return tuple(tokens)
