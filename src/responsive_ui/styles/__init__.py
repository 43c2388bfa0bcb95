from responsive_ui.styles.registry import (
    StyleMapRegistry,
    deep_merge,
    freeze_style_map,
    responsive_expand,
)
from responsive_ui.styles.resolver import resolve

__all__ = [
    "StyleMapRegistry",
    "deep_merge",
    "freeze_style_map",
    "resolve",
    "responsive_expand",
]
