"""Label: a small scheme-colored text badge."""

from __future__ import annotations

from responsive_ui.component import ComponentBuilder

DEFAULT_TAG = "span"
TAG_OPTIONS = ("span", "summary", "a", "div")

DEFAULT_SCHEME = "default"
SCHEME_MAPPINGS = {
    DEFAULT_SCHEME: "",
    "primary": "Label--primary",
    "secondary": "Label--secondary",
    "accent": "Label--accent",
    "success": "Label--success",
    "attention": "Label--attention",
    "danger": "Label--danger",
    "severe": "Label--severe",
    "done": "Label--done",
    "sponsors": "Label--sponsors",
}

DEFAULT_VARIANT = "none"
VARIANT_MAPPINGS = {
    DEFAULT_VARIANT: "",
    "large": "Label--large",
    "inline": "Label--inline",
}

LABEL = (
    ComponentBuilder("Label", default_tag=DEFAULT_TAG, base_classes=("Label",))
    .define_properties(
        {
            "scheme": {"allowed_values": SCHEME_MAPPINGS, "default": DEFAULT_SCHEME},
            "variant": {"allowed_values": VARIANT_MAPPINGS, "default": DEFAULT_VARIANT},
            "tag": {"allowed_values": TAG_OPTIONS, "default": DEFAULT_TAG},
        }
    )
    .define_style_map(
        general={
            "scheme": SCHEME_MAPPINGS,
            "variant": VARIANT_MAPPINGS,
        }
    )
    .allow_html_attributes("href", "for")
    .build()
)
