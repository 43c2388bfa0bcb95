"""Stack: a flex container whose layout can change per breakpoint."""

from __future__ import annotations

from dataclasses import replace

from responsive_ui.component import ComponentBuilder
from responsive_ui.config import DEFAULT_CONFIG

DEFAULT_TAG = "div"
TAG_OPTIONS = ("div", "ul", "ol", "section", "nav", "header", "footer")

# Breakpoint variants are suffixed, e.g. "Stack--dir-horizontal-md".
STACK_CONFIG = replace(DEFAULT_CONFIG, class_format="{token}-{breakpoint}")

DIRECTION_CLASSES = {
    "vertical": "Stack--dir-vertical",
    "horizontal": "Stack--dir-horizontal",
}
GAP_CLASSES = {
    "none": "Stack--gap-none",
    "condensed": "Stack--gap-condensed",
    "normal": "Stack--gap-normal",
    "spacious": "Stack--gap-spacious",
}
ALIGN_CLASSES = {
    "stretch": "Stack--align-stretch",
    "start": "Stack--align-start",
    "center": "Stack--align-center",
    "end": "Stack--align-end",
    "baseline": "Stack--align-baseline",
}
JUSTIFY_CLASSES = {
    "start": "Stack--justify-start",
    "center": "Stack--justify-center",
    "end": "Stack--justify-end",
    "space-between": "Stack--justify-spaceBetween",
    "space-evenly": "Stack--justify-spaceEvenly",
}
WRAP_CLASSES = {
    "nowrap": "Stack--nowrap",
    "wrap": "Stack--wrap",
}

STACK = (
    ComponentBuilder(
        "Stack", default_tag=DEFAULT_TAG, config=STACK_CONFIG, base_classes=("Stack",)
    )
    .define_properties(
        {
            "direction": {"allowed_values": DIRECTION_CLASSES, "default": "vertical"},
            "gap": {"allowed_values": GAP_CLASSES, "default": "normal"},
            "align": {"allowed_values": ALIGN_CLASSES, "default": "stretch"},
            "justify": {"allowed_values": JUSTIFY_CLASSES, "default": "start"},
            "wrap": {"allowed_values": WRAP_CLASSES, "default": "nowrap"},
            "hidden": {"allowed_values": [True, False]},
            "tag": {"allowed_values": TAG_OPTIONS, "default": DEFAULT_TAG},
        }
    )
    .define_style_map(
        general={"wrap": WRAP_CLASSES},
        responsive={"hidden": {True: "Stack--hidden"}},
        with_responsive={
            "direction": DIRECTION_CLASSES,
            "gap": GAP_CLASSES,
            "align": ALIGN_CLASSES,
            "justify": JUSTIFY_CLASSES,
        },
    )
    .build()
)
