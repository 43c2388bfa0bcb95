"""Map the attributes of a raw HTML tag to component arguments.

A mapper turns ``<span class="Label Label--primary" title="New">`` into the invocation
``Label(property_values={'scheme': 'primary'}, html_attributes={'title': 'New'})``.
Anything that has no component equivalent raises :class:`ConversionError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from responsive_ui.components import label as label_component
from responsive_ui.errors import ConversionError
from responsive_ui.linter.tag_parser import ParsedAttribute, ParsedTag

__all__ = [
    "ArgumentMapper",
    "ComponentInvocation",
    "LabelArgumentMapper",
    "SystemArguments",
]

logger = logging.getLogger(__name__)

Args = tuple[dict[str, Any], dict[str, Any]]


@dataclass(frozen=True)
class ComponentInvocation:
    """Arguments for constructing one component instance."""

    component: str
    property_values: dict[str, Any] = field(default_factory=dict)
    html_attributes: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        args = []
        if self.property_values:
            args.append(f"property_values={self.property_values!r}")
        if self.html_attributes:
            args.append(f"html_attributes={self.html_attributes!r}")
        return f"{self.component}({', '.join(args)})"


class SystemArguments:
    """Pass-through for generic attributes: ``id``, ``data-*`` and ``aria-*``."""

    def __init__(self, attribute: ParsedAttribute) -> None:
        self.attribute = attribute

    def to_args(self) -> dict[str, Any]:
        name = self.attribute.name
        value = True if self.attribute.value is None else self.attribute.value
        if name == "data-test-selector":
            return {"test_selector": value}
        if name in ("id", "role", "hidden") or name.startswith(("data-", "aria-")):
            return {name: value}
        raise ConversionError(f'Cannot convert attribute "{name}"')


class ArgumentMapper:
    """Base mapper: tag handling plus system arguments for every attribute."""

    component_name = ""
    default_tag = "div"
    tag_options: tuple[str, ...] = ()

    def __init__(self, tag: ParsedTag) -> None:
        self.tag = tag

    def to_invocation(self) -> ComponentInvocation:
        property_values: dict[str, Any] = {}
        html_attributes: dict[str, Any] = {}

        if self.tag.name != self.default_tag:
            if self.tag_options and self.tag.name not in self.tag_options:
                raise ConversionError(
                    f"{self.component_name} cannot be rendered as <{self.tag.name}>"
                )
            property_values["tag"] = self.tag.name

        for attribute in self.tag.attributes:
            props, attrs = self.attribute_to_args(attribute)
            property_values.update(props)
            html_attributes.update(attrs)

        invocation = ComponentInvocation(
            component=self.component_name,
            property_values=property_values,
            html_attributes=html_attributes,
        )
        logger.debug("Converted <%s> to %s", self.tag.name, invocation)
        return invocation

    def attribute_to_args(self, attribute: ParsedAttribute) -> Args:
        """Return ``(property_values, html_attributes)`` for one attribute."""
        return {}, SystemArguments(attribute).to_args()


def _invert(mappings: dict[str, str]) -> dict[str, str]:
    return {class_name: value for value, class_name in mappings.items() if class_name}


class LabelArgumentMapper(ArgumentMapper):
    """Maps classes in a label element to arguments for the Label component."""

    component_name = label_component.LABEL.name
    default_tag = label_component.DEFAULT_TAG
    tag_options = label_component.TAG_OPTIONS

    SCHEME_MAPPINGS = _invert(label_component.SCHEME_MAPPINGS)
    VARIANT_MAPPINGS = _invert(label_component.VARIANT_MAPPINGS)

    def attribute_to_args(self, attribute: ParsedAttribute) -> Args:
        if attribute.name == "class":
            return self.classes_to_args(attribute), {}
        if attribute.name == "title":
            return {}, {"title": attribute.value or ""}
        return super().attribute_to_args(attribute)

    def classes_to_args(self, attribute: ParsedAttribute) -> dict[str, Any]:
        args: dict[str, Any] = {}
        for class_name in (attribute.value or "").split():
            if class_name in label_component.LABEL.base_classes:
                continue
            if class_name in self.SCHEME_MAPPINGS and "scheme" not in args:
                args["scheme"] = self.SCHEME_MAPPINGS[class_name]
            elif class_name in self.VARIANT_MAPPINGS and "variant" not in args:
                args["variant"] = self.VARIANT_MAPPINGS[class_name]
            else:
                raise ConversionError(f'Cannot convert class "{class_name}"')
        return args
