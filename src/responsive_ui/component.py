"""Component types and instances.

A component type is declared with :class:`ComponentBuilder` and frozen into a
:class:`ComponentDefinition`. A child type names its base definition
explicitly; inherited properties and style maps are merged once, when the
child is built.

A :class:`ComponentInstance` holds the property values and HTML attributes of
one rendered component. Construction stores and sanitizes the attributes,
resolves the root tag and injects the marker attributes. Default filling,
value validation and style resolution run only when asked for.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup

from responsive_ui.attributes import AttributeSanitizer, render_attributes
from responsive_ui.config import DEFAULT_CONFIG, ResponsiveConfig
from responsive_ui.errors import ConfigError, ValidationError
from responsive_ui.model.diagnostic import Diagnostic, Severity
from responsive_ui.properties import PropertyRegistry
from responsive_ui.styles.registry import StyleMapRegistry

__all__ = ["ComponentBuilder", "ComponentDefinition", "ComponentInstance"]

logger = logging.getLogger(__name__)

MARKER_ATTRIBUTE = "data-view-component"
TEST_SELECTOR_ATTRIBUTE = "data-test-selector"

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _slugify(name: str) -> str:
    """``StackItem`` -> ``stack-item``; ``Primer::Label`` -> ``primer-label``."""
    words = re.split(r"[^A-Za-z0-9]+", _CAMEL_BOUNDARY_RE.sub("-", name))
    return "-".join(word.lower() for word in words if word)


# ---------------------------------------------------------------------------
# Type declaration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ComponentDefinition:
    """The frozen declaration of one component type."""

    name: str
    properties: PropertyRegistry
    styles: StyleMapRegistry
    allowed_html_attributes: frozenset[str] = frozenset()
    default_tag: str = "div"
    base_classes: tuple[str, ...] = ()
    base: ComponentDefinition | None = field(default=None, repr=False)

    @property
    def slug(self) -> str:
        return _slugify(self.name)

    @property
    def breakpoints(self) -> tuple[str, ...]:
        return self.styles.breakpoints

    def instantiate(
        self,
        property_values: Mapping[str, Any] | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        config: ResponsiveConfig = DEFAULT_CONFIG,
    ) -> ComponentInstance:
        return ComponentInstance(self, property_values, html_attributes, config=config)


class ComponentBuilder:
    """Collect the declarations of a component type, then :meth:`build` it.

    Every declaration method returns the builder so calls can be chained::

        label = (
            ComponentBuilder("Label", default_tag="span")
            .define_properties({"scheme": {"allowed_values": ["primary"]}})
            .define_style_map(general={"scheme": {"primary": "Label--primary"}})
            .build()
        )

    Without declarations of its own, a child type keeps its base's
    properties, style map and allowed attributes.
    """

    def __init__(
        self,
        name: str,
        base: ComponentDefinition | None = None,
        default_tag: str | None = None,
        config: ResponsiveConfig = DEFAULT_CONFIG,
        base_classes: Iterable[str] | None = None,
    ) -> None:
        if not name:
            raise ConfigError("Component name must be a non-empty string")
        self.name = name
        self.base = base
        if base is not None:
            self.breakpoints = base.breakpoints
            self.class_format = base.styles.class_format
        else:
            self.breakpoints = tuple(config.breakpoints)
            self.class_format = config.class_format
        self.default_tag = default_tag or (base.default_tag if base else "div")
        if base_classes is None:
            base_classes = base.base_classes if base else ()
        elif isinstance(base_classes, str):
            base_classes = base_classes.split()
        self.base_classes = tuple(base_classes)

        self._properties: PropertyRegistry | None = base.properties if base else None
        self._styles: StyleMapRegistry | None = base.styles if base else None
        self._allowed: frozenset[str] = (
            base.allowed_html_attributes if base else frozenset()
        )

    def define_properties(self, properties: Mapping[str, Any]) -> ComponentBuilder:
        """Declare the full property set, replacing anything inherited."""
        self._properties = self._wrap(
            lambda: PropertyRegistry.define(properties, self.breakpoints)
        )
        return self

    def extend_properties(self, properties: Mapping[str, Any]) -> ComponentBuilder:
        """Declare properties on top of the base type's properties."""
        parent = self.base.properties if self.base else None
        if parent is None:
            return self.define_properties(properties)
        self._properties = self._wrap(lambda: parent.extend(properties))
        return self

    def define_style_map(
        self,
        general: Mapping[str, Any] | None = None,
        responsive: Mapping[str, Any] | None = None,
        with_responsive: Mapping[str, Any] | None = None,
    ) -> ComponentBuilder:
        """Declare the full style map, replacing anything inherited."""
        self._styles = self._wrap(
            lambda: StyleMapRegistry.define(
                general,
                responsive,
                with_responsive,
                breakpoints=self.breakpoints,
                class_format=self.class_format,
            )
        )
        return self

    def extend_style_map(
        self,
        general: Mapping[str, Any] | None = None,
        responsive: Mapping[str, Any] | None = None,
        with_responsive: Mapping[str, Any] | None = None,
    ) -> ComponentBuilder:
        """Declare style entries on top of the base type's style map."""
        parent = self.base.styles if self.base else None
        if parent is None:
            return self.define_style_map(general, responsive, with_responsive)
        self._styles = self._wrap(
            lambda: parent.extend(general, responsive, with_responsive)
        )
        return self

    def allow_html_attributes(self, *names: str | Iterable[str]) -> ComponentBuilder:
        """Declare the attributes this type accepts beyond the base allow-list."""
        allowed: set[str] = set()
        for name in names:
            if isinstance(name, str):
                allowed.add(name)
            else:
                allowed.update(name)
        self._allowed = frozenset(allowed)
        return self

    def build(self) -> ComponentDefinition:
        properties = self._properties
        if properties is None:
            properties = PropertyRegistry(breakpoints=self.breakpoints)
        styles = self._styles
        if styles is None:
            styles = StyleMapRegistry(
                breakpoints=self.breakpoints, class_format=self.class_format
            )
        definition = ComponentDefinition(
            name=self.name,
            properties=properties,
            styles=styles,
            allowed_html_attributes=self._allowed,
            default_tag=self.default_tag,
            base_classes=self.base_classes,
            base=self.base,
        )
        logger.debug(
            "Built component %s: %d properties, %d allowed attributes",
            definition.name,
            len(definition.properties),
            len(definition.allowed_html_attributes),
        )
        return definition

    def _wrap(self, declare):
        try:
            return declare()
        except ConfigError as exc:
            raise ConfigError(str(exc), component=self.name) from exc


# ---------------------------------------------------------------------------
# Instances
# ---------------------------------------------------------------------------


class ComponentInstance:
    """One rendered component: its property values and root attributes."""

    def __init__(
        self,
        definition: ComponentDefinition,
        property_values: Mapping[str, Any] | None = None,
        html_attributes: Mapping[str, Any] | None = None,
        config: ResponsiveConfig = DEFAULT_CONFIG,
    ) -> None:
        self.definition = definition
        self.config = config
        self._sanitizer = AttributeSanitizer(config.base_allowed_attributes)
        self._filtered_classes: tuple[str, ...] | None = None

        self.property_values: dict[str, Any] = dict(property_values or {})
        self.html_attributes: dict[str, Any] = dict(html_attributes or {})

        if config.strict:
            self.validate_html_attributes()
        self.sanitize_html_attributes_in_place()

        self.tag = self._resolve_tag()

        self.html_attributes[MARKER_ATTRIBUTE] = True
        self._add_test_selector()

        if "classes" in self.html_attributes:
            self.html_attributes["class"] = self.html_attributes.pop("classes")

    def __repr__(self) -> str:
        return (
            f"ComponentInstance({self.definition.name!r}, tag={self.tag!r}, "
            f"property_values={self.property_values!r})"
        )

    # -- construction steps -------------------------------------------------

    def _resolve_tag(self) -> str:
        tag = self.property_values.get("tag")
        if tag is None:
            return self.definition.default_tag
        tag_definition = self.definition.properties.get("tag")
        if tag_definition is not None and not tag_definition.accepts(tag):
            diagnostic = Diagnostic(
                rule="invalid_tag",
                severity=Severity.ERROR,
                message=(
                    f"Tag {tag!r} is not allowed for {self.definition.name}; "
                    f"using '{self.definition.default_tag}'."
                ),
                subject="tag",
                value=tag,
            )
            if self.config.strict:
                raise ValidationError([diagnostic])
            logger.warning("%s", diagnostic)
            return self.definition.default_tag
        return str(tag)

    def _add_test_selector(self) -> None:
        selector = self.html_attributes.pop("test_selector", None)
        if self.config.production:
            return
        self.html_attributes[TEST_SELECTOR_ATTRIBUTE] = selector or self.definition.slug

    # -- html attributes ----------------------------------------------------

    def validate_html_attributes(
        self, html_attributes: Mapping[str, Any] | None = None
    ) -> None:
        """Raise :class:`ValidationError` if any attribute is not allowed."""
        if html_attributes is None:
            html_attributes = self.html_attributes
        self._sanitizer.validate(
            html_attributes, self.definition.allowed_html_attributes
        )

    def sanitize_html_attributes(
        self, html_attributes: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Return a sanitized copy of *html_attributes* (default: the instance's)."""
        if html_attributes is None:
            html_attributes = self.html_attributes
        return self._sanitizer.sanitize(
            html_attributes, self.definition.allowed_html_attributes
        )

    def sanitize_html_attributes_in_place(self) -> None:
        self.html_attributes = self.sanitize_html_attributes()

    def render_html_attributes(self) -> Markup:
        return render_attributes(self.html_attributes)

    # -- property values ----------------------------------------------------

    def fill_default_values(
        self,
        property_values: Mapping[str, Any] | None = None,
        fallback_to_default: bool = False,
    ) -> dict[str, Any]:
        """Return *property_values* with defaults filled in.

        Defaults are inserted when *fallback_to_default* is set or the
        instance runs in production mode.
        """
        if property_values is None:
            property_values = self.property_values
        return self.definition.properties.fill_defaults(
            property_values,
            fallback_to_default=fallback_to_default,
            production=self.config.production,
        )

    def fill_default_values_in_place(self, fallback_to_default: bool = False) -> None:
        self.property_values = self.fill_default_values(
            fallback_to_default=fallback_to_default
        )

    def validate_values(
        self, property_values: Mapping[str, Any] | None = None
    ) -> list[Diagnostic]:
        """Validate property values.

        Returns the diagnostics; in strict mode raises :class:`ValidationError`
        instead when any of them is an error.
        """
        if property_values is None:
            property_values = self.property_values
        if self.config.strict:
            return self.definition.properties.validate_or_raise(property_values)
        return self.definition.properties.validate(property_values)

    # -- styles -------------------------------------------------------------

    @property
    def style_class_map(self):
        return self.definition.styles.style_map

    @property
    def styles_resolved(self) -> bool:
        return self._filtered_classes is not None

    def filtered_style_class_map(self, force_recalculation: bool = False) -> tuple[str, ...]:
        """Return the resolved classes, computing them on first use."""
        if self._filtered_classes is None or force_recalculation:
            self._filtered_classes = self.filter_style_class_map()
        return self._filtered_classes

    def filter_style_class_map(
        self, property_values: Mapping[str, Any] | None = None
    ) -> tuple[str, ...]:
        if property_values is None:
            property_values = self.property_values
        return self.definition.styles.resolve(property_values)

    def root_class_names(self) -> tuple[str, ...]:
        """Base classes, resolved style classes, then the caller's ``class`` tokens."""
        names: list[str] = []
        extra = self.html_attributes.get("class")
        if isinstance(extra, str):
            extra = extra.split()
        for token in (
            *self.definition.base_classes,
            *self.filtered_style_class_map(),
            *(extra or ()),
        ):
            if token not in names:
                names.append(token)
        return tuple(names)
