"""Responsive UI -- property-validated responsive HTML components."""

__version__ = "0.1.0"

from responsive_ui.attributes import AttributeSanitizer, render_attributes
from responsive_ui.component import (
    ComponentBuilder,
    ComponentDefinition,
    ComponentInstance,
)
from responsive_ui.config import DEFAULT_CONFIG, ResponsiveConfig
from responsive_ui.errors import ConfigError, ConversionError, ValidationError
from responsive_ui.library import ComponentLibrary, default_library
from responsive_ui.model import Diagnostic, PropertyDefinition, Severity
from responsive_ui.properties import PropertyRegistry
from responsive_ui.styles import StyleMapRegistry, resolve, responsive_expand

__all__ = [
    "__version__",
    # config
    "ResponsiveConfig",
    "DEFAULT_CONFIG",
    # errors
    "ConfigError",
    "ConversionError",
    "ValidationError",
    # model
    "Diagnostic",
    "Severity",
    "PropertyDefinition",
    # registries
    "PropertyRegistry",
    "StyleMapRegistry",
    "resolve",
    "responsive_expand",
    "AttributeSanitizer",
    "render_attributes",
    # components
    "ComponentBuilder",
    "ComponentDefinition",
    "ComponentInstance",
    "ComponentLibrary",
    "default_library",
]
