"""Responsive UI model layer -- public type re-exports."""

from responsive_ui.model.diagnostic import Diagnostic, Severity
from responsive_ui.model.property import PropertyDefinition

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    # property
    "PropertyDefinition",
]
