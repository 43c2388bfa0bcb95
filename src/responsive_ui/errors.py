"""Error types raised by component declarations, validation and conversion."""

from __future__ import annotations

from responsive_ui.model.diagnostic import Diagnostic


class ConfigError(ValueError):
    """Raised when a component type declaration is malformed."""

    def __init__(self, message: str, component: str | None = None) -> None:
        self.component = component
        if component:
            message = f"{component}: {message}"
        super().__init__(message)


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


class ConversionError(Exception):
    """Raised when markup cannot be converted into component arguments."""
