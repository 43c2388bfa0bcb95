"""Diagnostic model: structured validation messages for component values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about property values or HTML attributes.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        subject: The property or attribute name involved, if applicable.
        value: The offending value, if applicable.
        breakpoint: The breakpoint section the value was found in, if any.
    """

    rule: str
    severity: Severity
    message: str
    subject: str | None = None
    value: Any = None
    breakpoint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.breakpoint and self.subject:
            location = f" [{self.breakpoint}.{self.subject}]"
        elif self.subject:
            location = f" [{self.subject}]"
        return f"{self.severity.value}{location}: {self.message}"
