"""Property model: a single declared component property."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PropertyDefinition:
    """A component property with its accepted values and default.

    ``allowed_values=None`` means the property accepts any value.
    ``default=None`` means the property has no default.
    """

    name: str
    allowed_values: frozenset[Any] | None = None
    default: Any = None

    @property
    def is_restricted(self) -> bool:
        return self.allowed_values is not None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def accepts(self, value: Any) -> bool:
        """Return True if *value* is an accepted value for this property."""
        if self.allowed_values is None:
            return True
        try:
            if value not in self.allowed_values:
                return False
        except TypeError:  # unhashable values are never members
            return False
        # True == 1 and False == 0 hash alike; booleans only match booleans.
        if isinstance(value, bool) or any(
            isinstance(allowed, bool) for allowed in self.allowed_values
        ):
            return any(
                allowed == value and type(allowed) is type(value)
                for allowed in self.allowed_values
            )
        return True
