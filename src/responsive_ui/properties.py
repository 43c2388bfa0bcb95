"""Property registry: declared properties, defaults and value validation.

A registry is built once per component type and never mutated afterwards.
Child component types obtain their registry by extending the base type's
registry, which returns a new object and leaves the base untouched.

Declarations may be given as :class:`PropertyDefinition` objects or in the
declarative dict form::

    {
        "scheme": {"allowed_values": ["default", "primary"], "default": "default"},
        "title": {},
    }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from responsive_ui.errors import ConfigError, ValidationError
from responsive_ui.model.diagnostic import Diagnostic, Severity
from responsive_ui.model.property import PropertyDefinition

__all__ = ["PropertyRegistry", "build_properties_definition"]

logger = logging.getLogger(__name__)

_DECLARATION_KEYS = frozenset({"allowed_values", "default"})


def _build_definition(name: str, raw: Any) -> PropertyDefinition:
    """Build and check one property definition from its declaration."""
    if not isinstance(name, str) or not name:
        raise ConfigError(f"Property name must be a non-empty string, got {name!r}")

    if isinstance(raw, PropertyDefinition):
        if raw.name != name:
            raise ConfigError(
                f"Property declared as '{name}' but its definition is named '{raw.name}'"
            )
        definition = raw
    elif isinstance(raw, Mapping):
        unknown = set(raw) - _DECLARATION_KEYS
        if unknown:
            raise ConfigError(
                f"Property '{name}' has unknown declaration keys: {sorted(map(str, unknown))}"
            )
        allowed = raw.get("allowed_values")
        if allowed is not None:
            if isinstance(allowed, (str, bytes)):
                raise ConfigError(
                    f"Property '{name}' allowed_values must be a collection, not a string"
                )
            try:
                allowed = frozenset(allowed)
            except TypeError as exc:
                raise ConfigError(
                    f"Property '{name}' allowed_values must be hashable: {exc}"
                ) from exc
        definition = PropertyDefinition(
            name=name, allowed_values=allowed, default=raw.get("default")
        )
    else:
        raise ConfigError(
            f"Property '{name}' declaration must be a mapping or PropertyDefinition, "
            f"got {type(raw).__name__}"
        )

    if definition.allowed_values is not None and not definition.allowed_values:
        raise ConfigError(f"Property '{name}' declares an empty allowed_values set")
    if definition.has_default and not definition.accepts(definition.default):
        raise ConfigError(
            f"Property '{name}' default {definition.default!r} is not one of its allowed values"
        )
    return definition


def build_properties_definition(
    declarations: Mapping[str, Any], breakpoints: tuple[str, ...] = ()
) -> dict[str, PropertyDefinition]:
    """Build a name -> PropertyDefinition dict from raw *declarations*.

    Raises :class:`ConfigError` on the first malformed entry.
    """
    definitions: dict[str, PropertyDefinition] = {}
    for name, raw in declarations.items():
        if name in breakpoints:
            raise ConfigError(
                f"Property '{name}' collides with a breakpoint of the same name"
            )
        definitions[name] = _build_definition(name, raw)
    return definitions


@dataclass(frozen=True)
class PropertyRegistry:
    """Immutable set of property definitions for one component type."""

    definitions: Mapping[str, PropertyDefinition] = field(
        default_factory=lambda: MappingProxyType({})
    )
    breakpoints: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.definitions, MappingProxyType):
            object.__setattr__(
                self, "definitions", MappingProxyType(dict(self.definitions))
            )

    # -- declaration ------------------------------------------------------

    @classmethod
    def define(
        cls, properties: Mapping[str, Any], breakpoints: tuple[str, ...] = ()
    ) -> PropertyRegistry:
        """Build a registry holding exactly *properties*."""
        definitions = build_properties_definition(properties, breakpoints)
        logger.debug("Defined %d properties: %s", len(definitions), list(definitions))
        return cls(definitions=definitions, breakpoints=tuple(breakpoints))

    def extend(self, new_properties: Mapping[str, Any]) -> PropertyRegistry:
        """Return a new registry with *new_properties* merged over this one.

        A property declared in both takes the new definition whole.
        """
        new_definitions = build_properties_definition(new_properties, self.breakpoints)
        return PropertyRegistry(
            definitions={**self.definitions, **new_definitions},
            breakpoints=self.breakpoints,
        )

    # -- lookup -----------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)

    def get(self, name: str) -> PropertyDefinition | None:
        return self.definitions.get(name)

    def defaults(self) -> dict[str, Any]:
        """Return the default value of every property that has one."""
        return {
            name: definition.default
            for name, definition in self.definitions.items()
            if definition.has_default
        }

    # -- values -----------------------------------------------------------

    def fill_defaults(
        self,
        values: Mapping[str, Any],
        fallback_to_default: bool = False,
        production: bool = False,
    ) -> dict[str, Any]:
        """Return a copy of *values* with missing properties set to their default.

        Defaults are only inserted when *fallback_to_default* or *production*
        is set; otherwise the copy is returned unchanged. Keys that are not
        declared properties are kept as they are.
        """
        filled = dict(values)
        if not (fallback_to_default or production):
            return filled
        for name, default in self.defaults().items():
            if name not in filled:
                filled[name] = default
        return filled

    def validate(self, values: Mapping[str, Any]) -> list[Diagnostic]:
        """Check *values* against the declared properties.

        Returns one ERROR diagnostic per unknown property and per value
        outside a restricted set. Breakpoint sections are checked entry by
        entry.
        """
        diagnostics: list[Diagnostic] = []
        for name, value in values.items():
            if self._is_breakpoint_section(name, value):
                for inner_name, inner_value in value.items():
                    diagnostics.extend(
                        self._check_value(inner_name, inner_value, breakpoint=name)
                    )
                continue
            diagnostics.extend(self._check_value(name, value))
        return diagnostics

    def validate_or_raise(self, values: Mapping[str, Any]) -> list[Diagnostic]:
        """Run :meth:`validate`; raises :class:`ValidationError` on any error."""
        diagnostics = self.validate(values)
        errors = [d for d in diagnostics if d.is_error]
        if errors:
            raise ValidationError(errors)
        return diagnostics

    def _is_breakpoint_section(self, name: str, value: Any) -> bool:
        return (
            name in self.breakpoints
            and name not in self.definitions
            and isinstance(value, Mapping)
        )

    def _check_value(
        self, name: str, value: Any, breakpoint: str | None = None
    ) -> list[Diagnostic]:
        definition = self.definitions.get(name)
        if definition is None:
            return [
                Diagnostic(
                    rule="unknown_property",
                    severity=Severity.ERROR,
                    message=f"Unknown property '{name}'.",
                    subject=name,
                    value=value,
                    breakpoint=breakpoint,
                )
            ]
        if not definition.accepts(value):
            allowed = ", ".join(sorted(map(repr, definition.allowed_values or ())))
            return [
                Diagnostic(
                    rule="invalid_value",
                    severity=Severity.ERROR,
                    message=(
                        f"Invalid value {value!r} for property '{name}' "
                        f"(allowed: {allowed})."
                    ),
                    subject=name,
                    value=value,
                    breakpoint=breakpoint,
                )
            ]
        return []
