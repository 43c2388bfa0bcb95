"""Component library: look up component definitions by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from responsive_ui.component import ComponentDefinition
from responsive_ui.errors import ConfigError

__all__ = ["ComponentLibrary", "default_library"]


class ComponentLibrary:
    """A name -> ComponentDefinition mapping with case-insensitive lookup."""

    def __init__(self, definitions: Iterable[ComponentDefinition] = ()) -> None:
        self._definitions: dict[str, ComponentDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ComponentDefinition) -> None:
        key = definition.name.lower()
        if key in self._definitions:
            raise ConfigError(f"Component '{definition.name}' is already registered")
        self._definitions[key] = definition

    def get(self, name: str) -> ComponentDefinition:
        try:
            return self._definitions[name.lower()]
        except KeyError:
            known = ", ".join(d.name for d in self._definitions.values())
            raise KeyError(f"Unknown component '{name}' (known: {known})") from None

    def names(self) -> list[str]:
        return [d.name for d in self._definitions.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._definitions

    def __iter__(self) -> Iterator[ComponentDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def default_library() -> ComponentLibrary:
    """Return a library holding the built-in components."""
    from responsive_ui.components import BUILTIN_COMPONENTS

    return ComponentLibrary(BUILTIN_COMPONENTS)
