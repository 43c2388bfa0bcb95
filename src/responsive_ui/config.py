from __future__ import annotations

from dataclasses import dataclass, replace

BASE_ALLOWED_ATTRIBUTES = frozenset({
    "id",
    "class",
    "classes",
    "style",
    "role",
    "title",
    "hidden",
    "tabindex",
    "lang",
    "dir",
    "data",
    "aria",
    "test_selector",
    "data-*",
    "aria-*",
})


@dataclass(frozen=True)
class ResponsiveConfig:
    breakpoints: tuple[str, ...] = ("sm", "md", "lg", "xl")
    class_format: str = "{token}"  # e.g. "{token}-{breakpoint}"
    base_allowed_attributes: frozenset[str] = BASE_ALLOWED_ATTRIBUTES
    production: bool = False
    strict: bool = False

    def with_mode(
        self, production: bool | None = None, strict: bool | None = None
    ) -> ResponsiveConfig:
        """Return a copy with the execution-mode flags replaced."""
        return replace(
            self,
            production=self.production if production is None else production,
            strict=self.strict if strict is None else strict,
        )


DEFAULT_CONFIG = ResponsiveConfig()
