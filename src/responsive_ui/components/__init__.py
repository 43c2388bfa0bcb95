"""Built-in component definitions."""

from responsive_ui.components.label import LABEL
from responsive_ui.components.stack import STACK

BUILTIN_COMPONENTS = [LABEL, STACK]

__all__ = ["BUILTIN_COMPONENTS", "LABEL", "STACK"]
