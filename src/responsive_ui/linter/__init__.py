from responsive_ui.linter.argument_mappers import (
    ArgumentMapper,
    ComponentInvocation,
    LabelArgumentMapper,
    SystemArguments,
)
from responsive_ui.linter.tag_parser import ParsedAttribute, ParsedTag, parse_tag

__all__ = [
    "ArgumentMapper",
    "ComponentInvocation",
    "LabelArgumentMapper",
    "ParsedAttribute",
    "ParsedTag",
    "SystemArguments",
    "convert_label",
    "parse_tag",
]


def convert_label(source: str) -> ComponentInvocation:
    """Parse a raw label tag and map it to a ``Label`` invocation."""
    return LabelArgumentMapper(parse_tag(source)).to_invocation()
