"""Bidirectional canonical <-> wire translation."""

from chatbridge.core.translation.content import ContentTranslator
from chatbridge.core.translation.ids import (
    CounterIdStrategy,
    NameIdStrategy,
    RandomIdStrategy,
    ToolCallIdStrategy,
    build_id_strategy,
    derive_id,
)
from chatbridge.core.translation.response import ResponseTranslator
from chatbridge.core.translation.sanitize import sanitize_json_args
from chatbridge.core.translation.tools import (
    RecognizedFunctionTool,
    ToolDefinition,
    UnknownTool,
    convert_tools,
    parse_tool_definition,
)

__all__ = [
    "ContentTranslator",
    "CounterIdStrategy",
    "NameIdStrategy",
    "RandomIdStrategy",
    "RecognizedFunctionTool",
    "ResponseTranslator",
    "ToolCallIdStrategy",
    "ToolDefinition",
    "UnknownTool",
    "build_id_strategy",
    "convert_tools",
    "derive_id",
    "parse_tool_definition",
    "sanitize_json_args",
]
