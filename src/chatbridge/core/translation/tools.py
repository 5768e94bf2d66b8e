"""Tool registry definitions -> wire tool descriptors.

Definitions arrive untyped from the tool registry.  They are parsed once at
the boundary into :class:`RecognizedFunctionTool` or :class:`UnknownTool`;
conversion then only looks at the parsed variant.  Unrecognised shapes still
yield a name-only stub so no tool is ever dropped.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chatbridge.core.interface.wire import FunctionSpec, Tool


@dataclass(frozen=True)
class RecognizedFunctionTool:
    """A definition exposing a description and/or a parameter schema."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] | None = None


@dataclass(frozen=True)
class UnknownTool:
    """A definition with no recognisable fields."""

    name: str


ToolDefinition = RecognizedFunctionTool | UnknownTool


def parse_tool_definition(name: str, definition: Any) -> ToolDefinition:
    """Look up ``description`` and ``parameters``/``input_schema`` in *definition*."""
    if not isinstance(definition, Mapping):
        return UnknownTool(name=name)

    description = definition.get("description")
    if not isinstance(description, str):
        description = None

    parameters = definition.get("parameters")
    if not isinstance(parameters, Mapping):
        parameters = definition.get("input_schema")
    if not isinstance(parameters, Mapping):
        parameters = None

    if description is None and parameters is None:
        return UnknownTool(name=name)
    return RecognizedFunctionTool(
        name=name,
        description=description,
        parameters=dict(parameters) if parameters is not None else None,
    )


def to_wire_tool(definition: ToolDefinition) -> Tool:
    """Build the wire descriptor for a parsed definition."""
    if isinstance(definition, RecognizedFunctionTool):
        return Tool(
            function=FunctionSpec(
                name=definition.name,
                description=definition.description,
                parameters=definition.parameters,
            )
        )
    return Tool(function=FunctionSpec(name=definition.name))


def convert_tools(tools: Mapping[str, Any]) -> list[Tool]:
    """Convert a ``name -> definition`` mapping, preserving mapping order."""
    return [to_wire_tool(parse_tool_definition(name, definition)) for name, definition in tools.items()]
