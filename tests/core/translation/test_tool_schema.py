"""Tests for tool definition parsing and wire tool conversion."""

from chatbridge.core.translation.tools import (
    RecognizedFunctionTool,
    UnknownTool,
    convert_tools,
    parse_tool_definition,
)

_WEATHER_SCHEMA = {
    "type": "object",
    "properties": {"city": {"type": "string"}},
    "required": ["city"],
}


class TestParseToolDefinition:
    def test_description_and_parameters(self) -> None:
        parsed = parse_tool_definition(
            "weather", {"description": "Get weather", "parameters": _WEATHER_SCHEMA}
        )
        assert parsed == RecognizedFunctionTool(
            name="weather", description="Get weather", parameters=_WEATHER_SCHEMA
        )

    def test_input_schema_fallback(self) -> None:
        parsed = parse_tool_definition("weather", {"input_schema": _WEATHER_SCHEMA})
        assert isinstance(parsed, RecognizedFunctionTool)
        assert parsed.description is None
        assert parsed.parameters == _WEATHER_SCHEMA

    def test_non_mapping_parameters_fall_back_to_input_schema(self) -> None:
        parsed = parse_tool_definition(
            "weather", {"parameters": "not a schema", "input_schema": _WEATHER_SCHEMA}
        )
        assert isinstance(parsed, RecognizedFunctionTool)
        assert parsed.parameters == _WEATHER_SCHEMA

    def test_parameters_win_over_input_schema(self) -> None:
        parsed = parse_tool_definition(
            "t", {"parameters": {"type": "object"}, "input_schema": _WEATHER_SCHEMA}
        )
        assert isinstance(parsed, RecognizedFunctionTool)
        assert parsed.parameters == {"type": "object"}

    def test_non_string_description_ignored(self) -> None:
        parsed = parse_tool_definition("t", {"description": 42})
        assert parsed == UnknownTool(name="t")

    def test_unrecognised_shapes(self) -> None:
        assert parse_tool_definition("a", {}) == UnknownTool(name="a")
        assert parse_tool_definition("b", None) == UnknownTool(name="b")
        assert parse_tool_definition("c", "just a string") == UnknownTool(name="c")


class TestConvertTools:
    def test_full_descriptor(self) -> None:
        tools = convert_tools({"weather": {"description": "Get weather", "parameters": _WEATHER_SCHEMA}})
        assert [t.to_payload() for t in tools] == [
            {
                "type": "function",
                "function": {
                    "name": "weather",
                    "description": "Get weather",
                    "parameters": _WEATHER_SCHEMA,
                },
            }
        ]

    def test_stub_for_unknown_definition(self) -> None:
        tools = convert_tools({"mystery": object()})
        assert len(tools) == 1
        assert tools[0].to_payload() == {"type": "function", "function": {"name": "mystery"}}

    def test_never_drops_and_keeps_order(self) -> None:
        tools = convert_tools(
            {
                "b": {"description": "second letter"},
                "a": 123,
                "c": {"input_schema": {"type": "object"}},
            }
        )
        assert [t.function.name for t in tools] == ["b", "a", "c"]

    def test_empty_mapping(self) -> None:
        assert convert_tools({}) == []
