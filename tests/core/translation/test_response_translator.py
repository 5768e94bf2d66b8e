"""Tests for ResponseTranslator (wire message -> canonical model turn)."""

import pytest

from chatbridge.core.interface.models import Content, FunctionCall, TextPart
from chatbridge.core.interface.wire import FunctionInvocation, ToolCall, Usage, WireMessage
from chatbridge.core.translation.content import ContentTranslator
from chatbridge.core.translation.response import ResponseTranslator
from chatbridge.errors import UnmarshalError


def _call(call_id: str, name: str, arguments: str) -> ToolCall:
    return ToolCall(id=call_id, function=FunctionInvocation(name=name, arguments=arguments))


class TestResponseTranslator:
    def setup_method(self) -> None:
        self.translator = ResponseTranslator()

    def test_text_reply(self) -> None:
        result = self.translator.convert(WireMessage(role="assistant", content="hello"))
        assert result.role == "model"
        assert result.parts == [TextPart(text="hello")]
        assert "usage" not in result.metadata
        assert result.metadata["turn_complete"] is True

    def test_empty_or_missing_content_has_no_text_part(self) -> None:
        assert self.translator.convert(WireMessage(role="assistant", content="")).parts == []
        assert self.translator.convert(WireMessage(role="assistant")).parts == []

    def test_tool_call_id_is_preserved(self) -> None:
        msg = WireMessage(role="assistant", tool_calls=[_call("call_7", "search", '{"q": "x"}')])
        result = self.translator.convert(msg)
        assert len(result.parts) == 1
        part = result.parts[0]
        assert isinstance(part, FunctionCall)
        assert part.id == "call_7"
        assert part.name == "search"
        assert part.args == {"q": "x"}

    def test_text_comes_before_calls(self) -> None:
        msg = WireMessage(
            role="assistant",
            content="Searching.",
            tool_calls=[_call("a", "one", "{}"), _call("b", "two", '{"n": 2}')],
        )
        result = self.translator.convert(msg)
        assert isinstance(result.parts[0], TextPart)
        assert [p.id for p in result.function_calls] == ["a", "b"]
        assert result.function_calls[1].args == {"n": 2}

    def test_invalid_arguments_abort_conversion(self) -> None:
        msg = WireMessage(
            role="assistant",
            content="partial",
            tool_calls=[_call("ok", "fine", "{}"), _call("bad", "broken", "{not json")],
        )
        with pytest.raises(UnmarshalError, match="broken"):
            self.translator.convert(msg)

    def test_non_object_arguments_rejected(self) -> None:
        msg = WireMessage(role="assistant", tool_calls=[_call("x", "listy", "[1, 2]")])
        with pytest.raises(UnmarshalError) as excinfo:
            self.translator.convert(msg)
        assert excinfo.value.name == "listy"

    def test_null_arguments_read_as_empty_object(self) -> None:
        msg = WireMessage(role="assistant", tool_calls=[_call("n", "ping", "null")])
        result = self.translator.convert(msg)
        assert result.function_calls[0].args == {}

    def test_scalar_arguments_rejected(self) -> None:
        msg = WireMessage(role="assistant", tool_calls=[_call("s", "scalar", "42")])
        with pytest.raises(UnmarshalError, match="scalar"):
            self.translator.convert(msg)

    def test_non_function_tool_calls_are_skipped(self) -> None:
        custom = ToolCall(id="c", type="custom", function=FunctionInvocation(name="x", arguments="nope"))
        msg = WireMessage(role="assistant", tool_calls=[custom, _call("f", "real", "{}")])
        result = self.translator.convert(msg)
        assert [p.name for p in result.function_calls] == ["real"]

    def test_usage_is_attached(self) -> None:
        usage = Usage(prompt_tokens=10, completion_tokens=5, total_tokens=15)
        result = self.translator.convert(WireMessage(role="assistant", content="hi"), usage)
        assert result.metadata["usage"] == {
            "prompt_tokens": 10,
            "completion_tokens": 5,
            "total_tokens": 15,
        }


class TestRoundTrip:
    def test_text(self) -> None:
        wire = ContentTranslator().convert(Content.model(TextPart(text="hello")))
        back = ResponseTranslator().convert(wire[0])
        assert back.parts == [TextPart(text="hello")]

    def test_tool_call(self) -> None:
        original = FunctionCall(id="call_7", name="search", args={"q": "x"})
        wire = ContentTranslator().convert(Content.model(original))
        back = ResponseTranslator().convert(wire[0])
        assert back.parts == [original]
