"""Wire message -> canonical model turn."""

import json
from typing import Any

from chatbridge.core.interface.models import Content, FunctionCall, Part, TextPart
from chatbridge.core.interface.wire import ToolCall, Usage, WireMessage
from chatbridge.errors import UnmarshalError


class ResponseTranslator:
    """Converts a provider reply into a canonical ``model`` turn.

    Tool-call ids are carried over unchanged so a later
    :class:`~chatbridge.core.interface.models.FunctionResponse` can be
    correlated with the call.  Invalid argument JSON aborts the whole
    conversion.
    """

    def convert(self, msg: WireMessage, usage: Usage | None = None) -> Content:
        parts: list[Part] = []
        if msg.content:
            parts.append(TextPart(text=msg.content))

        for tool_call in msg.tool_calls:
            if tool_call.type != "function":
                continue
            parts.append(
                FunctionCall(
                    id=tool_call.id,
                    name=tool_call.function.name,
                    args=_parse_arguments(tool_call),
                )
            )

        metadata: dict[str, Any] = {"turn_complete": True}
        if usage is not None:
            metadata["usage"] = usage.model_dump()

        return Content(role="model", parts=parts, metadata=metadata)


def _parse_arguments(tool_call: ToolCall) -> dict[str, Any]:
    """Decode a tool call's JSON arguments into a mapping."""
    name = tool_call.function.name
    try:
        args = json.loads(tool_call.function.arguments)
    except (json.JSONDecodeError, TypeError) as exc:
        raise UnmarshalError(name, str(exc)) from exc
    if args is None:
        return {}
    if not isinstance(args, dict):
        raise UnmarshalError(name, f"expected a JSON object, got {type(args).__name__}")
    return args
