"""Provider wire schema (OpenAI Chat Completions messages, tool calls, tools).

These models shape and parse only the ``messages`` and ``tools`` arrays of a
request; the outer HTTP envelope belongs to the transport.
"""

from typing import Any, Literal

from pydantic import BaseModel


class FunctionInvocation(BaseModel):
    """Function name plus JSON-encoded arguments inside a :class:`ToolCall`."""

    name: str
    arguments: str = "{}"


class ToolCall(BaseModel):
    """A structured tool invocation carried by an assistant message."""

    id: str
    type: str = "function"
    function: FunctionInvocation

    @classmethod
    def for_function(cls, call_id: str, name: str, arguments: str) -> "ToolCall":
        return cls(id=call_id, function=FunctionInvocation(name=name, arguments=arguments))


class WireMessage(BaseModel):
    """A single role-tagged message in the provider's flat format.

    One of three shapes:
    - a plain text message (``content`` only)
    - an assistant message carrying ``tool_calls`` (and optional text)
    - a ``tool`` message answering the call named by ``tool_call_id``
    """

    role: str
    content: str | None = None
    tool_calls: list[ToolCall] = []
    tool_call_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Render as a JSON-ready dict, omitting absent optional fields."""
        result: dict[str, Any] = {"role": self.role}
        if self.content is not None:
            result["content"] = self.content
        if self.tool_calls:
            result["tool_calls"] = [tc.model_dump() for tc in self.tool_calls]
        if self.tool_call_id is not None:
            result["tool_call_id"] = self.tool_call_id
        return result

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "WireMessage":
        """Parse a wire dict, tolerating ``null`` for ``tool_calls``."""
        return cls(
            role=data["role"],
            content=data.get("content"),
            tool_calls=data.get("tool_calls") or [],
            tool_call_id=data.get("tool_call_id"),
        )


class FunctionSpec(BaseModel):
    """Name, description and JSON Schema parameters of a callable tool."""

    name: str
    description: str | None = None
    parameters: dict[str, Any] | None = None


class Tool(BaseModel):
    """A tool descriptor as sent in the request's ``tools`` array."""

    type: Literal["function"] = "function"
    function: FunctionSpec

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Usage(BaseModel):
    """Token accounting reported by the provider."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
