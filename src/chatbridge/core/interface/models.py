"""Canonical content: the agent runtime's neutral, multimodal turn format.

A :class:`Content` is one turn: a role plus an ordered list of heterogeneous
parts.  Translators in :mod:`chatbridge.core.translation` convert it to and
from the provider's flat wire messages.
"""

from typing import Any, Literal

from pydantic import BaseModel

# ---------------------------------------------------------------------------
# Parts: the closed set of things a turn can carry
# ---------------------------------------------------------------------------


class TextPart(BaseModel):
    """Plain text part."""

    type: Literal["text"] = "text"
    text: str


class FunctionCall(BaseModel):
    """A request from the model to invoke a named function.

    ``id`` correlates the call with the :class:`FunctionResponse` answering
    it.  When empty, translators derive one from the function name.
    """

    type: Literal["function_call"] = "function_call"
    id: str | None = None
    name: str
    args: dict[str, Any] = {}


class FunctionResponse(BaseModel):
    """The result of a function call, sent back to the model."""

    type: Literal["function_response"] = "function_response"
    id: str | None = None
    name: str
    response: dict[str, Any] = {}


class InlineData(BaseModel):
    """Raw binary payload (e.g. an image) with its MIME type."""

    type: Literal["inline_data"] = "inline_data"
    mime_type: str = ""
    data: bytes = b""


class FileReference(BaseModel):
    """Reference to a file by URI (``gs://``, ``https://``, ``file://``...)."""

    type: Literal["file_reference"] = "file_reference"
    uri: str = ""


class ExecutableCode(BaseModel):
    """Source code produced by the model for execution."""

    type: Literal["executable_code"] = "executable_code"
    language: str = ""
    code: str = ""


class ExecutionResult(BaseModel):
    """Outcome and output of running :class:`ExecutableCode`."""

    type: Literal["execution_result"] = "execution_result"
    outcome: str = ""
    output: str = ""


Part = (
    TextPart
    | FunctionCall
    | FunctionResponse
    | InlineData
    | FileReference
    | ExecutableCode
    | ExecutionResult
)


# ---------------------------------------------------------------------------
# Content: one turn
# ---------------------------------------------------------------------------


class Content(BaseModel):
    """A single turn in canonical form.

    Roles are free text. ``"model"`` marks turns produced by the LLM;
    everything else is treated as user input.

    ``metadata`` is passthrough data that does not affect translation
    (token usage on converted replies, for instance).
    """

    role: str = "user"
    parts: list[Part] = []
    metadata: dict[str, Any] = {}

    @property
    def text(self) -> str:
        """Concatenated text of all :class:`TextPart` parts."""
        return "".join(part.text for part in self.parts if isinstance(part, TextPart))

    @property
    def function_calls(self) -> list[FunctionCall]:
        """All :class:`FunctionCall` parts, in order."""
        return [part for part in self.parts if isinstance(part, FunctionCall)]

    @classmethod
    def user(cls, text: str, **metadata: Any) -> "Content":
        """Create a user turn with a single text part."""
        parts: list[Part] = [TextPart(text=text)]
        return cls(role="user", parts=parts, metadata=metadata)

    @classmethod
    def model(cls, *parts: Part, **metadata: Any) -> "Content":
        """Create a model turn from the given parts."""
        return cls(role="model", parts=list(parts), metadata=metadata)
