"""Canonical turn -> wire messages.

A single turn may expand into several wire messages: at most one primary
message (text, or an assistant message carrying every tool call of the turn)
followed by one ``tool`` message per function response.
"""

import base64
import json
import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from chatbridge.core.interface.models import (
    Content,
    ExecutableCode,
    ExecutionResult,
    FileReference,
    FunctionCall,
    FunctionResponse,
    InlineData,
    Part,
    TextPart,
)
from chatbridge.core.interface.wire import ToolCall, WireMessage
from chatbridge.core.translation.ids import NameIdStrategy, ToolCallIdStrategy
from chatbridge.core.translation.sanitize import sanitize_json_args
from chatbridge.errors import MarshalError, SanitizeError

logger = logging.getLogger(__name__)

_EMPTY_ARGS = "{}"


def resolve_role(role: str | None) -> str:
    """Map a canonical role to its wire role (``model`` -> ``assistant``)."""
    return "assistant" if role == "model" else "user"


def join_text_parts(parts: list[str]) -> str:
    """Newline-join text fragments in encounter order."""
    return "\n".join(parts)


@dataclass
class _TurnBuffers:
    """Accumulators for one left-to-right pass over a turn's parts."""

    session_id: str
    turn: int
    text_parts: list[str] = field(default_factory=list)
    tool_calls: list[ToolCall] = field(default_factory=list)
    function_responses: list[WireMessage] = field(default_factory=list)
    call_counts: Counter[str] = field(default_factory=Counter)
    response_counts: Counter[str] = field(default_factory=Counter)


class ContentTranslator:
    """Converts canonical :class:`Content` turns into :class:`WireMessage` lists."""

    def __init__(
        self,
        id_strategy: ToolCallIdStrategy | None = None,
        sanitizer: Callable[[str], str] = sanitize_json_args,
    ) -> None:
        self.id_strategy: ToolCallIdStrategy = id_strategy or NameIdStrategy()
        self._sanitize = sanitizer

    def convert(
        self,
        content: Content | None,
        *,
        session_id: str = "",
        turn: int = 0,
    ) -> list[WireMessage]:
        """Translate one turn.

        Raises :class:`MarshalError` if call args or response payloads are not
        JSON-serializable.  A turn with nothing translatable yields ``[]``.
        """
        if content is None:
            return []

        role = resolve_role(content.role)
        buffers = _TurnBuffers(session_id=session_id, turn=turn)
        for part in content.parts:
            self._fold_part(part, buffers)

        messages: list[WireMessage] = []
        if buffers.tool_calls:
            msg = WireMessage(role="assistant", tool_calls=buffers.tool_calls)
            if buffers.text_parts:
                msg.content = join_text_parts(buffers.text_parts)
            messages.append(msg)
        elif buffers.text_parts:
            messages.append(WireMessage(role=role, content=join_text_parts(buffers.text_parts)))

        messages.extend(buffers.function_responses)
        return messages

    # ------------------------------------------------------------------
    # Per-variant handlers
    # ------------------------------------------------------------------

    def _fold_part(self, part: Part, buffers: _TurnBuffers) -> None:
        if isinstance(part, TextPart):
            if part.text:
                buffers.text_parts.append(part.text)
        elif isinstance(part, FunctionCall):
            self._on_function_call(part, buffers)
        elif isinstance(part, FunctionResponse):
            self._on_function_response(part, buffers)
        elif isinstance(part, InlineData):
            self._on_inline_data(part, buffers)
        elif isinstance(part, FileReference):
            if part.uri:
                buffers.text_parts.append(part.uri)
        elif isinstance(part, ExecutableCode):
            buffers.text_parts.append(f"```{part.language}\n{part.code}\n```")
        else:
            # ExecutionResult is the only remaining possibility
            result: ExecutionResult = part
            buffers.text_parts.append(f"Execution result ({result.outcome}): {result.output}")

    def _on_function_call(self, part: FunctionCall, buffers: _TurnBuffers) -> None:
        args_json = _marshal(part.args, part.name, "args")
        try:
            arguments = self._sanitize(args_json)
        except SanitizeError as exc:
            logger.warning("Invalid function args for %s sanitized to {}: %s", part.name, exc)
            arguments = _EMPTY_ARGS

        call_id = self._resolve_id(part.id, part.name, buffers.call_counts, buffers)
        buffers.tool_calls.append(ToolCall.for_function(call_id, part.name, arguments))

    def _on_function_response(self, part: FunctionResponse, buffers: _TurnBuffers) -> None:
        response_json = _marshal(part.response, part.name, "response")
        call_id = self._resolve_id(part.id, part.name, buffers.response_counts, buffers)
        buffers.function_responses.append(
            WireMessage(role="tool", content=response_json, tool_call_id=call_id)
        )

    @staticmethod
    def _on_inline_data(part: InlineData, buffers: _TurnBuffers) -> None:
        if not part.mime_type or not part.data:
            return
        encoded = base64.standard_b64encode(part.data).decode("ascii")
        buffers.text_parts.append(f"data:{part.mime_type};base64,{encoded}")

    def _resolve_id(
        self,
        part_id: str | None,
        name: str,
        counts: Counter[str],
        buffers: _TurnBuffers,
    ) -> str:
        occurrence = counts[name]
        counts[name] += 1
        if part_id:
            return part_id
        return self.id_strategy.derive(
            name,
            session_id=buffers.session_id,
            turn=buffers.turn,
            occurrence=occurrence,
        )


def _marshal(value: dict[str, Any], name: str, kind: str) -> str:
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise MarshalError(name, kind, str(exc)) from exc
