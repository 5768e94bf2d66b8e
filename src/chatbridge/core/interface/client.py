"""ChatModel: async chat-completion adapter over LiteLLM.

Callers hand in canonical turns and get a canonical ``model`` turn back.
History bookkeeping, tool schema conversion and wire translation happen
here; the HTTP transport (and any retry policy) is LiteLLM's.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import litellm

from chatbridge.core.history.assembler import RequestAssembler, resolve_session_id
from chatbridge.core.history.store import HistoryStore
from chatbridge.core.interface.config import ModelConfig
from chatbridge.core.interface.models import Content
from chatbridge.core.interface.wire import FunctionInvocation, ToolCall, Usage, WireMessage
from chatbridge.core.translation.content import ContentTranslator
from chatbridge.core.translation.ids import ToolCallIdStrategy, build_id_strategy
from chatbridge.core.translation.response import ResponseTranslator
from chatbridge.core.translation.tools import convert_tools
from chatbridge.utils.telemetry import (
    ATTR_FINISH_REASON,
    ATTR_MODEL,
    ATTR_PROVIDER,
    ATTR_SESSION_ID,
    ATTR_TOKENS_COMPLETION,
    ATTR_TOKENS_PROMPT,
    ATTR_TOKENS_TOTAL,
    ATTR_TOOLS,
    get_tracer,
)

_tracer = get_tracer(__name__)


class ChatModel:
    """Async client for generating model turns via LiteLLM.

    Usage::

        config = ModelConfig(model="openai/gpt-4o")
        model = ChatModel(config)
        reply = await model.generate([Content.user("Hello")], session_id="s-1")

    The reply is *not* written to history; pass it back in the next call's
    ``contents`` to keep the conversation going.
    """

    def __init__(
        self,
        config: ModelConfig,
        store: HistoryStore | None = None,
        *,
        id_strategy: ToolCallIdStrategy | None = None,
    ) -> None:
        self.config = config
        translator = ContentTranslator(id_strategy or build_id_strategy(config.tool_call_ids))
        self.assembler = RequestAssembler(
            store,
            translator,
            default_session_id=config.default_session_id,
        )
        self.response_translator = ResponseTranslator()

    async def generate(
        self,
        contents: Sequence[Content],
        *,
        session_id: str | None = None,
        tools: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Content:
        """Send the session's history plus *contents* and convert the reply.

        Args:
            contents: New canonical turns for this call.
            session_id: Conversation key; falls back to
                ``config.default_session_id``.
            tools: Tool registry definitions, keyed by tool name.
            **kwargs: Additional parameters passed to LiteLLM.

        Raises:
            MarshalError: a new turn could not be serialized.
            UnmarshalError: the reply's tool arguments are not valid JSON.
        """
        session = resolve_session_id(session_id, self.config.default_session_id)
        with _tracer.start_as_current_span("model.generate") as span:
            span.set_attribute(ATTR_MODEL, self.config.model)
            span.set_attribute(ATTR_PROVIDER, self.config.provider)
            span.set_attribute(ATTR_SESSION_ID, session)

            messages = self.assembler.build_request(session, contents)
            call_kwargs: dict[str, Any] = {
                "model": self.config.model,
                "messages": [msg.to_payload() for msg in messages],
                **self.config.extra,
                **kwargs,
            }
            if self.config.api_key:
                call_kwargs["api_key"] = self.config.api_key
            if self.config.api_base:
                call_kwargs["api_base"] = self.config.api_base
            if tools:
                call_kwargs["tools"] = [tool.to_payload() for tool in convert_tools(tools)]
                span.set_attribute(ATTR_TOOLS, len(tools))

            # Type stubs are incomplete
            response = await litellm.acompletion(**call_kwargs)  # pyright: ignore[reportUnknownMemberType]

            choice = response.choices[0]
            usage = _parse_usage(response)
            result = self.response_translator.convert(_parse_message(choice.message), usage)
            result.metadata["finish_reason"] = choice.finish_reason
            result.metadata["model"] = response.model

            if usage is not None:
                span.set_attribute(ATTR_TOKENS_PROMPT, usage.prompt_tokens)
                span.set_attribute(ATTR_TOKENS_COMPLETION, usage.completion_tokens)
                span.set_attribute(ATTR_TOKENS_TOTAL, usage.total_tokens)
            if choice.finish_reason is not None:
                span.set_attribute(ATTR_FINISH_REASON, str(choice.finish_reason))

            return result


def _parse_message(message: Any) -> WireMessage:
    """Read a LiteLLM (OpenAI-compatible) message object into a WireMessage."""
    tool_calls = [
        ToolCall(
            id=tc.id,
            type=tc.type or "function",
            function=FunctionInvocation(
                name=tc.function.name,
                arguments=tc.function.arguments or "{}",
            ),
        )
        for tc in message.tool_calls or []
    ]
    content = message.content if isinstance(message.content, str) else None
    return WireMessage(role="assistant", content=content, tool_calls=tool_calls)


def _parse_usage(response: Any) -> Usage | None:
    usage = getattr(response, "usage", None)
    if not usage:
        return None
    return Usage(
        prompt_tokens=usage.prompt_tokens or 0,
        completion_tokens=usage.completion_tokens or 0,
        total_tokens=usage.total_tokens or 0,
    )
