"""Model configuration: provider, model name, session and tool-call id settings."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """Configuration for a chat-completion model.

    The ``model`` field uses LiteLLM's naming convention:
    ``provider/model_name`` (e.g. ``openai/gpt-4o``).

    ``default_session_id`` keys the history of calls that carry no session.
    ``tool_call_ids`` selects how missing tool-call ids are derived
    (see :func:`chatbridge.core.translation.ids.build_id_strategy`).
    """

    model: str
    api_key: str | None = None
    api_base: str | None = None
    default_session_id: str = "default"
    tool_call_ids: Literal["name", "counter", "random"] = "name"
    extra: dict[str, Any] = Field(default_factory=lambda: dict[str, Any]())

    @property
    def provider(self) -> str:
        """Extract the provider prefix from the model string."""
        if "/" in self.model:
            return self.model.split("/", 1)[0]
        return "openai"
