"""Per-session conversation history and request assembly."""

from chatbridge.core.history.assembler import RequestAssembler, resolve_session_id
from chatbridge.core.history.store import (
    HistoryStore,
    InMemoryHistoryStore,
    get_default_history_store,
)

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "RequestAssembler",
    "get_default_history_store",
    "resolve_session_id",
]
