"""Conversation history stores.

:class:`HistoryStore` defines the storage protocol.
:class:`InMemoryHistoryStore` is the default dict-backed implementation with
per-session locking, shared process-wide via :func:`get_default_history_store`.

Histories are append-only and never evicted; a long-lived session grows
without bound.
"""

import threading
from typing import Protocol

from chatbridge.core.interface.wire import WireMessage


class HistoryStore(Protocol):
    """Session-keyed, append-only log of translated wire messages."""

    def get(self, session_id: str) -> list[WireMessage]:
        """Return the session's messages in order (empty if unseen)."""
        ...

    def append(self, session_id: str, *messages: WireMessage) -> None:
        """Add *messages* to the end of the session's history."""
        ...


class InMemoryHistoryStore:
    """Dict-backed :class:`HistoryStore`.

    ``_sessions_lock`` guards the key map; each session has its own lock, so
    appends to one session never interleave while different sessions do not
    contend.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, list[WireMessage]] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._sessions_lock = threading.Lock()

    def _session_lock(self, session_id: str) -> threading.Lock:
        with self._sessions_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
                self._sessions[session_id] = []
            return lock

    def get(self, session_id: str) -> list[WireMessage]:
        with self._sessions_lock:
            lock = self._locks.get(session_id)
        if lock is None:
            return []
        with lock:
            return list(self._sessions[session_id])

    def append(self, session_id: str, *messages: WireMessage) -> None:
        if not messages:
            return
        lock = self._session_lock(session_id)
        with lock:
            self._sessions[session_id].extend(messages)

    def sessions(self) -> list[str]:
        """Return the ids of all sessions seen so far."""
        with self._sessions_lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._sessions_lock:
            return len(self._sessions)


_default_store: InMemoryHistoryStore | None = None
_default_store_lock = threading.Lock()


def get_default_history_store() -> InMemoryHistoryStore:
    """Return (and lazily create) the process-wide history store."""
    global _default_store
    with _default_store_lock:
        if _default_store is None:
            _default_store = InMemoryHistoryStore()
        return _default_store
