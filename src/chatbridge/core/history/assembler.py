"""RequestAssembler: builds the outbound message list for a session.

Each call translates only the new turns and appends them to the session's
history, then resends the whole history.  Nothing is windowed or truncated.
"""

import logging
from collections.abc import Sequence

from chatbridge.core.history.store import HistoryStore, get_default_history_store
from chatbridge.core.interface.models import Content
from chatbridge.core.interface.wire import WireMessage
from chatbridge.core.translation.content import ContentTranslator
from chatbridge.utils.telemetry import (
    ATTR_HISTORY_MESSAGES,
    ATTR_NEW_MESSAGES,
    ATTR_SESSION_ID,
    get_tracer,
)

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

DEFAULT_SESSION_ID = "default"


def resolve_session_id(session_id: str | None, default: str = DEFAULT_SESSION_ID) -> str:
    """Return *session_id*, or *default* when it is missing or empty."""
    if session_id:
        return session_id
    logger.debug("No session id supplied, using %r", default)
    return default


class RequestAssembler:
    """Composes a :class:`HistoryStore` with a :class:`ContentTranslator`.

    Usage::

        assembler = RequestAssembler()
        messages = assembler.build_request("session-1", [Content.user("hi")])
    """

    def __init__(
        self,
        store: HistoryStore | None = None,
        translator: ContentTranslator | None = None,
        *,
        default_session_id: str = DEFAULT_SESSION_ID,
    ) -> None:
        self.store: HistoryStore = store if store is not None else get_default_history_store()
        self.translator = translator or ContentTranslator()
        self.default_session_id = default_session_id

    def build_request(
        self,
        session_id: str | None,
        contents: Sequence[Content | None],
    ) -> list[WireMessage]:
        """Return ``history + new_messages`` for the session.

        Raises :class:`~chatbridge.errors.MarshalError` before touching the
        store if any turn fails to translate.
        """
        session = resolve_session_id(session_id, self.default_session_id)
        with _tracer.start_as_current_span("history.build_request") as span:
            span.set_attribute(ATTR_SESSION_ID, session)

            history = self.store.get(session)

            new_messages: list[WireMessage] = []
            for content in contents:
                new_messages.extend(
                    self.translator.convert(
                        content,
                        session_id=session,
                        turn=len(history) + len(new_messages),
                    )
                )

            self.store.append(session, *new_messages)

            span.set_attribute(ATTR_HISTORY_MESSAGES, len(history))
            span.set_attribute(ATTR_NEW_MESSAGES, len(new_messages))
            logger.debug(
                "Session %s: %d history + %d new messages", session, len(history), len(new_messages)
            )
            return history + new_messages
