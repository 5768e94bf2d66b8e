"""Tool-call id derivation for calls and responses that arrive without one.

The default :class:`NameIdStrategy` is deterministic (``call_<name>``), so two
calls to the same function inside one turn share an id.  The counter and
random strategies trade that for uniqueness.
"""

import logging
from typing import Literal, Protocol
from uuid import uuid4

logger = logging.getLogger(__name__)

IdStrategyKind = Literal["name", "counter", "random"]


def derive_id(function_name: str) -> str:
    """Return the deterministic id ``call_<function_name>``."""
    return f"call_{function_name}"


class ToolCallIdStrategy(Protocol):
    """Derives a correlation id for a function call or response."""

    def derive(
        self,
        name: str,
        *,
        session_id: str = "",
        turn: int = 0,
        occurrence: int = 0,
    ) -> str:
        """Return an id for the *occurrence*-th part naming *name* in a turn."""
        ...


class NameIdStrategy:
    """``call_<name>``; ignores session, turn and occurrence."""

    def derive(
        self,
        name: str,
        *,
        session_id: str = "",
        turn: int = 0,
        occurrence: int = 0,
    ) -> str:
        return derive_id(name)


class CounterIdStrategy:
    """``call_<name>_<occurrence>``.

    Occurrences are counted per function name within one turn, separately
    for calls and for responses, so responses in turn N+1 line up with the
    calls of turn N by position.
    """

    def derive(
        self,
        name: str,
        *,
        session_id: str = "",
        turn: int = 0,
        occurrence: int = 0,
    ) -> str:
        return f"{derive_id(name)}_{occurrence}"


class RandomIdStrategy:
    """``call_<24 hex chars>``, unique per invocation.

    Responses must carry their call's id explicitly; a derived response id
    never matches anything.
    """

    def derive(
        self,
        name: str,
        *,
        session_id: str = "",
        turn: int = 0,
        occurrence: int = 0,
    ) -> str:
        call_id = f"call_{uuid4().hex[:24]}"
        logger.debug("Derived random id %s for %s (session=%s, turn=%d)", call_id, name, session_id, turn)
        return call_id


def build_id_strategy(kind: IdStrategyKind = "name") -> ToolCallIdStrategy:
    """Return the strategy registered under *kind*."""
    mapping: dict[str, ToolCallIdStrategy] = {
        "name": NameIdStrategy(),
        "counter": CounterIdStrategy(),
        "random": RandomIdStrategy(),
    }
    try:
        return mapping[kind]
    except KeyError:
        msg = f"Unknown tool call id strategy: {kind!r}"
        raise ValueError(msg) from None
