"""OpenTelemetry tracing helpers.

``get_tracer()`` works whether or not the SDK is installed: without a
configured provider the API hands out no-op tracers.

Usage::

    from chatbridge.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("history.build_request") as span:
        span.set_attribute(ATTR_SESSION_ID, session_id)

Exporting spans is left to the host application, which installs its own
SDK tracer provider.
"""

from __future__ import annotations

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_SESSION_ID = "chatbridge.session.id"
ATTR_HISTORY_MESSAGES = "chatbridge.history.messages"
ATTR_NEW_MESSAGES = "chatbridge.request.new_messages"
ATTR_TOOLS = "chatbridge.request.tools"
ATTR_MODEL = "chatbridge.model"
ATTR_PROVIDER = "chatbridge.provider"
ATTR_TOKENS_PROMPT = "chatbridge.tokens.prompt"
ATTR_TOKENS_COMPLETION = "chatbridge.tokens.completion"
ATTR_TOKENS_TOTAL = "chatbridge.tokens.total"
ATTR_FINISH_REASON = "chatbridge.finish_reason"

_INSTRUMENTATION_NAME = "chatbridge"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)

