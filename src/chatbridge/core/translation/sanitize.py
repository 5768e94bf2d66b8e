"""Normalization of raw JSON text used as tool-call arguments."""

import json
import re
from typing import Any

from chatbridge.errors import SanitizeError

# A whole payload wrapped in a markdown code fence, optionally tagged "json".
_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?```$", re.DOTALL | re.IGNORECASE)


def _reject_constant(name: str) -> Any:
    raise SanitizeError(f"non-standard JSON constant {name}")


def sanitize_json_args(raw: str) -> str:
    """Return *raw* as compact, strictly valid JSON object text.

    * Blank input becomes ``"{}"``.
    * A surrounding markdown code fence is stripped.
    * ``NaN`` / ``Infinity`` and non-object payloads are rejected.

    Raises :class:`SanitizeError` when the text cannot be normalized.
    """
    text = raw.strip()
    if not text:
        return "{}"

    fenced = _FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1).strip()

    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise SanitizeError(str(exc)) from exc

    if not isinstance(value, dict):
        raise SanitizeError(f"expected a JSON object, got {type(value).__name__}")

    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
