"""Shared error types for the translation layer."""


class TranslationError(Exception):
    """Base error for all canonical <-> wire translation failures."""


class MarshalError(TranslationError):
    """A function call or function response could not be serialized to JSON."""

    def __init__(self, name: str, kind: str = "args", detail: str = "") -> None:
        self.name = name
        self.kind = kind
        self.detail = detail
        msg = f"Failed to marshal function {kind} for: {name}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class UnmarshalError(TranslationError):
    """Tool call arguments returned by the provider are not a JSON object."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(
            f"Failed to unmarshal tool call args for: {name}" + (f" ({detail})" if detail else "")
        )


class SanitizeError(TranslationError):
    """Raw argument JSON could not be normalized.

    Recoverable: translators substitute an empty object and carry on.
    """

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Invalid function args" + (f": {detail}" if detail else ""))
