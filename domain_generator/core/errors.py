"""
Error types for the generation pipeline.

Neither the validator nor the generator recovers from these; the HTTP
router decides how each one is presented to the client.
"""

from enum import Enum


class InvalidRequestError(Exception):
    """Raised when a generation request fails validation."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__("; ".join(messages))


class GenerationErrorKind(str, Enum):
    """Why a generation call failed."""

    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    CONFIGURATION = "configuration"
    QUOTA_EXCEEDED = "quota_exceeded"
    UPSTREAM = "upstream"


class GenerationError(Exception):
    """Raised when suggestions could not be produced."""

    def __init__(
        self,
        kind: GenerationErrorKind,
        message: str,
        raw_response: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.raw_response = raw_response
        super().__init__(message)

    def __repr__(self) -> str:
        return f"GenerationError(kind={self.kind.value!r}, message={self.message!r})"


class ProviderConfigurationError(Exception):
    """Raised by a provider that has no usable credentials."""
