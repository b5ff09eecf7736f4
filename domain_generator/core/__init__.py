"""Core modules for domain name generation."""

from .logging import configure_logging, get_logger
from .errors import (
    GenerationError,
    GenerationErrorKind,
    InvalidRequestError,
    ProviderConfigurationError,
)
from .models import (
    DEFAULT_EXTENSION,
    GenerationRequest,
    Suggestion,
    Tone,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "GenerationError",
    "GenerationErrorKind",
    "InvalidRequestError",
    "ProviderConfigurationError",
    "DEFAULT_EXTENSION",
    "GenerationRequest",
    "Suggestion",
    "Tone",
]
