"""
Request validation for domain generation.

Turns the raw request body into a GenerationRequest before anything is sent
to the provider.
"""

from typing import Any

from pydantic import ValidationError

from domain_generator.core.errors import InvalidRequestError
from domain_generator.core.logging import get_logger
from domain_generator.core.models import GenerationRequest

log = get_logger(__name__)


def validate(raw: Any) -> GenerationRequest:
    """
    Validate a raw request body.

    Args:
        raw: Decoded JSON body (normally a dict in the camelCase wire format)

    Returns:
        The validated, immutable GenerationRequest

    Raises:
        InvalidRequestError: with one message per offending field
    """
    try:
        request = GenerationRequest.model_validate(raw)
    except ValidationError as e:
        messages = [_format_error(error) for error in e.errors()]
        log.info("domain_request_invalid", errors=messages)
        raise InvalidRequestError(messages) from e

    log.debug(
        "domain_request_validated",
        tones=[tone.value for tone in request.tones],
        extension=request.extension,
    )
    return request


def _format_error(error: dict) -> str:
    """Render a pydantic error as 'field: message'."""
    field = ".".join(str(part) for part in error["loc"]) or "request"
    return f"{field}: {error['msg']}"
