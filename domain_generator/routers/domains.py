"""
Domain generation endpoints.

The only place where pipeline errors become HTTP status codes.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from domain_generator.core.errors import (
    GenerationError,
    GenerationErrorKind,
    InvalidRequestError,
)
from domain_generator.core.logging import get_logger
from domain_generator.core.models import (
    DEFAULT_EXTENSION,
    SUGGESTED_EXTENSIONS,
    ErrorResponse,
    GenerationResponse,
    OptionsResponse,
    Tone,
)
from domain_generator.generator import SuggestionGenerator
from domain_generator.validation import validate

log = get_logger(__name__)

router = APIRouter(prefix="/api")

INVALID_REQUEST_MESSAGE = "Invalid request data"

# kind -> (status, error, fixed details); None details means use the error message
ERROR_RESPONSES: dict[GenerationErrorKind, tuple[int, str, str | None]] = {
    GenerationErrorKind.QUOTA_EXCEEDED: (
        429,
        "API quota exceeded. Please try again later or check your Gemini API billing settings.",
        "The free tier has daily limits. Consider upgrading your Gemini API plan for higher quotas.",
    ),
    GenerationErrorKind.CONFIGURATION: (
        401,
        "API configuration error. Please check your Gemini API key.",
        None,
    ),
    GenerationErrorKind.EMPTY_RESPONSE: (
        500,
        "Failed to generate domain names. Please try again.",
        None,
    ),
    GenerationErrorKind.MALFORMED_RESPONSE: (
        500,
        "Failed to generate domain names. Please try again.",
        None,
    ),
    GenerationErrorKind.UPSTREAM: (
        500,
        "Failed to generate domain names. Please try again.",
        None,
    ),
}

_generator: SuggestionGenerator | None = None


def get_generator() -> SuggestionGenerator:
    """Get or create the process-wide generator."""
    global _generator
    if _generator is None:
        _generator = SuggestionGenerator.from_settings()
    return _generator


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def generation_error_response(e: GenerationError) -> JSONResponse:
    """Map a classified GenerationError to its HTTP response."""
    status_code, message, details = ERROR_RESPONSES[e.kind]
    return error_response(status_code, message, details or e.message)


@router.post("/generate-domains", response_model=GenerationResponse)
def generate_domains(
    payload: Any = Body(None),
    generator: SuggestionGenerator = Depends(get_generator),
):
    """
    Generate domain name ideas for a business.

    Runs in the threadpool; the Gemini call blocks until it returns.
    """
    try:
        request = validate(payload)
        suggestions = generator.generate(request)
        return GenerationResponse.from_suggestions(suggestions)

    except InvalidRequestError as e:
        return error_response(400, INVALID_REQUEST_MESSAGE, "; ".join(e.messages))

    except GenerationError as e:
        log.error("domain_generation_failed", kind=e.kind.value, error=e.message)
        return generation_error_response(e)

    except Exception as e:
        log.exception("domain_generation_unexpected_error", error=str(e))
        return error_response(500, "An unexpected error occurred. Please try again.")


@router.get("/options", response_model=OptionsResponse)
async def get_options():
    """Tones and extensions offered by the web form."""
    return OptionsResponse(
        tones=[tone.value for tone in Tone],
        extensions=SUGGESTED_EXTENSIONS,
        default_extension=DEFAULT_EXTENSION,
    )
