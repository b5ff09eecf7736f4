"""
Suggestion generator: prompt construction, provider call, response parsing.
"""

import json

from domain_generator.config import Settings, settings as default_settings
from domain_generator.core.errors import (
    GenerationError,
    GenerationErrorKind,
    ProviderConfigurationError,
)
from domain_generator.core.logging import get_logger
from domain_generator.core.models import GenerationRequest, Suggestion
from domain_generator.prompts import (
    DOMAIN_PROMPT,
    NO_KEYWORDS,
    SUGGESTION_COUNT,
    SUGGESTION_SCHEMA,
    join_tones,
)
from domain_generator.providers import BaseProvider, GeminiProvider

log = get_logger(__name__)

# HTTP status codes are read from the error's `code`, never searched for in its text
QUOTA_MARKERS = ["quota", "resource_exhausted", "too many requests", "rate limit", "rate_limit"]
AUTH_MARKERS = ["api key", "api_key", "permission_denied", "unauthenticated"]


def build_prompt(request: GenerationRequest) -> str:
    """Render the naming prompt for a validated request."""
    return DOMAIN_PROMPT.format(
        count=SUGGESTION_COUNT,
        business_type=request.business_type,
        keywords=request.keywords if request.has_keywords else NO_KEYWORDS,
        tones=join_tones([tone.value for tone in request.tones]),
        extension=request.extension,
    )


class SuggestionGenerator:
    """Generates domain suggestions through a provider."""

    def __init__(self, provider: BaseProvider):
        self.provider = provider

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SuggestionGenerator":
        """Build a generator backed by Gemini using the given settings."""
        settings = settings or default_settings
        return cls(GeminiProvider(api_key=settings.gemini_api_key, model=settings.gemini_model))

    def generate(self, request: GenerationRequest) -> list[Suggestion]:
        """
        Generate domain name suggestions.

        The request must already be validated. No retries are attempted.

        Args:
            request: Validated generation request

        Returns:
            Suggestions in the order the model returned them

        Raises:
            GenerationError: classified by kind
        """
        prompt = build_prompt(request)

        log.info(
            "domain_generation_started",
            tones=[tone.value for tone in request.tones],
            extension=request.extension,
        )

        try:
            text = self.provider.generate(prompt, SUGGESTION_SCHEMA)
        except Exception as e:
            raise self._classify(e) from e

        if not text or not text.strip():
            log.error("gemini_empty_response")
            raise GenerationError(
                GenerationErrorKind.EMPTY_RESPONSE,
                "Empty response from Gemini API",
            )

        suggestions = self._parse_response(text)
        log.info("domains_generated", count=len(suggestions))
        return suggestions

    def _parse_response(self, response_text: str) -> list[Suggestion]:
        """
        Parse the JSON array returned by the model.

        Items are passed through untouched; only the array itself and its
        items being JSON objects are checked.
        """
        text = _strip_code_fence(response_text)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            log.error("gemini_parse_error", error=str(e), response_preview=text[:200])
            raise GenerationError(
                GenerationErrorKind.MALFORMED_RESPONSE,
                f"Gemini returned invalid JSON: {e}",
                raw_response=response_text,
            ) from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            log.error("gemini_parse_error", error="not a JSON array of objects", response_preview=text[:200])
            raise GenerationError(
                GenerationErrorKind.MALFORMED_RESPONSE,
                "Gemini response is not a JSON array of objects",
                raw_response=response_text,
            )

        return [Suggestion.from_dict(item) for item in data]

    def _classify(self, error: Exception) -> GenerationError:
        """Map a provider failure to a GenerationError."""
        if isinstance(error, ProviderConfigurationError):
            log.error("gemini_auth_error", error=str(error))
            return GenerationError(GenerationErrorKind.CONFIGURATION, str(error))

        code = getattr(error, "code", None)
        status = str(getattr(error, "status", "") or "")
        error_str = f"{error} {status}".lower()

        # Rate limit before auth: quota messages can mention the API key
        if code == 429 or any(x in error_str for x in QUOTA_MARKERS):
            log.error("gemini_rate_limit", error=str(error))
            return GenerationError(GenerationErrorKind.QUOTA_EXCEEDED, str(error))

        if code in (401, 403) or any(x in error_str for x in AUTH_MARKERS):
            log.error("gemini_auth_error", error=str(error))
            return GenerationError(GenerationErrorKind.CONFIGURATION, str(error))

        log.error("gemini_error", error=str(error), error_type=type(error).__name__)
        return GenerationError(
            GenerationErrorKind.UPSTREAM,
            f"Failed to generate domain names: {error}",
        )


def _strip_code_fence(response_text: str) -> str:
    """Remove a markdown code block around the payload, on one line or several."""
    text = response_text.strip()
    if not text.startswith("```"):
        return text

    text = text.removeprefix("```").removesuffix("```")
    if text[:4].lower() == "json":
        text = text[4:]
    return text.strip()
