"""
Gemini provider implementation.
"""

from google import genai
from google.genai import types

from domain_generator.core.errors import ProviderConfigurationError
from domain_generator.core.logging import get_logger
from domain_generator.providers.base import BaseProvider

log = get_logger(__name__)


class GeminiProvider(BaseProvider):
    """Calls Gemini with a JSON response schema."""

    def __init__(self, api_key: str, model: str):
        self.api_key = api_key
        self.model_name = model
        self._client: genai.Client | None = None

    @property
    def client(self) -> genai.Client:
        """Get or create the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise ProviderConfigurationError("GEMINI_API_KEY is required")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str, schema: dict) -> str | None:
        log.debug("gemini_request", model=self.model_name, prompt_chars=len(prompt))

        response = self.client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        return response.text
