"""
Abstract base class for generative model providers.
"""

from abc import ABC, abstractmethod


class BaseProvider(ABC):
    """Narrow interface to a generative-language service."""

    @abstractmethod
    def generate(self, prompt: str, schema: dict) -> str | None:
        """
        Send a prompt and ask for JSON output matching a schema.

        Args:
            prompt: Full instruction text, sent as the only content
            schema: Structured output schema the response must follow

        Returns:
            Raw text payload, or None when the provider returned no text

        Raises:
            ProviderConfigurationError: when the provider has no credentials.
            Any provider SDK error is propagated unchanged.
        """
        pass
