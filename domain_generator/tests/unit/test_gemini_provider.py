"""Unit tests for the Gemini provider."""

from unittest.mock import MagicMock, patch

import pytest

from domain_generator.core.errors import ProviderConfigurationError
from domain_generator.prompts import SUGGESTION_SCHEMA
from domain_generator.providers.gemini import GeminiProvider


@pytest.fixture
def mock_client():
    """Patch genai.Client with a mock returning a canned response."""
    with patch("domain_generator.providers.gemini.genai.Client") as client_cls:
        client = MagicMock()
        client.models.generate_content.return_value = MagicMock(text='[{"name": "a"}]')
        client_cls.return_value = client
        yield client_cls


class TestGeminiProvider:
    """Tests for GeminiProvider."""

    def test_generate_returns_text(self, mock_client):
        """Test the raw response text is returned."""
        provider = GeminiProvider(api_key="test-gemini-key", model="gemini-2.5-pro")

        assert provider.generate("prompt", SUGGESTION_SCHEMA) == '[{"name": "a"}]'
        mock_client.assert_called_once_with(api_key="test-gemini-key")

    def test_requests_json_with_schema(self, mock_client):
        """Test the call asks for JSON output constrained by the schema."""
        provider = GeminiProvider(api_key="test-gemini-key", model="gemini-2.5-pro")

        provider.generate("the prompt", SUGGESTION_SCHEMA)

        kwargs = mock_client.return_value.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-pro"
        assert kwargs["contents"] == "the prompt"
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].response_schema is not None

    def test_client_created_once(self, mock_client):
        """Test the client is reused across calls."""
        provider = GeminiProvider(api_key="test-gemini-key", model="gemini-2.5-pro")

        provider.generate("one", SUGGESTION_SCHEMA)
        provider.generate("two", SUGGESTION_SCHEMA)

        assert mock_client.call_count == 1

    def test_missing_key(self, mock_client):
        """Test a missing key raises before any client is created."""
        provider = GeminiProvider(api_key="", model="gemini-2.5-pro")

        with pytest.raises(ProviderConfigurationError):
            provider.generate("prompt", SUGGESTION_SCHEMA)

        mock_client.assert_not_called()

    def test_none_text(self, mock_client):
        """Test a response without text yields None."""
        mock_client.return_value.models.generate_content.return_value = MagicMock(text=None)
        provider = GeminiProvider(api_key="test-gemini-key", model="gemini-2.5-pro")

        assert provider.generate("prompt", SUGGESTION_SCHEMA) is None

    def test_errors_propagate(self, mock_client):
        """Test SDK errors are not swallowed."""
        mock_client.return_value.models.generate_content.side_effect = RuntimeError("boom")
        provider = GeminiProvider(api_key="test-gemini-key", model="gemini-2.5-pro")

        with pytest.raises(RuntimeError, match="boom"):
            provider.generate("prompt", SUGGESTION_SCHEMA)
