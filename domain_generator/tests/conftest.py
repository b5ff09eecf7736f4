"""
Shared pytest fixtures for domain_generator tests.
"""

import json

import pytest

from domain_generator.core.models import GenerationRequest, Tone
from domain_generator.generator import SuggestionGenerator
from domain_generator.providers.base import BaseProvider


class StubProvider(BaseProvider):
    """Provider returning a canned payload (or raising) and recording calls."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def generate(self, prompt: str, schema: dict) -> str | None:
        self.calls.append((prompt, schema))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sample_request() -> GenerationRequest:
    """Validated request for a handmade goods marketplace."""
    return GenerationRequest(
        business_type="handmade goods marketplace",
        keywords="craft, artisan, unique",
        tones=(Tone.PROFESSIONAL, Tone.MODERN),
        extension=".com",
    )


@pytest.fixture
def ten_suggestions() -> list[dict]:
    """Ten suggestions in the wire format Gemini is asked for."""
    return [
        {
            "name": f"CraftIdea{i}.com",
            "type": "Descriptive" if i % 2 else "Wordplay",
            "rationale": f"Reason number {i}.",
            "availability": "check",
            "telephoneTest": i % 3 != 0,
            "viralPotential": "High",
        }
        for i in range(10)
    ]


@pytest.fixture
def handmade_suggestions() -> list[dict]:
    """Five fixed suggestions for the handmade goods scenario."""
    return [
        {
            "name": "CraftVault.com",
            "type": "Descriptive",
            "rationale": "Combines 'craft' with 'vault', a secure repository for handmade treasures.",
            "availability": "available",
            "telephoneTest": True,
            "viralPotential": "High",
        },
        {
            "name": "ArtisanAlley.com",
            "type": "Wordplay",
            "rationale": "Alliteration makes it memorable; an alley is where artisans gather.",
            "availability": "check",
            "telephoneTest": True,
            "viralPotential": "Medium",
        },
        {
            "name": "HandmadeHQ.com",
            "type": "Descriptive",
            "rationale": "HQ reads as headquarters or high quality.",
        },
        {
            "name": "CraftedCo.com",
            "type": "Modern",
            "rationale": "Minimal 'Co' suffix for conscious consumers.",
            "availability": "taken",
        },
        {
            "name": "MakersMart.com",
            "type": "Descriptive",
            "rationale": "Names the audience (makers) and the function (marketplace).",
            "viralPotential": "High",
        },
    ]


@pytest.fixture
def stub_provider_factory():
    """Build StubProviders; payloads that are not strings are JSON-encoded."""

    def factory(payload=None, error: Exception | None = None) -> StubProvider:
        text = payload if payload is None or isinstance(payload, str) else json.dumps(payload)
        return StubProvider(text=text, error=error)

    return factory


@pytest.fixture
def stub_generator_factory(stub_provider_factory):
    """Build a (generator, provider) pair around a StubProvider."""

    def factory(payload=None, error: Exception | None = None):
        provider = stub_provider_factory(payload, error)
        return SuggestionGenerator(provider), provider

    return factory


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock settings for testing."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test-model")
    monkeypatch.delenv("API_KEY", raising=False)
