"""
Data models for domain name generation.

Wire format is camelCase to match the web client; Python attributes are
snake_case. Requests are validated and frozen; suggestions are kept
exactly as the model returned them.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


DEFAULT_EXTENSION = ".com"

# Extensions offered by the web form; the request itself accepts any string
SUGGESTED_EXTENSIONS = [".com", ".ai", ".io", ".app", ".store", ".tech", ".co", ".net"]


class Tone(str, Enum):
    """Naming style preferences."""

    PROFESSIONAL = "professional"
    MODERN = "modern"
    BOLD = "bold"
    CLASSY = "classy"
    QUIRKY = "quirky"
    FUNNY = "funny"
    TRENDY = "trendy"
    MINIMALIST = "minimalist"


class GenerationRequest(BaseModel):
    """A validated request for domain name ideas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    business_type: str = Field(min_length=1)
    keywords: str | None = None
    tones: tuple[Tone, ...] = Field(min_length=1)
    extension: str = DEFAULT_EXTENSION

    @model_validator(mode="before")
    @classmethod
    def accept_single_tone(cls, data):
        """Treat the single-select `tone` field as a one-element `tones` set."""
        if isinstance(data, dict) and "tones" not in data and "tone" in data:
            data = {**data, "tones": [data["tone"]]}
        return data

    @field_validator("tones", mode="before")
    @classmethod
    def dedupe_tones(cls, value):
        if isinstance(value, (list, tuple)):
            seen = []
            for tone in value:
                if tone not in seen:
                    seen.append(tone)
            return tuple(seen)
        return value

    @field_validator("extension", mode="before")
    @classmethod
    def default_extension(cls, value):
        return DEFAULT_EXTENSION if value is None else value

    @property
    def has_keywords(self) -> bool:
        return bool(self.keywords and self.keywords.strip())


@dataclass(frozen=True)
class Suggestion:
    """
    A single domain name idea returned by the model.

    Wraps the parsed JSON object as-is: nothing is coerced, dropped or
    filled in, so any field may be absent or carry an unexpected type.
    """

    data: dict[str, Any]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Suggestion":
        return cls(data=copy.deepcopy(data))

    @property
    def name(self) -> Any:
        return self.data.get("name")

    @property
    def category(self) -> Any:
        return self.data.get("type")

    @property
    def rationale(self) -> Any:
        return self.data.get("rationale")

    @property
    def availability(self) -> Any:
        return self.data.get("availability")

    @property
    def passes_phonetic_test(self) -> Any:
        return self.data.get("telephoneTest")

    @property
    def viral_potential(self) -> Any:
        return self.data.get("viralPotential")

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, exactly as the model returned it."""
        return copy.deepcopy(self.data)


class GenerationResponse(BaseModel):
    """Successful response body."""

    suggestions: list[dict]

    @classmethod
    def from_suggestions(cls, suggestions: list[Suggestion]) -> "GenerationResponse":
        return cls(suggestions=[s.to_dict() for s in suggestions])


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str
    details: str | None = None


class OptionsResponse(BaseModel):
    """Form options for the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tones: list[str]
    extensions: list[str]
    default_extension: str
