"""
Prompts for domain name generation.
"""

from .domains import (
    NO_KEYWORDS,
    PROMPT as DOMAIN_PROMPT,
    SUGGESTION_COUNT,
    SUGGESTION_SCHEMA,
    join_tones,
)

__all__ = [
    "DOMAIN_PROMPT",
    "NO_KEYWORDS",
    "SUGGESTION_COUNT",
    "SUGGESTION_SCHEMA",
    "join_tones",
]
