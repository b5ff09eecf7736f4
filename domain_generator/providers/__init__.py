"""
Generative model providers.
"""

from domain_generator.providers.base import BaseProvider
from domain_generator.providers.gemini import GeminiProvider

__all__ = [
    "BaseProvider",
    "GeminiProvider",
]
