"""LLM Client - Abstraction layer for LLM APIs"""

from .exceptions import LLMError, RateLimitError, APIKeyError
from .base import TextGenerator
from .groq_client import GroqClient

__all__ = [
    "LLMError",
    "RateLimitError",
    "APIKeyError",
    "TextGenerator",
    "GroqClient",
]
