"""Async Groq API client"""

import asyncio
import os
from typing import Optional

from .exceptions import RateLimitError, APIKeyError, LLMError


class GroqClient:
    """Client for Groq API"""

    DEFAULT_MODEL = "llama-3.3-70b-versatile"
    DEFAULT_MAX_TOKENS = 350

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_retries: int = 3,
    ):
        """Initialize the Groq client

        Args:
            api_key: Groq API key. If not provided, reads from GROQ_API_KEY env var.
            model: Model to use (defaults to DEFAULT_MODEL)
            max_retries: Number of attempts on rate limit

        Raises:
            APIKeyError: If no API key is provided or found in environment
        """
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise APIKeyError(
                "GROQ_API_KEY not found. Set it as an environment variable or pass it to the constructor."
            )
        self.model = model or self.DEFAULT_MODEL
        self.max_retries = max(1, max_retries)
        self._client = None

    def _get_client(self):
        """Lazy initialization of Groq client"""
        if self._client is None:
            from groq import AsyncGroq
            self._client = AsyncGroq(api_key=self.api_key)
        return self._client

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Get a completion from Groq API

        Args:
            system_prompt: System prompt
            user_prompt: User prompt
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature (provider default when None)

        Returns:
            Response text, empty string if the model returned nothing

        Raises:
            RateLimitError: If rate limited after all retries
            APIKeyError: If the key is rejected
            LLMError: For other API errors
        """
        client = self._get_client()
        params = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens or self.DEFAULT_MAX_TOKENS,
        }
        if temperature is not None:
            params["temperature"] = temperature

        for attempt in range(self.max_retries):
            try:
                response = await client.chat.completions.create(**params)
                return response.choices[0].message.content or ""

            except Exception as e:
                error_msg = str(e).lower()

                # Check for rate limit errors
                if "rate" in error_msg or "limit" in error_msg or "429" in error_msg:
                    if attempt < self.max_retries - 1:
                        await asyncio.sleep(5 * (attempt + 1))
                        continue
                    raise RateLimitError(
                        f"API rate limit exceeded after {self.max_retries} retries",
                        retry_after=60,
                    ) from e

                # Check for auth errors
                if "auth" in error_msg or "key" in error_msg or "401" in error_msg:
                    raise APIKeyError("Invalid API key") from e

                raise LLMError(f"Groq API error: {e}") from e

        raise LLMError("Unexpected error in generate")
