from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest

from llm_client import APIKeyError, GroqClient, LLMError, RateLimitError


class _FakeCompletions:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.kwargs: list[dict] = []

    async def create(self, **kwargs):
        self.kwargs.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.result)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client(completions: _FakeCompletions, **kwargs) -> GroqClient:
    client = GroqClient(api_key="test-key", model="test-model", **kwargs)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


def test_missing_api_key(monkeypatch) -> None:
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    with pytest.raises(APIKeyError):
        GroqClient()


def test_generate_sends_prompts_and_params() -> None:
    completions = _FakeCompletions(result="Hello")
    out = asyncio.run(_client(completions).generate("sys", "user", max_tokens=50, temperature=0.2))

    assert out == "Hello"
    sent = completions.kwargs[0]
    assert sent["model"] == "test-model"
    assert sent["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "user"},
    ]
    assert sent["max_tokens"] == 50
    assert sent["temperature"] == 0.2


def test_temperature_omitted_by_default() -> None:
    completions = _FakeCompletions(result=None)
    out = asyncio.run(_client(completions).generate("sys", "user"))

    assert out == ""
    assert "temperature" not in completions.kwargs[0]
    assert completions.kwargs[0]["max_tokens"] == GroqClient.DEFAULT_MAX_TOKENS


def test_error_mapping() -> None:
    with pytest.raises(RateLimitError):
        asyncio.run(_client(_FakeCompletions(error=Exception("429 Too Many Requests")), max_retries=1).generate("s", "u"))
    with pytest.raises(APIKeyError):
        asyncio.run(_client(_FakeCompletions(error=Exception("401 unauthorized"))).generate("s", "u"))
    with pytest.raises(LLMError):
        asyncio.run(_client(_FakeCompletions(error=Exception("connection reset"))).generate("s", "u"))
