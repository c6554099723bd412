"""Unit tests for the OpenAI-compatible provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError
from openai.types.chat.chat_completion import ChatCompletion

from content_hub.llm.config import LLMConfig
from content_hub.llm.providers.base import LLMProviderError
from content_hub.llm.providers.openai import DEFAULT_BASE_URL, OpenAIProvider


@pytest.fixture
def openai_provider() -> OpenAIProvider:
    """Create provider with test config."""
    return OpenAIProvider(
        LLMConfig(model_name="mistralai/Mistral-7B-Instruct-v0.2", max_tokens=128),
        api_key="hf_test_token",
    )


@pytest.fixture
def mock_openai_client() -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock()
    return mock_client


def _completion(content: str | None) -> ChatCompletion:
    return ChatCompletion.model_validate(
        {
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "mistralai/Mistral-7B-Instruct-v0.2",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": content},
                }
            ],
            "usage": {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17},
        }
    )


def test_provider_defaults(openai_provider: OpenAIProvider) -> None:
    assert openai_provider.base_url == DEFAULT_BASE_URL
    assert openai_provider.headers == {"X-Title": "Content Hub"}
    assert openai_provider.environment_key == "HUGGINGFACEHUB_API_TOKEN"
    assert repr(openai_provider) == (
        "OpenAIProvider(model_name='mistralai/Mistral-7B-Instruct-v0.2')"
    )


def test_api_key_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUGGINGFACEHUB_API_TOKEN", "hf_env_token")
    provider = OpenAIProvider(LLMConfig(model_name="m"))
    assert provider.api_key == "hf_env_token"


def test_missing_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HUGGINGFACEHUB_API_TOKEN", raising=False)
    provider = OpenAIProvider(LLMConfig(model_name="m"))

    with pytest.raises(LLMProviderError, match="HUGGINGFACEHUB_API_TOKEN"):
        _ = provider.model


def test_client_created_once(openai_provider: OpenAIProvider) -> None:
    with patch("content_hub.llm.providers.openai.AsyncOpenAI") as client_class:
        first = openai_provider.model
        second = openai_provider.model

    assert first is second
    client_class.assert_called_once()
    kwargs = client_class.call_args.kwargs
    assert kwargs["api_key"] == "hf_test_token"
    assert kwargs["base_url"] == DEFAULT_BASE_URL
    assert kwargs["max_retries"] == 0


@pytest.mark.asyncio
async def test_generate_chat_messages(
    openai_provider: OpenAIProvider, mock_openai_client: MagicMock
) -> None:
    """Test chat messages are forwarded with configured parameters."""
    mock_openai_client.chat.completions.create.return_value = _completion("  Hi there ")
    messages = [{"role": "user", "content": "Hello"}]

    with patch.object(OpenAIProvider, "model", mock_openai_client):
        response = await openai_provider.generate(messages)

    assert response.text == "Hi there"
    assert response.usage == {
        "prompt_tokens": 12,
        "completion_tokens": 5,
        "total_tokens": 17,
    }
    params = mock_openai_client.chat.completions.create.await_args.kwargs
    assert params["messages"] == messages
    assert params["max_tokens"] == 128
    assert params["temperature"] == 0.7
    assert "stop" not in params


@pytest.mark.asyncio
async def test_generate_wraps_string_prompt(
    openai_provider: OpenAIProvider, mock_openai_client: MagicMock
) -> None:
    mock_openai_client.chat.completions.create.return_value = _completion("ok")

    with patch.object(OpenAIProvider, "model", mock_openai_client):
        await openai_provider.generate("Hello", temperature=0.1)

    params = mock_openai_client.chat.completions.create.await_args.kwargs
    assert params["messages"] == [{"role": "user", "content": "Hello"}]
    assert params["temperature"] == 0.1


@pytest.mark.asyncio
async def test_generate_empty_content(
    openai_provider: OpenAIProvider, mock_openai_client: MagicMock
) -> None:
    mock_openai_client.chat.completions.create.return_value = _completion(None)

    with patch.object(OpenAIProvider, "model", mock_openai_client):
        response = await openai_provider.generate("Hello")

    assert response.text == ""


@pytest.mark.asyncio
async def test_generate_api_error(
    openai_provider: OpenAIProvider, mock_openai_client: MagicMock
) -> None:
    """Test client errors surface as provider errors."""
    mock_openai_client.chat.completions.create.side_effect = APIConnectionError(
        request=httpx.Request("POST", f"{DEFAULT_BASE_URL}/chat/completions")
    )

    with patch.object(OpenAIProvider, "model", mock_openai_client):
        with pytest.raises(LLMProviderError, match="Error generating completion"):
            await openai_provider.generate("Hello")
