"""Tests for LLM configuration validation."""

import pytest

from content_hub.llm.config import LLMConfig
from content_hub.llm.providers.types import LLMResponse


def test_defaults() -> None:
    config = LLMConfig(model_name="test-model")
    assert config.temperature == 0.7
    assert config.max_tokens == 512
    assert config.timeout == 30
    assert config.stop_sequences == []


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"model_name": " "}, "model_name is required"),
        ({"model_name": "m", "temperature": 1.5}, "Temperature"),
        ({"model_name": "m", "max_tokens": 0}, "Max tokens"),
        ({"model_name": "m", "timeout": 0}, "Timeout"),
        ({"model_name": "m", "stop_sequences": [""]}, "Stop sequences"),
    ],
)
def test_invalid_values(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        LLMConfig(**kwargs)


def test_response_usage_coerced() -> None:
    response = LLMResponse(
        text="hi", model="m", usage={"prompt_tokens": 3.0, "total_tokens": None}
    )
    assert response.usage == {"prompt_tokens": 3}
    assert str(response) == "hi"
    assert response.content == "hi"


def test_response_rejects_negative_usage() -> None:
    with pytest.raises(ValueError):
        LLMResponse(text="hi", model="m", usage={"prompt_tokens": -1})


def test_response_rejects_blank_model() -> None:
    with pytest.raises(ValueError):
        LLMResponse(text="hi", model=" ")
