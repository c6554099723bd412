"""OpenAI-compatible chat completion provider.

Targets any endpoint that speaks the OpenAI chat completions protocol; the
default configuration points at the Hugging Face inference router.
"""

from typing import Any, cast

from openai import AsyncOpenAI, OpenAIError
from openai.types.chat.chat_completion import ChatCompletion
from openai.types.completion_usage import CompletionUsage

from content_hub.core.logging import get_logger
from content_hub.llm.config import LLMConfig
from content_hub.llm.providers.base import BaseLLMProvider, LLMProviderError
from content_hub.llm.providers.types import LLMInput, LLMResponse

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://router.huggingface.co/v1"


def _validate_usage(usage: CompletionUsage | dict[str, Any] | None) -> dict[str, int]:
    """Convert usage statistics to plain integers.

    Args:
        usage: Raw usage statistics from API response

    Returns:
        dict[str, int]: Validated usage statistics
    """
    if usage is None:
        usage = {}
    elif isinstance(usage, CompletionUsage):
        usage = usage.model_dump()
    return {
        "prompt_tokens": int(usage.get("prompt_tokens") or 0),
        "completion_tokens": int(usage.get("completion_tokens") or 0),
        "total_tokens": int(usage.get("total_tokens") or 0),
    }


class OpenAIProvider(BaseLLMProvider[AsyncOpenAI]):
    """Chat completions over the OpenAI client library."""

    def __init__(
        self,
        config: LLMConfig,
        api_key: str | None = None,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the provider

        Args:
            config: Provider configuration
            api_key: API key for authentication
            base_url: Base URL for API endpoint
            headers: Additional HTTP headers
        """
        self._client: AsyncOpenAI | None = None
        super().__init__(
            config=config,
            api_key=api_key,
            base_url=base_url or DEFAULT_BASE_URL,
            headers=headers or {"X-Title": "Content Hub"},
        )

    @property
    def environment_key(self) -> str:
        """Get the environment variable name for the API key."""
        return "HUGGINGFACEHUB_API_TOKEN"

    @property
    def model(self) -> AsyncOpenAI:
        """Get or create the OpenAI client instance."""
        if self._client is None:
            api_key = self.api_key
            if not api_key:
                raise LLMProviderError(f"{self.environment_key} is not set")

            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=self.base_url,
                default_headers=self.headers,
                timeout=self.config.timeout,
                max_retries=0,
            )
        return self._client

    def _format_messages(self, prompt: LLMInput) -> list[dict[str, Any]]:
        if isinstance(prompt, str):
            return [{"role": "user", "content": prompt}]
        return prompt

    def _build_api_params(
        self, messages: list[dict[str, Any]], **overrides: Any
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "model": self.config.model_name,
            "messages": messages,
            "temperature": overrides.get("temperature", self.config.temperature),
        }
        max_tokens = overrides.get("max_tokens", self.config.max_tokens)
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if self.config.stop_sequences:
            params["stop"] = self.config.stop_sequences
        return params

    def _process_api_response(self, result: ChatCompletion) -> LLMResponse:
        usage = _validate_usage(result.usage)
        if not result.choices or not result.choices[0].message:
            return LLMResponse(text="", model=self.config.model_name, usage=usage)

        content = str(result.choices[0].message.content or "").strip()
        return LLMResponse(text=content, model=self.config.model_name, usage=usage)

    async def generate(self, prompt: LLMInput, **kwargs: Any) -> LLMResponse:
        """Generate a chat completion.

        Args:
            prompt: The prompt or chat messages to complete
            **kwargs: ``temperature`` or ``max_tokens`` overrides

        Returns:
            LLMResponse: The generated response

        Raises:
            LLMProviderError: If the API call fails
        """
        messages = self._format_messages(prompt)
        params = self._build_api_params(messages, **kwargs)

        logger.info(
            "chat_completion_request",
            base_url=self.base_url,
            model=params["model"],
            message_count=len(messages),
        )
        try:
            result = cast(
                ChatCompletion, await self.model.chat.completions.create(**params)
            )
        except OpenAIError as e:
            logger.error("chat_completion_failed", error=str(e))
            raise LLMProviderError(f"Error generating completion: {e}") from e

        logger.debug("chat_completion_response", raw=result.model_dump())
        return self._process_api_response(result)
