"""Chat conversations forwarded to an LLM provider."""

from typing import Any

from content_hub.core.metrics import CHAT_REQUESTS_TOTAL
from content_hub.llm.providers.base import BaseLLMProvider
from content_hub.models import ChatMessage

FALLBACK_RESPONSE = "Unable to generate response"


def build_messages(
    history: list[ChatMessage] | None, message: str
) -> list[ChatMessage]:
    """Append the new user message to the prior conversation."""
    return [*(history or []), ChatMessage(role="user", content=message)]


class ChatService:
    """Turns a conversation plus optional context into one reply."""

    def __init__(self, provider: BaseLLMProvider[Any]) -> None:
        self.provider = provider

    async def chat(self, messages: list[ChatMessage], context: str | None = None) -> str:
        """Send the conversation to the provider and return the reply text.

        Args:
            messages: Conversation, oldest first, ending with the user turn
            context: Optional background passed as a system message

        Returns:
            The assistant reply, or a fallback string if the model was silent

        Raises:
            LLMProviderError: If the provider call fails
        """
        payload: list[dict[str, Any]] = []
        if context:
            payload.append({"role": "system", "content": f"Context: {context}"})
        payload.extend(m.model_dump() for m in messages)

        try:
            response = await self.provider.generate(payload)
        except Exception:
            CHAT_REQUESTS_TOTAL.labels(outcome="failed").inc()
            raise
        CHAT_REQUESTS_TOTAL.labels(outcome="success").inc()
        return response.text.strip() or FALLBACK_RESPONSE
