"""LLM module for the chat endpoint"""

from content_hub.llm.chat import ChatService, build_messages
from content_hub.llm.config import LLMConfig
from content_hub.llm.providers.base import BaseLLMProvider, LLMProviderError
from content_hub.llm.providers.openai import OpenAIProvider

__all__ = [
    "BaseLLMProvider",
    "ChatService",
    "LLMConfig",
    "LLMProviderError",
    "OpenAIProvider",
    "build_messages",
]
