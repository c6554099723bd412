"""Request dependencies resolving the process-scoped collaborators.

Handlers depend on these rather than on ``app.state`` directly so that tests
can swap any collaborator with ``app.dependency_overrides``.
"""

from typing import cast

from fastapi import Depends, Request

from content_hub.content.provider import ContentProvider
from content_hub.core.errors import UpstreamError
from content_hub.core.events import AppStateDict
from content_hub.languages.service import LanguageService
from content_hub.llm.chat import ChatService
from content_hub.store.redis_store import ContentRedis
from content_hub.sync.service import SyncService


def get_state(request: Request) -> AppStateDict:
    return cast(AppStateDict, request.app.state)


def get_store(request: Request) -> ContentRedis:
    """Content store, or a 500 when Redis is not configured."""
    store = getattr(get_state(request), "store", None)
    if store is None:
        raise UpstreamError("Content store is not configured")
    return store


def get_content_provider(request: Request) -> ContentProvider:
    return get_state(request).content


def get_language_service(
    provider: ContentProvider = Depends(get_content_provider),
) -> LanguageService:
    return LanguageService(provider)


def get_chat_service(request: Request) -> ChatService:
    chat = getattr(get_state(request), "chat", None)
    if chat is None:
        raise UpstreamError("Chat service is not configured")
    return chat


def get_sync_service(request: Request) -> SyncService:
    sync = getattr(get_state(request), "sync", None)
    if sync is None:
        raise UpstreamError("Content store is not configured")
    return sync
