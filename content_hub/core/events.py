"""Application startup and shutdown events."""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, cast

from redis.asyncio.client import Redis as AsyncRedis
from redis.exceptions import ConnectionError, TimeoutError

from content_hub.content.provider import ContentProvider
from content_hub.core.config import Settings, settings
from content_hub.core.logging import get_logger
from content_hub.llm.chat import ChatService
from content_hub.llm.config import LLMConfig
from content_hub.llm.providers.openai import OpenAIProvider
from content_hub.store.redis_store import ContentRedis
from content_hub.sync.service import SyncService
from content_hub.sync.startup import StartupSync

logger = get_logger(__name__)


class StoreInitError(Exception):
    """Raised when the Redis connection cannot be established."""


class AppStateDict:
    """Process-scoped collaborators shared by all request handlers."""

    def __init__(self, public_dir: Path | None = None) -> None:
        """Initialize state.

        Args:
            public_dir: Directory holding the static content
        """
        self.redis: AsyncRedis | None = None
        self.store: ContentRedis | None = None
        self.content = ContentProvider(public_dir or settings.PUBLIC_DIR)
        self.chat: ChatService | None = None
        self.sync: SyncService | None = None
        self.startup_sync: StartupSync | None = None

    def attach_store(self, store: ContentRedis) -> None:
        """Wire the store and the services that depend on it."""
        self.store = store
        self.sync = SyncService(store, self.content.public_dir)


async def create_redis_pool(config: Settings | None = None) -> AsyncRedis:
    """Create Redis connection pool with retry logic.

    Only connection setup is retried; individual store operations are
    attempted once.

    Args:
        config: Settings to read, defaults to the module settings

    Returns:
        Connected Redis client

    Raises:
        StoreInitError: If connection cannot be established after retries
    """
    config = config or settings
    if not config.REDIS_URL:
        raise StoreInitError("REDIS_URL is not configured")

    max_retries = config.REDIS_MAX_RETRIES
    retry_delay = config.REDIS_RETRY_DELAY

    for attempt in range(max_retries):
        try:
            pool = AsyncRedis.from_url(
                config.REDIS_URL,
                encoding="utf-8",
                decode_responses=True,
                max_connections=config.REDIS_POOL_SIZE,
                health_check_interval=15,
            )
            await pool.ping()
            logger.info("redis_pool_initialized", pool_size=config.REDIS_POOL_SIZE)
            return pool
        except (ConnectionError, TimeoutError) as e:
            if attempt == max_retries - 1:
                raise StoreInitError(f"Failed to initialize Redis pool: {e}") from e
            logger.warning(
                f"Redis connection attempt {attempt + 1}/{max_retries} "
                f"failed: {e}. Retrying in {retry_delay}s..."
            )
            await asyncio.sleep(retry_delay)

    raise StoreInitError("Failed to initialize Redis pool: max retries exceeded")


def create_chat_service(config: Settings | None = None) -> ChatService:
    """Create the chat service from settings."""
    config = config or settings
    llm_config = LLMConfig(
        model_name=config.CHAT_MODEL_NAME,
        temperature=config.CHAT_TEMPERATURE,
        max_tokens=config.CHAT_MAX_TOKENS,
        timeout=config.CHAT_TIMEOUT,
    )
    provider = OpenAIProvider(
        llm_config,
        api_key=config.HUGGINGFACEHUB_API_TOKEN,
        base_url=config.CHAT_BASE_URL,
    )
    return ChatService(provider)


def create_start_app_handler(
    app: Any,
    config: Settings | None = None,
    startup_sync: StartupSync | None = None,
) -> Callable[[], Awaitable[None]]:
    """Create startup event handler.

    Args:
        app: FastAPI application instance
        config: Settings to read, defaults to the module settings
        startup_sync: Process-wide startup sync trigger shared by every
            invocation of the handler

    Returns:
        Startup handler function
    """
    config = config or settings
    startup = startup_sync or StartupSync(enabled=config.STARTUP_SYNC_ENABLED)

    async def start_app() -> None:
        state = AppStateDict(public_dir=config.PUBLIC_DIR)
        state.chat = create_chat_service(config)

        state.startup_sync = startup

        if config.REDIS_URL:
            try:
                state.redis = await create_redis_pool(config)
            except StoreInitError as e:
                # Static routes keep working; store routes report 500
                logger.error("redis_unavailable", error=str(e))
            else:
                state.attach_store(ContentRedis(state.redis))
        else:
            logger.warning("redis_not_configured")

        app.state = state

        if state.sync is not None and state.store is not None:
            sync_service = state.sync
            await startup.register(
                lambda: sync_service.perform_sync(trigger="startup"),
                is_seeded=state.store.is_seeded,
            )

        logger.info(
            "application_startup_complete",
            redis_connected=state.store is not None,
            public_dir=str(config.PUBLIC_DIR),
            chat_model=config.CHAT_MODEL_NAME,
        )

    return start_app


def create_stop_app_handler(app: Any) -> Callable[[], Awaitable[None]]:
    """Create shutdown event handler.

    Args:
        app: FastAPI application instance

    Returns:
        Shutdown handler function
    """

    async def stop_app() -> None:
        state = cast(AppStateDict, app.state)
        redis = getattr(state, "redis", None)
        if redis is not None:
            logger.info("Closing Redis connections...")
            await redis.aclose()
            logger.info("Redis connections closed")
        logger.info("Application shutdown complete")

    return stop_app
