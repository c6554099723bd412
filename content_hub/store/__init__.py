"""Content store package."""

from content_hub.store.redis_store import (
    SYNC_RESULT_KEY,
    ContentRedis,
    file_key,
    file_list_key,
)

__all__ = ["SYNC_RESULT_KEY", "ContentRedis", "file_key", "file_list_key"]
