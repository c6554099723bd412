"""Redis-backed content store adapter."""

import builtins
import json
from typing import Any, Protocol

from content_hub.core.errors import require_fields
from content_hub.core.logging import get_logger

logger = get_logger(__name__)

# Key layout
CONFIG_KEY_PREFIX = "cms:config:"
LANGUAGES_CONFIG_KEY = f"{CONFIG_KEY_PREFIX}languages"
LANGUAGES_SET_KEY = "languages"
COLLECTION_INDEX_KEY = "index:collections"
SYNC_RESULT_KEY = "sync:last-result"
ASSET_FILE_KEY_PREFIX = "assets:files:"

MEMORY_STAT_FIELDS = (
    "used_memory",
    "used_memory_human",
    "used_memory_peak",
    "used_memory_peak_human",
    "maxmemory",
    "maxmemory_human",
)


def file_key(lang: str, folder: str, filename: str) -> str:
    """Key holding the payload of a content file."""
    return f"collection:{lang}:{folder}:{filename}"


def file_list_key(lang: str, folder: str) -> str:
    """Key of the set listing filenames in a language folder."""
    return f"files:{lang}:{folder}"


def asset_file_key(name: str) -> str:
    """Key holding a text asset synced from ``files/``."""
    return f"{ASSET_FILE_KEY_PREFIX}{name}"


class AsyncRedisProtocol(Protocol):
    """Subset of ``redis.asyncio.Redis`` used by the adapter."""

    async def get(self, name: str) -> Any: ...

    async def set(self, name: str, value: Any, ex: int | None = None) -> Any: ...

    async def delete(self, *names: str) -> int: ...

    async def exists(self, *names: str) -> int: ...

    async def keys(self, pattern: str = "*") -> list[Any]: ...

    async def sadd(self, name: str, *values: Any) -> int: ...

    async def srem(self, name: str, *values: Any) -> int: ...

    async def smembers(self, name: str) -> builtins.set[Any]: ...

    async def scard(self, name: str) -> int: ...

    async def flushdb(self) -> Any: ...

    async def info(self, section: str | None = None) -> dict[str, Any]: ...

    async def ping(self) -> Any: ...


def _text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


def _encode(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def _decode(raw: Any) -> Any:
    text = _text(raw)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class ContentRedis:
    """Typed accessors over the content key space.

    Every method makes a single round trip attempt; ``RedisError`` from the
    client propagates to the caller, which decides how to report it.
    """

    def __init__(self, client: AsyncRedisProtocol) -> None:
        """Initialize the adapter.

        Args:
            client: Connected asyncio Redis client
        """
        self.client = client

    async def ping(self) -> bool:
        return bool(await self.client.ping())

    async def get(self, key: str) -> Any | None:
        """Get a JSON-decoded value, or ``None`` if the key is absent."""
        raw = await self.client.get(key)
        if raw is None:
            return None
        return _decode(raw)

    async def set(self, key: str, value: Any, ex: int | None = None) -> None:
        """Store a value, JSON-encoding anything that is not already text.

        Args:
            key: Redis key
            value: Value to store
            ex: Optional expiry in seconds
        """
        await self.client.set(key, _encode(value), ex=ex)

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def exists(self, key: str) -> bool:
        return bool(await self.client.exists(key))

    async def keys(self, pattern: str) -> list[str]:
        return sorted(_text(key) for key in await self.client.keys(pattern))

    async def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern.

        Returns:
            Number of keys deleted
        """
        keys = await self.keys(pattern)
        if not keys:
            return 0
        await self.client.delete(*keys)
        return len(keys)

    async def flush_all(self) -> None:
        """Remove every key in the selected database."""
        await self.client.flushdb()
        logger.info("redis_flushed")

    async def get_memory_stats(self) -> dict[str, Any]:
        """Summarize ``INFO memory`` with a usage percentage."""
        info = await self.client.info("memory")
        stats: dict[str, Any] = {
            field: _text(info.get(field, "0")) for field in MEMORY_STAT_FIELDS
        }
        used = int(info.get("used_memory", 0) or 0)
        maximum = int(info.get("maxmemory", 0) or 0)
        stats["percentage"] = round(used / maximum * 100) if maximum > 0 else 0
        return stats

    async def upload_file(
        self, lang: str, folder: str, filename: str, content: Any
    ) -> str:
        """Store a content file and register it in the folder and language sets.

        Returns:
            The key the content was written to
        """
        require_fields(lang=lang, folder=folder, filename=filename)
        key = file_key(lang, folder, filename)
        await self.client.set(key, _encode(content))
        await self.client.sadd(file_list_key(lang, folder), filename)
        await self.client.sadd(LANGUAGES_SET_KEY, lang)
        return key

    async def get_file(self, lang: str, folder: str, filename: str) -> str | None:
        """Get the raw payload of a content file."""
        raw = await self.client.get(file_key(lang, folder, filename))
        return None if raw is None else _text(raw)

    async def delete_file(self, lang: str, folder: str, filename: str) -> None:
        """Delete a content file and drop it from its folder listing.

        Raises:
            ValidationError: If any part of the file identity is empty
        """
        require_fields(lang=lang, folder=folder, filename=filename)
        await self.client.delete(file_key(lang, folder, filename))
        await self.client.srem(file_list_key(lang, folder), filename)

    async def get_file_list(self, lang: str, folder: str) -> list[str]:
        """List filenames in a language folder in sorted order."""
        members = await self.client.smembers(file_list_key(lang, folder))
        return sorted(_text(member) for member in members or ())

    async def get_asset_file(self, name: str) -> Any | None:
        """Get the ``{name, content}`` record of a text asset."""
        return await self.get(asset_file_key(name))

    async def set_asset_file(self, name: str, content: str) -> None:
        await self.set(asset_file_key(name), {"name": name, "content": content})

    async def delete_asset_file(self, name: str) -> None:
        await self.client.delete(asset_file_key(name))

    async def get_languages(self) -> list[str]:
        members = await self.client.smembers(LANGUAGES_SET_KEY)
        return sorted(_text(member) for member in members or ())

    async def create_language(self, lang: str) -> None:
        require_fields(lang=lang)
        await self.client.sadd(LANGUAGES_SET_KEY, lang)
        logger.info("language_created", lang=lang)

    async def get_language_structure(self, lang: str) -> dict[str, Any]:
        """Return ``{lang, config, data}`` with the files of both folders."""
        return {
            "lang": lang,
            "config": await self.get_file_list(lang, "config"),
            "data": await self.get_file_list(lang, "data"),
        }

    async def is_seeded(self) -> bool:
        """Whether a sync has already populated the store."""
        return bool(await self.client.scard(LANGUAGES_SET_KEY))
