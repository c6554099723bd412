"""Sync trigger, sync status and store statistics endpoints."""

from typing import Any

from fastapi import APIRouter, Depends
from redis.exceptions import RedisError

from content_hub.api.deps import get_store, get_sync_service
from content_hub.core.errors import UpstreamError
from content_hub.core.logging import get_logger
from content_hub.models import SyncResult, utc_timestamp
from content_hub.store.redis_store import SYNC_RESULT_KEY, ContentRedis
from content_hub.sync.service import SyncService

logger = get_logger(__name__)

router = APIRouter(tags=["sync"])

NO_SYNC_MESSAGE = "No sync has been performed yet"


def format_bytes(size: int) -> str:
    """Format a byte count as e.g. ``1.5MB``."""
    if size <= 0:
        return "0B"
    units = ("B", "KB", "MB", "GB")
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(units) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g}{units[unit]}"


@router.get("/sync-status")
async def sync_status(store: ContentRedis = Depends(get_store)) -> dict[str, Any]:
    """Return the last recorded sync result, or an empty one."""
    try:
        last = await store.get(SYNC_RESULT_KEY)
    except RedisError as e:
        raise UpstreamError("Internal server error") from e

    if not last:
        last = SyncResult(errors=[NO_SYNC_MESSAGE]).model_dump(exclude={"logs"})
    return {"success": True, "lastSync": last}


@router.post("/sync")
async def trigger_sync(sync: SyncService = Depends(get_sync_service)) -> dict[str, Any]:
    """Flush the store and sync it again from the public directory.

    Raises:
        SyncInProgressError: If a sync is already running
        UpstreamError: If the store cannot be flushed
    """
    logger.info("manual_sync_requested")
    try:
        result = await sync.resync()
    except RedisError as e:
        raise UpstreamError("Sync failed", details=str(e)) from e
    return {"success": True, "data": result.model_dump()}


@router.get("/redis-stats")
async def redis_stats(store: ContentRedis = Depends(get_store)) -> dict[str, Any]:
    """Memory usage of the content store."""
    try:
        stats = await store.get_memory_stats()
    except RedisError as e:
        raise UpstreamError("Failed to retrieve Redis stats") from e

    used = int(stats["used_memory"])
    maximum = int(stats["maxmemory"])
    return {
        "memory": {
            "used": stats["used_memory_human"],
            "peak": stats["used_memory_peak_human"],
            "max": stats["maxmemory_human"],
            "available": format_bytes(maximum - used),
            "percentage": stats["percentage"],
        },
        "raw": stats,
        "timestamp": utc_timestamp(),
    }
