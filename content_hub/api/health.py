"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter, Depends
from redis.exceptions import RedisError

from content_hub.api.deps import get_state
from content_hub.core.config import settings
from content_hub.core.events import AppStateDict
from content_hub.core.logging import get_logger
from content_hub.models import utc_timestamp

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(state: AppStateDict = Depends(get_state)) -> dict[str, Any]:
    """
    Health check endpoint.

    Returns
    -------
        Service status and the state of the Redis connection
    """
    store = getattr(state, "store", None)
    if store is None:
        redis_status = "not configured"
    else:
        try:
            redis_status = "online" if await store.ping() else "offline"
        except RedisError as e:
            logger.warning("redis_health_check_failed", error=str(e))
            redis_status = "offline"

    return {
        "status": "online",
        "app": settings.app_name,
        "timestamp": utc_timestamp(),
        "services": {
            "redis": {"configured": store is not None, "status": redis_status},
        },
    }
