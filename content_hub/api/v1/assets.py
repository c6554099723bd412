"""Text assets synced from the ``files/`` directory."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from content_hub.api.deps import get_store
from content_hub.core.errors import NotFoundError, UpstreamError, ValidationError
from content_hub.core.logging import get_logger
from content_hub.models import AssetFileUpdate
from content_hub.store.redis_store import ContentRedis

logger = get_logger(__name__)

router = APIRouter(prefix="/assets/files", tags=["assets"])


@router.get("/{file}")
async def get_asset_file(file: str, store: ContentRedis = Depends(get_store)) -> JSONResponse:
    """Return the ``{name, content}`` record of an asset file."""
    try:
        record = await store.get_asset_file(file)
    except RedisError as e:
        raise UpstreamError("Internal server error") from e
    if not record:
        raise NotFoundError("File not found")
    return JSONResponse(record)


@router.put("/{file}")
async def update_asset_file(
    file: str,
    body: AssetFileUpdate | None = Body(default=None),
    store: ContentRedis = Depends(get_store),
) -> dict[str, Any]:
    """Replace the text of an asset file.

    Raises:
        ValidationError: If ``content`` is missing or not a string
    """
    content = (body or AssetFileUpdate()).content
    if not content or not isinstance(content, str):
        raise ValidationError("Content is required and must be a string")
    try:
        await store.set_asset_file(file, content)
    except RedisError as e:
        raise UpstreamError("Internal server error") from e
    logger.info("asset_file_updated", file=file)
    return {"success": True, "message": "File updated successfully"}


@router.delete("/{file}")
async def delete_asset_file(file: str, store: ContentRedis = Depends(get_store)) -> dict[str, Any]:
    try:
        await store.delete_asset_file(file)
    except RedisError as e:
        raise UpstreamError("Internal server error") from e
    logger.info("asset_file_deleted", file=file)
    return {"success": True, "message": "File deleted successfully"}
