"""Collection listing endpoints backed by the content store."""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from content_hub.api.deps import get_store
from content_hub.content.provider import FOLDERS
from content_hub.core.errors import NotFoundError, UpstreamError, ValidationError
from content_hub.store.redis_store import ContentRedis, file_key

router = APIRouter(prefix="/collections", tags=["collections"])

COLLECTION_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Cache-Control": "public, max-age=3600",
}


@router.get("/{lang}")
async def get_language_collections(
    lang: str, store: ContentRedis = Depends(get_store)
) -> dict[str, Any]:
    """List config and data files synced for a language."""
    try:
        return await store.get_language_structure(lang)
    except RedisError as e:
        raise UpstreamError("Failed to list collections", details=str(e)) from e


@router.get("/{lang}/{folder}")
async def get_collection_files(
    lang: str, folder: str, store: ContentRedis = Depends(get_store)
) -> dict[str, Any]:
    """List the filenames stored for a language folder.

    Returns:
        ``{lang, folder, files, count}``; an empty folder yields ``[]`` and 0
    """
    try:
        files = await store.get_file_list(lang, folder)
    except RedisError as e:
        raise UpstreamError("Failed to list collection files", details=str(e)) from e
    files = files or []
    return {"lang": lang, "folder": folder, "files": files, "count": len(files)}


@router.get("/{lang}/{folder}/{file}")
async def get_collection_file(
    lang: str, folder: str, file: str, store: ContentRedis = Depends(get_store)
) -> JSONResponse:
    """Fetch one stored document; the ``.json`` suffix is optional.

    Raises:
        ValidationError: If the folder is not ``config`` or ``data``
        NotFoundError: If the document has not been synced
    """
    if folder not in FOLDERS:
        raise ValidationError('Invalid folder. Must be "config" or "data"')
    filename = file.removesuffix(".json")

    try:
        data = await store.get(file_key(lang, folder, filename))
    except RedisError as e:
        raise UpstreamError("Failed to read collection file", details=str(e)) from e
    if data is None:
        raise NotFoundError(
            f"Could not find {filename}.json in {lang}/{folder}",
            details={"suggestion": "Make sure to run sync first to populate Redis"},
        )
    return JSONResponse(data, headers=COLLECTION_HEADERS)
