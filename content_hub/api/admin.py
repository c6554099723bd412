"""Admin endpoints for managing stored content and languages."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from redis.exceptions import RedisError

from content_hub.api.deps import get_language_service, get_store, get_sync_service
from content_hub.content.provider import FOLDERS, ContentUnavailableError
from content_hub.core.errors import UpstreamError, ValidationError, require_fields
from content_hub.core.logging import get_logger
from content_hub.languages.service import LanguageService
from content_hub.models import FileIdentity, LanguageRequest, UploadRequest, utc_timestamp
from content_hub.store.redis_store import ContentRedis
from content_hub.sync.service import SyncService

logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.delete("/delete")
async def delete_file(
    identity: FileIdentity | None = Body(default=None),
    store: ContentRedis = Depends(get_store),
) -> dict[str, Any]:
    """Delete one content file from the store.

    Raises:
        ValidationError: If ``lang``, ``folder`` or ``filename`` is empty
        UpstreamError: If the store rejects the delete
    """
    identity = identity or FileIdentity()
    require_fields(lang=identity.lang, folder=identity.folder, filename=identity.filename)
    lang, folder, filename = identity.lang, identity.folder, identity.filename

    try:
        await store.delete_file(lang, folder, filename)  # type: ignore[arg-type]
    except RedisError as e:
        raise UpstreamError("Failed to delete file", details=str(e)) from e

    logger.info("file_deleted", lang=lang, folder=folder, filename=filename)
    return {"success": True, "message": f"File deleted: {lang}/{folder}/{filename}"}


@router.post("/upload")
async def upload_file(
    body: UploadRequest | None = Body(default=None),
    store: ContentRedis = Depends(get_store),
) -> dict[str, Any]:
    """Store one content file and register it for its language.

    Raises:
        ValidationError: If a field is empty or the folder is unknown
        UpstreamError: If the store rejects the write
    """
    body = body or UploadRequest()
    require_fields(
        lang=body.lang, folder=body.folder, filename=body.filename, content=body.content
    )
    if body.folder not in FOLDERS:
        raise ValidationError('Invalid folder. Must be "config" or "data"')
    lang, folder = body.lang, body.folder
    filename = body.filename.removesuffix(".json")  # type: ignore[union-attr]

    try:
        key = await store.upload_file(lang, folder, filename, body.content)  # type: ignore[arg-type]
    except RedisError as e:
        raise UpstreamError("Failed to upload file", details=str(e)) from e

    logger.info("file_uploaded", lang=lang, folder=folder, filename=filename)
    return {
        "success": True,
        "message": f"File uploaded: {lang}/{folder}/{filename}",
        "path": f"/api/collections/{lang}/{folder}/{filename}",
        "redisKey": key,
    }


@router.get("/language-check")
async def language_check(
    lang: str | None = Query(default=None, description="Language code to check"),
    languages: LanguageService = Depends(get_language_service),
) -> dict[str, Any]:
    """Report what adding a language would involve."""
    if not lang:
        raise ValidationError("Language code is required")
    try:
        checklist = languages.create_checklist(lang)
    except ContentUnavailableError as e:
        raise UpstreamError("Failed to check language") from e
    return {
        "languageCode": lang,
        "checklist": [item.model_dump() for item in checklist],
        "timestamp": utc_timestamp(),
    }


@router.get("/languages")
async def list_languages(store: ContentRedis = Depends(get_store)) -> dict[str, Any]:
    """List stored languages with their config and data files."""
    try:
        codes = await store.get_languages()
        structure = [await store.get_language_structure(code) for code in codes]
    except RedisError as e:
        raise UpstreamError("Failed to fetch languages", details=str(e)) from e
    return {"total": len(codes), "languages": structure}


@router.post("/languages")
async def create_language(
    body: LanguageRequest | None = Body(default=None),
    store: ContentRedis = Depends(get_store),
) -> dict[str, Any]:
    """Register a language in the store."""
    lang = (body or LanguageRequest()).lang
    require_fields(lang=lang)
    try:
        await store.create_language(lang)  # type: ignore[arg-type]
    except RedisError as e:
        raise UpstreamError("Failed to create language", details=str(e)) from e
    return {
        "success": True,
        "message": f"Language '{lang}' created successfully",
        "lang": lang,
    }


@router.get("/sync")
async def sync_state(
    store: ContentRedis = Depends(get_store),
    sync: SyncService = Depends(get_sync_service),
) -> dict[str, Any]:
    """Whether the store has been seeded and whether a sync is running."""
    try:
        seeded = await store.is_seeded()
    except RedisError as e:
        raise UpstreamError("Failed to check sync status", details=str(e)) from e
    return {
        "seeded": seeded,
        "syncing": sync.syncing,
        "message": "Redis has been seeded" if seeded else "Redis is empty, run a sync to seed",
    }
