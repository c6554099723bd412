"""Public content endpoints serving the static JSON collections."""

import json
from typing import Any

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from content_hub.api.deps import get_content_provider, get_state
from content_hub.content.provider import (
    CONTENT_CATEGORIES,
    DEFAULT_LANGUAGE,
    ContentProvider,
    ContentUnavailableError,
)
from content_hub.core.errors import NotFoundError, UpstreamError, ValidationError
from content_hub.core.events import AppStateDict
from content_hub.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/content", tags=["content"])

CONTENT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Cache-Control": "public, max-age=3600",
}

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _preflight() -> Response:
    return Response(status_code=200, headers=PREFLIGHT_HEADERS)


@router.get("")
async def list_content(
    provider: ContentProvider = Depends(get_content_provider),
) -> JSONResponse:
    """List the data and config documents that can be requested."""
    data_files = provider.list_files(DEFAULT_LANGUAGE, "data")
    config_files = provider.list_config_files()
    return JSONResponse(
        {
            "message": "Content API - Available files",
            "dataFiles": data_files,
            "configFiles": config_files,
            "totalFiles": len(data_files) + len(config_files),
            "categories": list(CONTENT_CATEGORIES),
            "usage": "GET /api/content/{lang}/{name}",
        },
        headers={"Access-Control-Allow-Origin": "*", "Cache-Control": "public, max-age=86400"},
    )


@router.options("")
async def list_content_options() -> Response:
    return _preflight()


@router.get("/{category}")
async def get_category(
    category: str,
    provider: ContentProvider = Depends(get_content_provider),
) -> JSONResponse:
    """Serve one English data collection verbatim.

    Raises:
        NotFoundError: If the category is not a known collection
        UpstreamError: If the collection file cannot be loaded
    """
    if category not in CONTENT_CATEGORIES:
        raise NotFoundError(f"Unknown content category: {category}")
    try:
        data = provider.load_collection(category)
    except ContentUnavailableError as e:
        raise UpstreamError(f"Failed to load {category} data") from e
    return JSONResponse(data, headers=CONTENT_HEADERS)


@router.options("/{category}")
async def category_options(category: str) -> Response:
    return _preflight()


async def _from_store(
    state: AppStateDict, lang: str, folder: str, name: str
) -> Any | None:
    store = getattr(state, "store", None)
    if store is None:
        return None
    try:
        raw = await store.get_file(lang, folder, name)
    except RedisError as e:
        logger.warning("content_store_read_failed", lang=lang, name=name, error=str(e))
        if lang != DEFAULT_LANGUAGE:
            raise UpstreamError("Failed to read content from store") from e
        return None
    if raw is None:
        return None
    return _parse(raw)


def _parse(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@router.get("/{lang}/{name}")
async def get_localized_content(
    lang: str,
    name: str,
    state: AppStateDict = Depends(get_state),
    provider: ContentProvider = Depends(get_content_provider),
) -> JSONResponse:
    """Serve a data or config document for a language.

    Synced content in the store wins; English falls back to the files on
    disk. Other languages are only available once synced.

    Raises:
        ValidationError: If a parameter tries to leave the content tree
        NotFoundError: If the name is unknown or the language is not synced
        UpstreamError: If the English fallback cannot be loaded
    """
    if ".." in lang or ".." in name or "\\" in lang or "\\" in name:
        raise ValidationError("Invalid parameters")

    data_files = provider.list_files(DEFAULT_LANGUAGE, "data")
    config_files = provider.list_config_files()
    if name in data_files:
        folder = "data"
    elif name in config_files:
        folder = "config"
    else:
        raise NotFoundError(
            f'"{name}" is not a valid config or data file',
            details={"availableDataFiles": data_files, "availableConfigFiles": config_files},
        )

    data = await _from_store(state, lang, folder, name)
    if data is not None:
        return JSONResponse(data, headers={**CONTENT_HEADERS, "X-Cache-Source": "redis"})

    if lang != DEFAULT_LANGUAGE:
        raise NotFoundError(
            f'Content for language "{lang}" is not available. '
            f'Please sync content or use "{DEFAULT_LANGUAGE}" for English.'
        )

    try:
        if folder == "data":
            data = provider.load_collection(name)
        else:
            data = provider.load_config(name)
    except ContentUnavailableError as e:
        raise UpstreamError(f"Failed to load {name}") from e
    return JSONResponse(
        data,
        headers={
            "Access-Control-Allow-Origin": "*",
            "Cache-Control": "public, max-age=86400",
            "X-Cache-Source": "static",
        },
    )


@router.options("/{lang}/{name}")
async def localized_content_options(lang: str, name: str) -> Response:
    return _preflight()
