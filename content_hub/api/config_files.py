"""Languages configuration endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from content_hub.api.deps import get_content_provider
from content_hub.content.provider import ContentProvider, ContentUnavailableError
from content_hub.core.errors import NotFoundError, UpstreamError

router = APIRouter(tags=["config"])

LANGUAGES_FILES = frozenset({"languages", "languages.json"})


def load_languages(provider: ContentProvider) -> Any:
    """Load ``languages.json``, mapping a load failure to a 500."""
    try:
        return provider.load_languages_config()
    except ContentUnavailableError as e:
        raise UpstreamError("Failed to load configuration") from e


@router.get("/config-file/languages")
async def languages_config(
    provider: ContentProvider = Depends(get_content_provider),
) -> Any:
    return load_languages(provider)


@router.get("/config-file/languages.json")
async def languages_config_file(
    provider: ContentProvider = Depends(get_content_provider),
) -> Any:
    return load_languages(provider)


@router.get("/config-file")
async def config_file_root() -> Any:
    raise NotFoundError("Config file not found")


@router.get("/config-file/{path:path}")
async def config_file(
    path: str, provider: ContentProvider = Depends(get_content_provider)
) -> Any:
    """Serve a config file by path; only the languages configuration exists."""
    if path.strip("/") not in LANGUAGES_FILES:
        raise NotFoundError("Config file not found")
    return load_languages(provider)


@router.get("/v1/config")
async def v1_config(provider: ContentProvider = Depends(get_content_provider)) -> Any:
    """Application configuration, including the available languages."""
    return load_languages(provider)
