"""Tests for the languages configuration endpoints."""

from pathlib import Path

import pytest
from fastapi import status
from httpx import AsyncClient

from tests.fixtures.content import LANGUAGES_CONFIG


async def test_fixed_routes_return_identical_bytes(
    test_app_async_client: AsyncClient,
) -> None:
    plain = await test_app_async_client.get("/api/config-file/languages")
    suffixed = await test_app_async_client.get("/api/config-file/languages.json")

    assert plain.status_code == suffixed.status_code == status.HTTP_200_OK
    assert plain.content == suffixed.content
    assert plain.json() == LANGUAGES_CONFIG


@pytest.mark.parametrize("path", ["languages/", "languages.json/"])
async def test_catch_all_route_matches_fixed_route(
    test_app_async_client: AsyncClient, path: str
) -> None:
    """Paths only served by the catch-all route return the same document."""
    fixed = await test_app_async_client.get("/api/config-file/languages")
    caught = await test_app_async_client.get(f"/api/config-file/{path}")

    assert caught.status_code == status.HTTP_200_OK
    assert caught.content == fixed.content


async def test_v1_config_matches_config_file(test_app_async_client: AsyncClient) -> None:
    config = await test_app_async_client.get("/api/v1/config")
    config_file = await test_app_async_client.get("/api/config-file/languages")

    assert config.content == config_file.content


@pytest.mark.parametrize("path", ["nested/languages.json", "pageLayout.json", "other"])
async def test_other_paths_are_404(test_app_async_client: AsyncClient, path: str) -> None:
    response = await test_app_async_client.get(f"/api/config-file/{path}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Config file not found"


@pytest.mark.parametrize("url", ["/api/config-file", "/api/config-file/"])
async def test_empty_path_is_404(test_app_async_client: AsyncClient, url: str) -> None:
    response = await test_app_async_client.get(url)
    assert response.status_code == status.HTTP_404_NOT_FOUND


async def test_load_failure_is_500(
    test_app_async_client: AsyncClient, public_dir: Path
) -> None:
    (public_dir / "config" / "languages.json").write_text("{broken", encoding="utf-8")

    response = await test_app_async_client.get("/api/config-file/languages")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["message"] == "Failed to load configuration"
