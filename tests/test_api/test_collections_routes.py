"""Tests for the collection listing endpoints."""

import json
from unittest.mock import AsyncMock

from fastapi import status
from httpx import AsyncClient
from redis.exceptions import ConnectionError


async def test_folder_listing_empty(
    test_app_async_client: AsyncClient, mock_redis: AsyncMock
) -> None:
    response = await test_app_async_client.get("/api/collections/es/data")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"lang": "es", "folder": "data", "files": [], "count": 0}
    mock_redis.smembers.assert_awaited_once_with("files:es:data")


async def test_folder_listing_sorted(
    test_app_async_client: AsyncClient, mock_redis: AsyncMock
) -> None:
    mock_redis.smembers.return_value = {"skills", "achievements", "projects"}

    response = await test_app_async_client.get("/api/collections/en/data")

    data = response.json()
    assert data["files"] == ["achievements", "projects", "skills"]
    assert data["count"] == 3


async def test_folder_listing_store_failure(
    test_app_async_client: AsyncClient, mock_redis: AsyncMock
) -> None:
    mock_redis.smembers.side_effect = ConnectionError("down")

    response = await test_app_async_client.get("/api/collections/en/data")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["details"] == "down"


async def test_language_structure(
    test_app_async_client: AsyncClient, mock_redis: AsyncMock
) -> None:
    listings = {"files:en:config": {"contentLabels"}, "files:en:data": {"skills"}}
    mock_redis.smembers.side_effect = lambda key: listings.get(key, set())

    response = await test_app_async_client.get("/api/collections/en")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "lang": "en",
        "config": ["contentLabels"],
        "data": ["skills"],
    }


async def test_collection_file_with_and_without_suffix(
    test_app_async_client: AsyncClient, mock_redis: AsyncMock
) -> None:
    mock_redis.get.return_value = json.dumps({"title": "Habilidades"})

    plain = await test_app_async_client.get("/api/collections/es/data/skills")
    suffixed = await test_app_async_client.get("/api/collections/es/data/skills.json")

    assert plain.status_code == suffixed.status_code == status.HTTP_200_OK
    assert plain.json() == suffixed.json() == {"title": "Habilidades"}
    for call in mock_redis.get.await_args_list:
        assert call.args == ("collection:es:data:skills",)


async def test_collection_file_invalid_folder(
    test_app_async_client: AsyncClient, mock_redis: AsyncMock
) -> None:
    response = await test_app_async_client.get("/api/collections/es/images/skills")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    mock_redis.get.assert_not_awaited()


async def test_collection_file_missing(test_app_async_client: AsyncClient) -> None:
    response = await test_app_async_client.get("/api/collections/es/data/skills")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Could not find skills.json in es/data"
