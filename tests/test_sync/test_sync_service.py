"""Tests for syncing the public directory into Redis."""

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from pytest_mock import MockerFixture
from redis.exceptions import ConnectionError

from content_hub.core.errors import SyncInProgressError
from content_hub.store.redis_store import ContentRedis
from content_hub.sync.service import SyncService


@pytest.fixture
def sync_service(content_store: ContentRedis, public_dir: Path) -> SyncService:
    return SyncService(content_store, public_dir)


def _stored(mock_redis: AsyncMock) -> dict[str, str]:
    return {c.args[0]: c.args[1] for c in mock_redis.set.await_args_list}


@pytest.mark.asyncio
async def test_perform_sync_counts(sync_service: SyncService, mock_redis: AsyncMock) -> None:
    """A clean directory syncs every config, collection folder and file."""
    result = await sync_service.perform_sync()

    assert result.configs == 1
    assert result.collections == 2
    assert result.images == 1
    assert result.files == 1
    assert result.errors == []
    assert any("Sync summary" in line for line in result.logs)
    assert sync_service.syncing is False


@pytest.mark.asyncio
async def test_perform_sync_writes_keys(
    sync_service: SyncService, mock_redis: AsyncMock
) -> None:
    await sync_service.perform_sync()

    stored = _stored(mock_redis)
    assert "cms:config:languages" in stored
    assert json.loads(stored["collection:en:data:skills"]) == [
        {"id": 1, "category": "skills"}
    ]
    assert json.loads(stored["index:collections"]) == ["en"]
    assert json.loads(stored["assets:files:notes.txt"]) == {
        "name": "notes.txt",
        "content": "hello",
    }
    last = json.loads(stored["sync:last-result"])
    assert last["collections"] == 2
    mock_redis.sadd.assert_any_await("languages", "en")
    mock_redis.sadd.assert_any_await("files:en:config", "contentLabels")


@pytest.mark.asyncio
async def test_perform_sync_collects_item_errors(
    sync_service: SyncService, public_dir: Path
) -> None:
    (public_dir / "collections" / "en" / "data" / "zbroken.json").write_text(
        "{", encoding="utf-8"
    )

    result = await sync_service.perform_sync()

    assert result.collections == 1
    assert result.errors == ["Failed to sync collection data for en"]
    assert result.files == 1


@pytest.mark.asyncio
async def test_perform_sync_missing_root_config(
    sync_service: SyncService, public_dir: Path
) -> None:
    (public_dir / "config" / "languages.json").unlink()

    result = await sync_service.perform_sync()

    assert result.configs == 0
    assert result.collections == 2
    assert any("Error syncing root config" in line for line in result.logs)


@pytest.mark.asyncio
async def test_perform_sync_without_optional_dirs(tmp_path: Path, content_store: ContentRedis) -> None:
    (tmp_path / "collections").mkdir()
    service = SyncService(content_store, tmp_path)

    result = await service.perform_sync()

    assert (result.images, result.files, result.collections) == (0, 0, 0)
    assert any("No images directory found" in line for line in result.logs)


@pytest.mark.asyncio
async def test_perform_sync_store_failure_returns_zero_result(
    sync_service: SyncService, mock_redis: AsyncMock
) -> None:
    """An unreachable store yields an empty result instead of raising."""
    mock_redis.set.side_effect = ConnectionError("connection refused")

    result = await sync_service.perform_sync()

    assert (result.configs, result.collections, result.images, result.files) == (0, 0, 0, 0)
    assert result.errors == ["connection refused"]
    assert sync_service.syncing is False


@pytest.mark.asyncio
async def test_resync_flushes_first(
    sync_service: SyncService, mock_redis: AsyncMock, mocker: MockerFixture
) -> None:
    perform = mocker.spy(sync_service, "perform_sync")

    result = await sync_service.resync()

    mock_redis.flushdb.assert_awaited_once()
    perform.assert_called_once_with(trigger="manual")
    assert result.configs == 1


@pytest.mark.asyncio
async def test_resync_rejected_while_running(
    sync_service: SyncService, mock_redis: AsyncMock
) -> None:
    sync_service.syncing = True

    with pytest.raises(SyncInProgressError):
        await sync_service.resync()
    mock_redis.flushdb.assert_not_awaited()


@pytest.mark.asyncio
async def test_resync_flush_failure_clears_flag(
    sync_service: SyncService, mock_redis: AsyncMock, mocker: MockerFixture
) -> None:
    mock_redis.flushdb.side_effect = ConnectionError("down")
    perform = mocker.patch.object(sync_service, "perform_sync")

    with pytest.raises(ConnectionError):
        await sync_service.resync()

    assert sync_service.syncing is False
    perform.assert_not_called()
