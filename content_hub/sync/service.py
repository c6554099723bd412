"""Sync the public directory into the Redis content store."""

import json
from pathlib import Path

from content_hub.core.errors import SyncInProgressError
from content_hub.core.logging import get_logger
from content_hub.core.metrics import SYNC_RUNS_TOTAL
from content_hub.models import SyncResult
from content_hub.store.redis_store import (
    COLLECTION_INDEX_KEY,
    LANGUAGES_CONFIG_KEY,
    SYNC_RESULT_KEY,
    ContentRedis,
)

logger = get_logger(__name__)


class _SyncLog:
    """Collects the lines of one run while also emitting them as log events."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def info(self, message: str) -> None:
        self.lines.append(message)
        logger.info(message)

    def error(self, message: str) -> None:
        self.lines.append(message)
        logger.error(message)


class SyncService:
    """Copies configs, collections and files from disk into Redis.

    Attributes:
        syncing: True while ``perform_sync`` is running
    """

    def __init__(self, store: ContentRedis, public_dir: Path) -> None:
        self.store = store
        self.public_dir = Path(public_dir)
        self.syncing = False

    async def _sync_root_config(self, log: _SyncLog) -> int:
        path = self.public_dir / "config" / "languages.json"
        log.info(f"Loading root config from {path}")
        try:
            config = json.loads(path.read_text(encoding="utf-8"))
            await self.store.set(LANGUAGES_CONFIG_KEY, config)
        except (OSError, ValueError) as e:
            log.error(f"Error syncing root config: {e}")
            return 0
        log.info("Root config synced")
        return 1

    async def _sync_folder(self, lang: str, folder: Path, log: _SyncLog) -> None:
        files = sorted(folder.glob("*.json"))
        log.info(f"Loading {len(files)} {folder.name} files for {lang}")
        for path in files:
            data = json.loads(path.read_text(encoding="utf-8"))
            await self.store.upload_file(lang, folder.name, path.stem, data)
            log.info(f"Synced {lang}/{folder.name}/{path.name}")

    async def _sync_collections(self, log: _SyncLog) -> tuple[int, list[str]]:
        errors: list[str] = []
        count = 0
        collections_dir = self.public_dir / "collections"
        log.info("Starting collections sync")
        try:
            languages = sorted(
                entry.name for entry in collections_dir.iterdir() if entry.is_dir()
            )
        except OSError as e:
            message = f"Error syncing collections: {e}"
            log.error(message)
            return 0, [message]

        log.info(f"Found {len(languages)} languages: {', '.join(languages)}")
        for lang in languages:
            for folder_name in ("config", "data"):
                folder = collections_dir / lang / folder_name
                if not folder.is_dir():
                    continue
                try:
                    await self._sync_folder(lang, folder, log)
                    count += 1
                except (OSError, ValueError) as e:
                    message = f"Failed to sync collection {folder_name} for {lang}"
                    log.error(f"{message}: {e}")
                    errors.append(message)

        await self.store.set(COLLECTION_INDEX_KEY, languages)
        log.info(f"Collections sync completed: {count} processed")
        return count, errors

    def _count_images(self, log: _SyncLog) -> tuple[int, list[str]]:
        # Images are served from disk; only their number is recorded.
        images_dir = self.public_dir / "image"
        if not images_dir.exists():
            log.info("No images directory found (skipping)")
            return 0, []
        try:
            count = sum(1 for entry in images_dir.iterdir() if entry.is_file())
        except OSError as e:
            message = f"Error reading images directory: {e}"
            log.error(message)
            return 0, [message]
        log.info(f"Found {count} images (served from disk, not stored)")
        return count, []

    async def _sync_files(self, log: _SyncLog) -> tuple[int, list[str]]:
        files_dir = self.public_dir / "files"
        if not files_dir.exists():
            log.info("No files directory found (skipping)")
            return 0, []

        errors: list[str] = []
        count = 0
        try:
            files = sorted(entry for entry in files_dir.iterdir() if entry.is_file())
        except OSError as e:
            message = f"Error syncing files: {e}"
            log.error(message)
            return 0, [message]

        for path in files:
            try:
                content = path.read_text(encoding="utf-8")
                await self.store.set_asset_file(path.name, content)
                count += 1
                log.info(f"Synced file {path.name}")
            except (OSError, UnicodeDecodeError) as e:
                message = f"Failed to sync file {path.name}"
                log.error(f"{message}: {e}")
                errors.append(message)
        log.info(f"Files sync completed: {count}/{len(files)}")
        return count, errors

    async def perform_sync(self, trigger: str = "manual") -> SyncResult:
        """Run a full sync and record the result under ``sync:last-result``.

        Per-item failures are collected in ``errors``. Any other failure,
        including the store being unreachable, yields a zero-valued result
        carrying the error instead of raising.

        Args:
            trigger: Label for metrics, e.g. ``startup`` or ``manual``

        Returns:
            The sync result
        """
        log = _SyncLog()
        self.syncing = True
        try:
            configs = await self._sync_root_config(log)
            collections, collection_errors = await self._sync_collections(log)
            images, image_errors = self._count_images(log)
            files, file_errors = await self._sync_files(log)
            errors = [*collection_errors, *image_errors, *file_errors]

            log.info(
                f"Sync summary: configs={configs} collections={collections} "
                f"images={images} files={files} errors={len(errors)}"
            )
            result = SyncResult(
                configs=configs,
                collections=collections,
                images=images,
                files=files,
                errors=errors,
                logs=log.lines,
            )
            await self.store.set(SYNC_RESULT_KEY, result.model_dump())
        except Exception as e:
            log.error(f"Fatal sync error: {e}")
            SYNC_RUNS_TOTAL.labels(trigger=trigger, outcome="failed").inc()
            return SyncResult(errors=[str(e)], logs=log.lines)
        finally:
            self.syncing = False

        SYNC_RUNS_TOTAL.labels(
            trigger=trigger, outcome="partial" if result.errors else "success"
        ).inc()
        return result

    async def resync(self) -> SyncResult:
        """Flush the store and sync it again from disk.

        Raises:
            SyncInProgressError: If a sync is already running
            RedisError: If the flush fails
        """
        if self.syncing:
            raise SyncInProgressError("Sync already in progress")
        self.syncing = True
        try:
            await self.store.flush_all()
        except Exception:
            self.syncing = False
            raise
        return await self.perform_sync(trigger="manual")
