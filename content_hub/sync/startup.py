"""Once-per-process sync run at application startup."""

from collections.abc import Awaitable, Callable

from content_hub.core.logging import get_logger
from content_hub.models import SyncResult

logger = get_logger(__name__)

BANNER = "=" * 40

SyncJob = Callable[[], Awaitable[SyncResult]]
SeededCheck = Callable[[], Awaitable[bool]]


class StartupSync:
    """Runs a sync job at most once for the lifetime of the process.

    One instance is created when the application is built and handed to
    the startup handler, so the flag outlives any number of startup hook
    invocations. ``has_run`` flips to True before the first await, so
    concurrent ``register`` calls on the same event loop cannot both start
    the job. A failed run is logged and is not retried.
    """

    def __init__(self, enabled: bool = True) -> None:
        """Initialize the trigger.

        Args:
            enabled: Whether startup sync is allowed in this runtime
        """
        self.enabled = enabled
        self.has_run = False
        self.result: SyncResult | None = None

    async def register(
        self, sync_job: SyncJob, is_seeded: SeededCheck | None = None
    ) -> SyncResult | None:
        """Run the sync job if no job has run yet.

        Args:
            sync_job: Coroutine function performing the sync
            is_seeded: Optional check that skips the job when data exists

        Returns:
            The sync result, or None when skipped or failed
        """
        if not self.enabled or self.has_run:
            return None
        self.has_run = True

        logger.info(BANNER)
        logger.info("STARTUP SYNC INITIATED")
        logger.info(BANNER)
        try:
            if is_seeded is not None and await is_seeded():
                logger.info("Store already seeded, skipping sync")
            else:
                self.result = await sync_job()
                logger.info(
                    "startup_sync_finished",
                    configs=self.result.configs,
                    collections=self.result.collections,
                    images=self.result.images,
                    files=self.result.files,
                    errors=len(self.result.errors),
                )
            logger.info(BANNER)
            logger.info("STARTUP COMPLETE")
            logger.info(BANNER)
        except Exception as e:
            logger.error("startup_sync_failed", error=str(e), exc_info=e)
        return self.result
