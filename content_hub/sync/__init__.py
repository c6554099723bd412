"""Content sync jobs."""

from content_hub.sync.service import SyncService
from content_hub.sync.startup import StartupSync

__all__ = ["StartupSync", "SyncService"]
