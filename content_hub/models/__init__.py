"""Content Hub models package."""

from .content import (
    AssetFileUpdate,
    ChatMessage,
    ChatRequest,
    ChecklistItem,
    FileIdentity,
    LanguageRequest,
    SyncResult,
    UploadRequest,
    utc_timestamp,
)

__all__ = [
    "AssetFileUpdate",
    "ChatMessage",
    "ChatRequest",
    "ChecklistItem",
    "FileIdentity",
    "LanguageRequest",
    "SyncResult",
    "UploadRequest",
    "utc_timestamp",
]
