"""Request and record models."""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    return (
        datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    )


class FileIdentity(BaseModel):
    """Body of a request that addresses one content file.

    Fields are optional at the schema level so that a missing field is
    reported as a 400 by the handler rather than a 422 by FastAPI.
    """

    lang: str | None = None
    folder: str | None = None
    filename: str | None = None


class UploadRequest(FileIdentity):
    """Body of a content upload; ``content`` is stored as JSON."""

    content: Any = None


class AssetFileUpdate(BaseModel):
    """Body replacing the text of an asset file."""

    content: Any = None


class LanguageRequest(BaseModel):
    """Body of a language creation request."""

    lang: str | None = None


class ChecklistItem(BaseModel):
    """One step of the new-language checklist."""

    id: str
    name: str
    status: Literal["pending", "checking", "done", "error"]
    message: str


class ChatMessage(BaseModel):
    """A chat turn."""

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Body of ``POST /api/v1/chat/message``."""

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    context: str | None = None
    conversation_history: list[ChatMessage] | None = Field(
        default=None, alias="conversationHistory"
    )


class SyncResult(BaseModel):
    """Outcome of one sync run, stored under ``sync:last-result``."""

    timestamp: str = Field(default_factory=utc_timestamp)
    configs: int = 0
    collections: int = 0
    images: int = 0
    files: int = 0
    errors: list[str] = Field(default_factory=list)
    logs: list[str] = Field(default_factory=list)
