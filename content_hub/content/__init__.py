"""Static content access."""

from content_hub.content.provider import (
    CONTENT_CATEGORIES,
    ContentProvider,
    ContentUnavailableError,
)

__all__ = ["CONTENT_CATEGORIES", "ContentProvider", "ContentUnavailableError"]
