"""Domain exceptions raised by route handlers."""

from typing import Any

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ContentHubError(Exception):
    """Base error carrying the HTTP status it maps to.

    ``message`` is safe to return to the caller. ``details`` is optional
    extra context that is also returned; leave it unset for failures whose
    internals should only be logged.
    """

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(ContentHubError):
    """A required request field is missing or malformed."""

    status_code = HTTP_400_BAD_REQUEST


class NotFoundError(ContentHubError):
    """The requested resource does not exist."""

    status_code = HTTP_404_NOT_FOUND


class SyncInProgressError(ContentHubError):
    """A manual sync was requested while another one is running."""

    status_code = HTTP_409_CONFLICT


class UpstreamError(ContentHubError):
    """The store, content provider or chat backend failed."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return value is None or value == {} or value == []


def require_fields(**fields: Any) -> None:
    """Raise ``ValidationError`` naming every empty field.

    Args:
        **fields: Field name to submitted value

    Raises:
        ValidationError: If any value is ``None``, blank text or an empty
            object or list
    """
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        names = ", ".join(fields)
        if len(fields) == 1:
            raise ValidationError(f"Missing required field: {names}")
        raise ValidationError(
            f"Missing required fields: {names}", details={"missing": missing}
        )
