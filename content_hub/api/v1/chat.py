"""Chat endpoint backed by the inference API."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from content_hub.api.deps import get_chat_service
from content_hub.core.errors import UpstreamError, ValidationError
from content_hub.core.logging import get_logger
from content_hub.llm.chat import ChatService, build_messages
from content_hub.models import ChatRequest, utc_timestamp

logger = get_logger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("/message")
async def chat_message(
    body: ChatRequest | None = Body(default=None),
    chat: ChatService = Depends(get_chat_service),
) -> dict[str, Any]:
    """Send a message, with optional context and prior turns, to the model.

    Raises:
        ValidationError: If ``message`` is missing
        UpstreamError: If the model call fails; the cause is only logged
    """
    body = body or ChatRequest()
    if not body.message:
        raise ValidationError("Message is required")

    messages = build_messages(body.conversation_history, body.message)
    try:
        response = await chat.chat(messages, body.context)
    except Exception as e:
        logger.error("chat_failed", error=str(e), message_count=len(messages))
        raise UpstreamError("Failed to process chat message") from e

    return {"response": response, "timestamp": utc_timestamp()}
