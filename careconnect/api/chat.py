"""Chat proxy route: one user message in, the model's reply out."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from openai import AsyncOpenAI

from careconnect.api.deps import get_app_settings, get_openai_client
from careconnect.core.config import Settings
from careconnect.schemas.chat import ChatRequest, ChatResponse
from careconnect.services.chat import ChatServiceError, run_chat

logger = logging.getLogger(__name__)

router = APIRouter()

CHAT_ERROR_MESSAGE = "Something went wrong with OpenAI API."


@router.post(
    "",
    response_model=ChatResponse,
    responses={500: {"description": "Upstream completion API failure"}},
)
async def post_chat(
    body: ChatRequest,
    settings: Annotated[Settings, Depends(get_app_settings)],
    client: Annotated[AsyncOpenAI | None, Depends(get_openai_client)],
) -> ChatResponse | JSONResponse:
    """Forward the message to the completion API with a fixed system instruction; no history is kept."""
    try:
        bot_message = await run_chat(body.message, settings, client)
    except ChatServiceError as e:
        logger.error("Chat request failed: %s", e.message, exc_info=e.cause)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": CHAT_ERROR_MESSAGE},
        )
    return ChatResponse(botMessage=bot_message)
