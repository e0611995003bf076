"""Chat service: forward a user message to the OpenAI chat-completions API and return the reply text."""

import logging
import time
from typing import TYPE_CHECKING

from openai import AsyncOpenAI, OpenAIError

if TYPE_CHECKING:
    from careconnect.core.config import Settings

logger = logging.getLogger(__name__)


class ChatServiceError(Exception):
    """Raised when the chat service cannot complete (missing key, API failure, or empty completion)."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def build_client(settings: "Settings") -> AsyncOpenAI | None:
    """Return an OpenAI client, or None when OPENAI_API_KEY is not configured."""
    if settings.OPENAI_API_KEY is None:
        return None
    return AsyncOpenAI(api_key=settings.OPENAI_API_KEY.get_secret_value())


def _build_messages(message: str, settings: "Settings") -> list[dict[str, str]]:
    return [
        {"role": "system", "content": settings.OPENAI_SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]


async def run_chat(
    message: str,
    settings: "Settings",
    client: AsyncOpenAI | None,
) -> str:
    """
    Send one user message (after the fixed system instruction) and return the first completion's text.

    No history and no retries beyond what the client library does itself.
    Raises ChatServiceError on any failure.
    """
    if client is None:
        raise ChatServiceError("OPENAI_API_KEY is not configured.")

    start = time.perf_counter()
    try:
        response = await client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=_build_messages(message, settings),
        )
    except OpenAIError as e:
        elapsed = time.perf_counter() - start
        logger.info(
            "Chat completion request failed",
            extra={
                "llm_latency_seconds": elapsed,
                "model": settings.OPENAI_MODEL,
                "status": "error",
            },
        )
        raise ChatServiceError("OpenAI request failed.", cause=e) from e
    elapsed = time.perf_counter() - start

    logger.info(
        "Chat completion request completed",
        extra={"llm_latency_seconds": elapsed, "model": settings.OPENAI_MODEL},
    )

    if not response.choices:
        raise ChatServiceError("OpenAI response contained no choices.")
    content = response.choices[0].message.content
    if content is None:
        raise ChatServiceError("OpenAI response contained no message content.")
    return content
