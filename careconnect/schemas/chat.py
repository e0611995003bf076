"""Request/response schemas for the chat proxy."""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """A single user message to forward to the completion API."""

    message: str


class ChatResponse(BaseModel):
    """Text of the first completion returned by the model."""

    botMessage: str = Field(..., description="Assistant reply")
