"""Pydantic request/response schemas."""

from careconnect.schemas.auth import (
    AccountRecord,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    NewAccount,
    SignupRequest,
)
from careconnect.schemas.chat import ChatRequest, ChatResponse
from careconnect.schemas.health import HealthResponse

__all__ = [
    "AccountRecord",
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "NewAccount",
    "SignupRequest",
]
