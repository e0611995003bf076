"""HTTP routes."""

from fastapi import APIRouter

from careconnect.api import auth, chat, health

router = APIRouter()
router.include_router(auth.router, prefix="/api/auth", tags=["auth"])
router.include_router(chat.router, prefix="/chat", tags=["chat"])
router.include_router(health.router, prefix="/health", tags=["health"])
