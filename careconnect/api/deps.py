"""FastAPI dependencies that hand out the per-app settings and collaborators built at startup."""

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from openai import AsyncOpenAI

from careconnect.core.config import Settings
from careconnect.services.credentials import CredentialService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_credential_service(request: Request) -> CredentialService:
    return request.app.state.credential_service


def get_openai_client(request: Request) -> AsyncOpenAI | None:
    return request.app.state.openai_client


def get_mongo_client(request: Request) -> AsyncIOMotorClient | None:
    # None until the lifespan handler has connected (or if connecting failed)
    return getattr(request.app.state, "mongo_client", None)
