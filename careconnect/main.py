"""FastAPI application entrypoint. No business logic; only wiring, middleware and error rendering."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careconnect.api import router
from careconnect.core.config import Settings, get_settings
from careconnect.core.database import init_database
from careconnect.core.errors import CredentialError
from careconnect.core.security import BcryptHasher, TokenIssuer
from careconnect.services.account_store import MongoAccountStore
from careconnect.services.chat import build_client
from careconnect.services.credentials import CredentialService

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect to MongoDB on startup. A failed connection is logged; requests then fail individually."""
    settings: Settings = app.state.settings
    try:
        app.state.mongo_client = await init_database(settings)
    except Exception:
        logger.exception("MongoDB connection error")
        app.state.mongo_client = None
    try:
        yield
    finally:
        if app.state.mongo_client is not None:
            app.state.mongo_client.close()


async def credential_error_handler(request: Request, exc: CredentialError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # json_invalid locations point at a character offset, not a field
    errors = [err for err in exc.errors() if err.get("type") != "json_invalid"]
    fields = [
        ".".join(str(p) for p in err.get("loc", ()) if p != "body" and not isinstance(p, int))
        for err in errors
    ]
    fields = [f for f in fields if f]
    message = "Invalid request body"
    if fields:
        message = f"Invalid request body: {', '.join(fields)}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with settings and collaborators created once and kept on app.state."""
    settings = settings or get_settings()

    app = FastAPI(
        title="CareConnect API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mongo_client = None
    app.state.credential_service = CredentialService(
        store=MongoAccountStore(),
        hasher=BcryptHasher(rounds=settings.BCRYPT_ROUNDS),
        tokens=TokenIssuer.from_settings(settings),
    )
    app.state.openai_client = build_client(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
    )
    app.add_exception_handler(CredentialError, credential_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "CareConnect API"}

    return app


app = create_app()
