"""Health check response body."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service liveness plus the result of a MongoDB ping."""

    status: Literal["ok"] = Field(default="ok", description="Always 'ok' while the process serves requests")
    environment: str = Field(description="APP_ENV the service runs under (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="'connected' if MongoDB answered a ping, otherwise 'disconnected'",
    )
