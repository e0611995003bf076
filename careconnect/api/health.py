"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorClient

from careconnect.api.deps import get_app_settings, get_mongo_client
from careconnect.core.config import Settings
from careconnect.core.database import check_db_connected
from careconnect.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
async def get_health(
    settings: Annotated[Settings, Depends(get_app_settings)],
    client: Annotated[AsyncIOMotorClient | None, Depends(get_mongo_client)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if await check_db_connected(client) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
    )
