"""MongoDB connection and Beanie ODM initialization."""

import logging
from typing import TYPE_CHECKING

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from careconnect.models import Account

if TYPE_CHECKING:
    from careconnect.core.config import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: "Settings") -> AsyncIOMotorClient:
    """
    Connect to MongoDB and register document models with Beanie.

    init_beanie creates the indexes declared on the models (including the
    unique index on users.email). Raises on connection failure.
    """
    client = AsyncIOMotorClient(settings.MONGO_URI)
    await init_beanie(
        database=client[settings.MONGO_DB_NAME],
        document_models=[Account],
    )
    logger.info("Connected to MongoDB", extra={"database": settings.MONGO_DB_NAME})
    return client


async def check_db_connected(client: AsyncIOMotorClient | None) -> bool:
    """Ping the server to verify the database is reachable."""
    if client is None:
        return False
    try:
        await client.admin.command("ping")
        return True
    except Exception:
        return False
