# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our MongoDB database, making sure we can talk to the place
# where medicine listings and saved AI conversations live, and closing it cleanly on shutdown.
#
# 🧪 Purpose (Technical Summary):
# Implements async PyMongo client management with connection pooling, ping-based health checks
# and retry logic. The client is created once in the FastAPI lifespan and shared by all
# repository implementations through get_database().
#
# 🔗 Dependencies:
# - pymongo (AsyncMongoClient, async driver)
# - app/shared/config/settings.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (lifespan startup and shutdown)
# - app/api/v1/health.py (database health monitoring)
# - Repository implementations in app/modules/*/infrastructure/database

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages the MongoDB client with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self):
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None
        self._retry_attempts = 3
        self._retry_delay = 1.0

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build PyMongo client parameters from settings."""
        settings = get_settings()
        return {
            "host": settings.MONGODB_URL,
            "serverSelectionTimeoutMS": settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            "maxPoolSize": settings.MONGODB_MAX_POOL_SIZE,
            "tz_aware": True,
            "appname": "plant_medicine_backend",
        }

    async def initialize(self) -> None:
        """Create the client and verify the server answers a ping."""
        if self._client is not None:
            logger.warning("MongoDB client already initialized")
            return

        settings = get_settings()
        logger.info("Initializing MongoDB client...")
        self._client = AsyncMongoClient(**self._build_connection_params())
        self._database = self._client[settings.MONGODB_DB_NAME]

        health = await self.health_check()
        if health["status"] != "healthy":
            await self.close()
            raise DatabaseError(
                "Could not connect to MongoDB",
                operation="connect",
                details={"error": health.get("error")}
            )

        logger.info(
            f"MongoDB client initialized successfully. "
            f"Database: {settings.MONGODB_DB_NAME}, "
            f"Max pool size: {settings.MONGODB_MAX_POOL_SIZE}"
        )

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._client is None:
            logger.error("MongoDB client not initialized")
            return {
                "status": "unhealthy",
                "error": "MongoDB client not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        last_error = None
        for attempt in range(self._retry_attempts):
            try:
                await self._client.admin.command("ping")
                logger.debug("MongoDB health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except PyMongoError as e:
                last_error = str(e)
                logger.warning(
                    f"MongoDB health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("MongoDB health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": last_error or "MongoDB health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close the client and all pooled connections."""
        if self._client is None:
            logger.warning("MongoDB client not initialized, nothing to close")
            return

        logger.info("Closing MongoDB client...")
        await self._client.close()
        self._client = None
        self._database = None
        logger.info("MongoDB client closed successfully")

    @property
    def database(self) -> AsyncDatabase:
        """Get the configured database handle."""
        if self._database is None:
            raise DatabaseError(
                "Database not initialized. Call initialize_database() first.",
                operation="get_database"
            )
        return self._database

    @property
    def is_initialized(self) -> bool:
        """Check if the MongoDB client is initialized."""
        return self._client is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager."""
    try:
        logger.info("Starting database initialization...")
        await db_manager.initialize()
        logger.info("Database initialization completed successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {str(e)}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database() -> AsyncDatabase:
    """
    Get the MongoDB database handle.

    Returns:
        AsyncDatabase: Database bound to MONGODB_DB_NAME

    Raises:
        DatabaseError: If database is not initialized
    """
    return db_manager.database


async def database_health_check() -> dict:
    """
    Perform database health check.

    Returns:
        dict: {"status": "healthy"|"unhealthy", "timestamp": ..., "error"?: ...}
    """
    return await db_manager.health_check()
