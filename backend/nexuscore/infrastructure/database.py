"""Database Connection Manager: async MongoDB client with startup ping and health checks.

Invariants:
    - One AsyncMongoClient per manager; the driver pools connections
    - connect() fails loudly (DatabaseConnectionError) if the server never answers
    - close() is safe to call more than once

Design Decisions:
    - Manager constructed in the FastAPI lifespan and kept on app.state;
      routes reach it through get_mongo()/get_video_repository()
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from nexuscore.core.errors import DatabaseConnectionError
from nexuscore.infrastructure.video_repository import MongoVideoRepository

logger = logging.getLogger(__name__)

VIDEOS_COLLECTION = "videos"


class MongoManager:
    """Owns the MongoDB client for the lifetime of the process."""

    def __init__(
        self, mongo_uri: str, database: str = "nexuscore",
        server_selection_timeout_ms: int = 5000,
    ):
        self.client: AsyncMongoClient = AsyncMongoClient(
            mongo_uri,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
            tz_aware=True,
        )
        self.db: AsyncDatabase = self.client.get_default_database(default=database)
        self.admin: AsyncDatabase = self.client.admin
        self.connected = False

    @property
    def videos(self) -> AsyncCollection:
        return self.db[VIDEOS_COLLECTION]

    async def connect(self) -> None:
        """Ping the server so an unreachable database is detected at startup."""
        try:
            await self.admin.command("ping")
        except PyMongoError as e:
            self.connected = False
            raise DatabaseConnectionError(str(e)) from e
        self.connected = True
        logger.info(f"Connected to MongoDB database '{self.db.name}'")

    async def close(self) -> None:
        if self.connected:
            logger.info("Closing MongoDB connection")
        self.connected = False
        await self.client.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"DB health check failed: {e}")
            return False


def get_mongo(request: Request) -> MongoManager | None:
    """FastAPI dependency for the process-wide manager (None before startup)."""
    return getattr(request.app.state, "mongo", None)


def get_video_repository(request: Request) -> MongoVideoRepository:
    """FastAPI dependency for video persistence."""
    mongo = get_mongo(request)
    if not mongo:
        raise RuntimeError("Database not initialized")
    return MongoVideoRepository(mongo.videos)
