"""
MongoDB connection for the social backend.

Beanie is initialised with the document models at connect time, which
builds the indexes they declare: unique usernames and emails, post and
notification lookups. Services then work with raw Motor collections from
``MongoDB.db``.

Example:
    from common.database import MongoDB
    from social.models import DOCUMENT_MODELS

    main_db = MongoDB()
    await main_db.connect(
        uri="mongodb://localhost:27017",
        database_name="social",
        document_models=DOCUMENT_MODELS,
    )
    users = main_db.db["users"]
"""

import logging
from typing import List, Optional, Type

from beanie import Document, init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def mask_uri(uri: str) -> str:
    """Drop the credentials part of a connection string before logging it."""
    return uri.split("@")[-1] if "@" in uri else uri


class MongoDB:
    """Owns the Motor client for the lifetime of the app."""

    def __init__(self, server_selection_timeout_ms: int = 5000):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None
        self._timeout_ms = server_selection_timeout_ms

    async def connect(
        self,
        uri: str,
        database_name: str,
        document_models: List[Type[Document]],
    ) -> None:
        """
        Open the client and register the document models.

        Raises whatever Motor or Beanie raise; the app must not start
        without its indexes.
        """
        logger.info(f"Connecting to MongoDB at {mask_uri(uri)} (database {database_name})")

        client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=self._timeout_ms)
        try:
            await init_beanie(database=client[database_name], document_models=document_models)
        except Exception as e:
            logger.error(f"MongoDB initialisation failed: {e}")
            client.close()
            raise

        self._client = client
        self._database = client[database_name]
        logger.info(
            f"MongoDB ready, indexes ensured for {[m.__name__ for m in document_models]}"
        )

    async def disconnect(self) -> None:
        if self._client:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None

    async def ping(self) -> bool:
        """Round-trip to the server; False when unreachable or not connected."""
        if self._database is None:
            return False
        try:
            await self._database.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Motor database handle used by the services."""
        if self._database is None:
            raise RuntimeError("Database not connected")
        return self._database
