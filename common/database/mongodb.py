"""
Generic MongoDB connection manager.

Provides a lazily created, cached Motor client that is reused across
requests. The first call to connect() creates the client; later calls
return immediately.

Example:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(
        uri="mongodb://localhost:27017",
        database_name="myapp",
    )
    events = db.db["events"]
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


def mask_uri(uri: str) -> str:
    """Hide credentials in a connection string for logging."""
    if "@" not in uri:
        return uri
    scheme, _, rest = uri.partition("://")
    return f"{scheme}://***@{rest.split('@')[-1]}"


class MongoDB:
    """Generic MongoDB connection manager - works with any database."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None

    async def connect(self, uri: str, database_name: str) -> None:
        """
        Create the Motor client if it does not exist yet.

        Args:
            uri: MongoDB connection string
            database_name: Name of the database to use
        """
        if self._client is not None:
            logger.debug(f"Reusing MongoDB client for database: {self._database_name}")
            return

        logger.info(f"Connecting to MongoDB: {mask_uri(uri)}")
        try:
            self._client = AsyncIOMotorClient(uri)
            self._database_name = database_name
            logger.info(f"MongoDB client ready for database: {database_name}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None

    @property
    def is_connected(self) -> bool:
        """Check if a client has been created."""
        return self._client is not None

    @property
    def database_name(self) -> Optional[str]:
        """Get the current database name."""
        return self._database_name

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get the underlying Motor database instance."""
        if not self._client or not self._database_name:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]

