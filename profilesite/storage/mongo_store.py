"""
MongoDB document store using Motor.
"""

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from profilesite.storage.base import (
    UNIQUE_FIELDS,
    DocumentStore,
    DuplicateDocumentError,
    SortSpec,
)

logger = logging.getLogger(__name__)

# Hide Mongo's internal _id from API consumers
_PROJECTION = {"_id": 0}


class MongoDocumentStore(DocumentStore):
    """Document store backed by a Motor database."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize MongoDocumentStore.

        Args:
            db: MongoDB database connection
        """
        self._db = db

    async def find_all(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
    ) -> List[Dict[str, Any]]:
        cursor = self._db[collection].find(query or {}, _PROJECTION)
        if sort:
            cursor = cursor.sort(sort)
        return await cursor.to_list(length=None)

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._db[collection].find_one(query, _PROJECTION)

    async def upsert(self, collection: str, key: str, document: Dict[str, Any]) -> Dict[str, Any]:
        fields = {k: v for k, v in document.items() if k != "_id"}
        result = await self._db[collection].find_one_and_update(
            {key: fields[key]},
            {"$set": fields},
            projection=_PROJECTION,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.debug(f"Upserted {collection} document {key}={fields[key]}")
        return result if result is not None else fields

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        # insert_one adds _id to the dict it is given
        stored = dict(document)
        try:
            await self._db[collection].insert_one(stored)
        except DuplicateKeyError as e:
            field = next(iter((e.details or {}).get("keyValue") or {}), None)
            logger.warning(f"Duplicate {collection} document rejected: {field}")
            raise DuplicateDocumentError(collection, field) from e
        stored.pop("_id", None)
        return stored

    async def update_one(
        self,
        collection: str,
        query: Dict[str, Any],
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        return await self._db[collection].find_one_and_update(
            query,
            {"$set": fields},
            projection=_PROJECTION,
            return_document=ReturnDocument.AFTER,
        )

    async def add_to_set(
        self,
        collection: str,
        query: Dict[str, Any],
        field: str,
        value: Any,
    ) -> Optional[Dict[str, Any]]:
        return await self._db[collection].find_one_and_update(
            query,
            {"$addToSet": {field: value}},
            projection=_PROJECTION,
            return_document=ReturnDocument.AFTER,
        )

    async def count(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        return await self._db[collection].count_documents(query or {})

    async def ensure_indexes(self) -> None:
        """
        Create a sparse unique index per identifier field.

        Upserts on these fields are then retried by the server instead of
        inserting a second document.
        """
        for collection, fields in UNIQUE_FIELDS.items():
            for field in fields:
                await self._db[collection].create_index(
                    [(field, ASCENDING)],
                    unique=True,
                    sparse=True,
                    name=f"{field}_unique",
                )
        logger.info("MongoDB unique indexes ensured")
