"""Document Store - motor client lifecycle and the Mongo-backed ObjectRepository.

Invariants:
    - One client per process, connected and pinged once at startup (connect())
    - Objects are addressed by their `id` field, never by the native `_id`
    - Every read projects `_id` out; every insert writes a fresh dict
    - All pymongo exceptions and undecodable documents are mapped to StoreError

Design Decisions:
    - No module-level singleton: the lifespan owns the manager and hands the
      repository to routes through app.state (ADR: explicit dependency injection)
    - find_one_and_update / delete_one for writes: existence check and write are one
      store operation, no read-then-write window
    - motor's internal pool handles concurrent requests; no locks here
"""

import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient, AsyncIOMotorCollection,
)
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from object_service.config import MongoConfig
from object_service.core.domain_types import ObjectKey
from object_service.core.errors import StoreError
from object_service.schemas.object import ObjectRecord

logger = logging.getLogger(__name__)

_NO_NATIVE_ID = {"_id": 0}


class MongoCollectionManager:
    """Owns the motor client and the configured collection handle."""

    def __init__(self, config: MongoConfig, client: AsyncIOMotorClient | None = None):
        self.config = config
        self.client = client if client is not None else AsyncIOMotorClient(config.uri)
        self.collection: AsyncIOMotorCollection = (
            self.client[config.database][config.collection]
        )

    async def connect(self) -> None:
        """Verify the server answers ping. Raises StoreError otherwise."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(
                f"MongoDB ping failed at {self.config.uri}: {e}",
                extra={"operation": "ping", "collection": self.config.collection},
            )
            raise StoreError(str(e), "ping") from e
        logger.info(
            f"Connected to {self.config.uri} "
            f"({self.config.database}.{self.config.collection})",
            extra={"collection": self.config.collection},
        )

    def close(self) -> None:
        self.client.close()


def _decode(document: dict) -> ObjectRecord:
    try:
        return ObjectRecord.model_validate(document)
    except ValidationError as e:
        raise StoreError(str(e), "decode") from e


class MongoObjectRepository:
    """ObjectRepository over a single motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def find_by_id(self, object_id: ObjectKey) -> ObjectRecord | None:
        try:
            document = await self._collection.find_one(
                {"id": object_id}, _NO_NATIVE_ID,
            )
        except PyMongoError as e:
            raise StoreError(str(e), "find") from e
        if document is None:
            return None
        return _decode(document)

    async def insert(self, record: ObjectRecord) -> ObjectRecord:
        try:
            await self._collection.insert_one(record.to_document())
        except PyMongoError as e:
            raise StoreError(str(e), "insert") from e
        return record

    async def list_all(self) -> list[ObjectRecord]:
        records: list[ObjectRecord] = []
        try:
            async for document in self._collection.find({}, _NO_NATIVE_ID):
                records.append(_decode(document))
        except PyMongoError as e:
            raise StoreError(str(e), "find") from e
        return records

    async def set_fields(
        self, object_id: ObjectKey, fields: dict[str, str | None],
    ) -> ObjectRecord | None:
        """Apply $set to one object; None when no object has this id."""
        try:
            if fields:
                document = await self._collection.find_one_and_update(
                    {"id": object_id},
                    {"$set": fields},
                    projection=_NO_NATIVE_ID,
                    return_document=ReturnDocument.AFTER,
                )
            else:
                # empty $set is rejected by the server
                document = await self._collection.find_one(
                    {"id": object_id}, _NO_NATIVE_ID,
                )
        except PyMongoError as e:
            raise StoreError(str(e), "update") from e
        if document is None:
            return None
        return _decode(document)

    async def delete(self, object_id: ObjectKey) -> bool:
        """Delete one object; False when no object has this id."""
        try:
            result = await self._collection.delete_one({"id": object_id})
        except PyMongoError as e:
            raise StoreError(str(e), "delete") from e
        return result.deleted_count > 0

    async def ping(self) -> bool:
        """Check store connectivity (for readiness checks)."""
        try:
            await self._collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False
