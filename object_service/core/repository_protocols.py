"""Boundary Protocols - contract between the HTTP routes and the document store.

Invariants:
    - Routes only talk to storage through ObjectRepository
    - find_by_id returns None for not-found; every store failure raises StoreError
    - No method ever returns or accepts the store's native _id

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from object_service.core.domain_types import ObjectKey
from object_service.schemas.object import ObjectRecord


class ObjectRepository(Protocol):
    """Contract for object persistence - implemented by infrastructure."""
    async def find_by_id(self, object_id: ObjectKey) -> ObjectRecord | None: ...
    async def insert(self, record: ObjectRecord) -> ObjectRecord: ...
    async def list_all(self) -> list[ObjectRecord]: ...
    async def set_fields(
        self, object_id: ObjectKey, fields: dict[str, str | None],
    ) -> ObjectRecord | None: ...
    async def delete(self, object_id: ObjectKey) -> bool: ...
    async def ping(self) -> bool: ...
