"""Domain Types - identity type and id minting for stored objects.

Invariants:
    - ObjectKey is the public `id` field, never the store's native `_id`
    - new_object_key() always returns a non-empty 24-char hex string

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - Keys minted from a fresh BSON ObjectId: unique across processes without coordination
"""

from typing import NewType

from bson import ObjectId

ObjectKey = NewType("ObjectKey", str)


def new_object_key() -> ObjectKey:
    """Mint a globally unique id for a new object."""
    return ObjectKey(str(ObjectId()))
