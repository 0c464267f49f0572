"""Merge Policy - merge-on-missing for partial object updates.

Invariants:
    - A field absent from the patch (or sent as null) keeps its stored value
    - A field sent as "" overwrites: presence is the signal, not emptiness
    - Ids in the patch are never part of the update

Design Decisions:
    - Only supplied fields go into the store's $set: the store merges them into the
      current document in one atomic write, so a concurrent update to the other
      field is never overwritten with a stale value
    - Pure function over a repository method: no IO, trivially testable
      (routes do the IO around it)
"""

from object_service.schemas.object import ObjectPayload

MERGEABLE_FIELDS = ("name", "description")


def supplied_fields(patch: ObjectPayload) -> dict[str, str]:
    """Fields the client actually sent with a non-null value."""
    return {
        field: getattr(patch, field)
        for field in MERGEABLE_FIELDS
        if getattr(patch, field) is not None
    }
