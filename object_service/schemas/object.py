"""Object Schemas - the Object record and its JSON/document serialization rules.

Invariants:
    - ObjectRecord.id is always minted for anything written; a stored document
      without an id still decodes (id None) and is listed without one
    - name/description are optional; None means absent, "" is a real value
    - to_document() always carries id, name and description (null when absent)
    - JSON responses omit absent fields (routes dump with exclude_none)
    - Unknown fields in request bodies and stored documents are ignored

Design Decisions:
    - Separate ObjectPayload for request bodies: client-supplied ids are accepted
      by the decoder but never trusted
    - strict str fields: a number where a string belongs is a decode error,
      not a silent coercion
"""

from pydantic import BaseModel, ConfigDict, StrictStr


class ObjectPayload(BaseModel):
    """Request body for create and update - every field optional."""
    model_config = ConfigDict(extra="ignore")

    id: StrictStr | None = None
    name: StrictStr | None = None
    description: StrictStr | None = None


class ObjectRecord(BaseModel):
    """A stored object as exposed through the API."""
    model_config = ConfigDict(extra="ignore")

    id: StrictStr | None = None
    name: StrictStr | None = None
    description: StrictStr | None = None

    def to_document(self) -> dict:
        """Document layout persisted in the collection."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }
