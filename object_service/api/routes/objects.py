"""Object Routes - create, read, update and delete over the object collection.

Invariants:
    - Each handler performs at most one write against the repository
    - Client-supplied ids are ignored; ids are minted on create and taken from the path otherwise
    - Not-found answers 404 with an operation-specific message
    - Undecodable bodies answer settings.decode_error_status (500 unless configured)
    - Responses omit absent optional fields

Design Decisions:
    - Bodies decoded by hand from the raw request instead of a typed body parameter:
      FastAPI's automatic validation would answer 400 before the handler runs
    - Update looks the object up before decoding the body, so a missing object wins
      over a malformed payload
    - Body decoding reads the first JSON value only and maps `null` to an empty payload,
      so trailing data and a `null` body are accepted like a streaming JSON decoder would
    - Delete answers plain text, kept for compatibility with existing clients
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from object_service.api.dependencies import get_app_settings, get_repository
from object_service.config import Settings
from object_service.core.domain_types import ObjectKey, new_object_key
from object_service.core.errors import (
    ErrorContext, ObjectNotFoundError, OperationFailedError, PayloadDecodeError,
    StoreError,
)
from object_service.core.merge import supplied_fields
from object_service.core.repository_protocols import ObjectRepository
from object_service.schemas.object import ObjectPayload, ObjectRecord

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/objects", tags=["objects"])

DELETED_MESSAGE = "object deleted successfully"

_decoder = json.JSONDecoder()


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def decode_payload(raw: bytes, failure: str, settings: Settings) -> ObjectPayload:
    """Decode a request body or raise PayloadDecodeError prefixed with failure.

    Only the first JSON value is read; anything after it is ignored. A `null`
    body decodes to an empty payload.
    """
    try:
        value, _ = _decoder.raw_decode(raw.decode("utf-8").lstrip())
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PayloadDecodeError(
            f"{failure}: {e}", http_status=settings.decode_error_status,
        ) from e
    try:
        return ObjectPayload.model_validate({} if value is None else value)
    except ValidationError as e:
        raise PayloadDecodeError(
            f"{failure}: {_describe(e)}", http_status=settings.decode_error_status,
        ) from e


@router.post("", response_model=ObjectRecord, response_model_exclude_none=True)
async def create_object(
    request: Request,
    repository: ObjectRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
):
    """Create an object with a freshly minted id."""
    payload = decode_payload(await request.body(), "object creation failed", settings)
    record = ObjectRecord(
        id=new_object_key(), name=payload.name, description=payload.description,
    )
    try:
        await repository.insert(record)
    except StoreError as e:
        raise OperationFailedError(f"object creation failed: {e.detail}") from e
    logger.info(
        f"Object {record.id} created", extra={"object_id": record.id, "operation": "create"},
    )
    return record


@router.get("/", response_model=list[ObjectRecord], response_model_exclude_none=True)
async def list_objects(repository: ObjectRepository = Depends(get_repository)):
    """Return every stored object. No pagination."""
    try:
        return await repository.list_all()
    except StoreError as e:
        raise OperationFailedError(f"getting objects failed: {e.detail}") from e


@router.get(
    "/{object_id}", response_model=ObjectRecord, response_model_exclude_none=True,
)
async def get_object(
    object_id: str, repository: ObjectRepository = Depends(get_repository),
):
    key = ObjectKey(object_id)
    try:
        record = await repository.find_by_id(key)
    except StoreError as e:
        raise OperationFailedError("object extraction failed") from e
    if record is None:
        raise ObjectNotFoundError("object not found", ErrorContext(object_id=key))
    return record


@router.put(
    "/{object_id}", response_model=ObjectRecord, response_model_exclude_none=True,
)
async def update_object(
    object_id: str,
    request: Request,
    repository: ObjectRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
):
    """Merge supplied name/description into the stored object."""
    key = ObjectKey(object_id)
    try:
        current = await repository.find_by_id(key)
    except StoreError as e:
        raise OperationFailedError("update failed") from e
    if current is None:
        raise ObjectNotFoundError(
            "object for update not found", ErrorContext(object_id=key),
        )

    payload = decode_payload(await request.body(), "object updating failed", settings)
    try:
        updated = await repository.set_fields(key, supplied_fields(payload))
    except StoreError as e:
        raise OperationFailedError(f"object updating failed: {e.detail}") from e
    if updated is None:
        # deleted between lookup and write
        raise ObjectNotFoundError(
            "object for update not found", ErrorContext(object_id=key),
        )
    logger.info(
        f"Object {key} updated", extra={"object_id": key, "operation": "update"},
    )
    return updated


@router.delete("/{object_id}", response_class=PlainTextResponse)
async def delete_object(
    object_id: str, repository: ObjectRepository = Depends(get_repository),
):
    key = ObjectKey(object_id)
    try:
        deleted = await repository.delete(key)
    except StoreError as e:
        raise OperationFailedError(f"deletion failed: {e.detail}") from e
    if not deleted:
        raise ObjectNotFoundError(
            "object for deleting not found", ErrorContext(object_id=key),
        )
    logger.info(
        f"Object {key} deleted", extra={"object_id": key, "operation": "delete"},
    )
    return PlainTextResponse(DELETED_MESSAGE)
