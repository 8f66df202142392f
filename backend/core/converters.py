from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from core.errors import bad_request


def is_object_id(value: Any) -> bool:
    """True only for 24-character hex strings"""
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)


def to_object_id(value: Any, message: str = "Invalid ID format") -> ObjectId:
    """Parse a request identifier, rejecting malformed ones with a 400"""
    if not is_object_id(value):
        raise bad_request(message)
    return ObjectId(value)


def utcnow() -> datetime:
    # MongoDB keeps millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def document_to_dict(document: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a raw Mongo document to a JSON-friendly dict (`_id` -> `id`)"""
    data = {"id": str(document["_id"])}
    for key, value in document.items():
        if key == "_id":
            continue
        if isinstance(value, ObjectId):
            value = str(value)
        elif isinstance(value, datetime) and value.tzinfo is None:
            # Stored datetimes are UTC
            value = value.replace(tzinfo=timezone.utc)
        data[key] = value
    return data


def new_document(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Stamp `createdAt`/`updatedAt` on a document about to be inserted"""
    now = utcnow()
    return {**fields, "createdAt": now, "updatedAt": now}


def update_operation(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Build a `$set` that applies a partial update and advances `updatedAt`"""
    return {"$set": {**fields, "updatedAt": utcnow()}}
