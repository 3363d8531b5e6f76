"""Video Records: pure helpers for presence checks, timestamps, and reshaping.

Invariants:
    - A stored document always carries every field in VIDEO_FIELDS, non-empty
    - Update payloads are checked against the same required-field rule, as a
      storage failure (DocumentValidationError, 500), not a request error
    - createdAt is written once by new_video_document(); updates only touch updatedAt
    - reshape_video() is the single place the store's "_id" becomes the public "id"
    - No IO here; callers pass the current time in
"""

from datetime import datetime

from nexuscore.core.domain_types import VIDEO_FIELDS
from nexuscore.core.errors import DocumentValidationError, VideoValidationError

REQUIRED_MESSAGE = "Title, thumbnail, and link are required."


def find_missing_fields(payload: dict) -> list[str]:
    """Fields absent, None, or empty in a create payload."""
    return [name for name in VIDEO_FIELDS if not payload.get(name)]


def find_blank_fields(payload: dict) -> list[str]:
    """Fields supplied as null or empty in an update payload."""
    return [name for name in VIDEO_FIELDS if name in payload and not payload[name]]


def check_create_payload(payload: dict) -> dict:
    """Return the three video fields or raise VideoValidationError."""
    missing = find_missing_fields(payload)
    if missing:
        raise VideoValidationError(REQUIRED_MESSAGE, missing)
    return {name: payload[name] for name in VIDEO_FIELDS}


def check_update_payload(payload: dict) -> dict:
    """Return the supplied video fields; null or empty ones fail the document schema."""
    blank = find_blank_fields(payload)
    if blank:
        raise DocumentValidationError(blank)
    return {name: payload[name] for name in VIDEO_FIELDS if name in payload}


def new_video_document(fields: dict, now: datetime) -> dict:
    """Build the document to insert; the store assigns _id."""
    return {
        **{name: fields[name] for name in VIDEO_FIELDS},
        "createdAt": now,
        "updatedAt": now,
    }


def update_video_document(fields: dict, now: datetime) -> dict:
    """Build the $set payload for an update; raises before any lookup."""
    changes = check_update_payload(fields)
    changes["updatedAt"] = now
    return changes


def reshape_video(document: dict) -> dict:
    """Expose the store's identifier as "id" alongside the public fields."""
    return {
        "id": str(document["_id"]),
        "title": document.get("title"),
        "thumbnail": document.get("thumbnail"),
        "link": document.get("link"),
        "createdAt": document.get("createdAt"),
        "updatedAt": document.get("updatedAt"),
    }
