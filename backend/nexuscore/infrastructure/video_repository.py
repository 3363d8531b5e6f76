"""Mongo Video Repository: VideoRepository backed by the "videos" collection.

Invariants:
    - Returned documents are raw store documents (with "_id"); reshaping is core's job
    - A malformed identifier and every driver error become DatabaseError, message verbatim
    - update() rejects null/empty fields (DocumentValidationError) before querying
    - list_all() is ordered newest first: createdAt desc, then _id desc
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from nexuscore.core.domain_types import VideoId
from nexuscore.core.errors import DatabaseError
from nexuscore.core.video_records import new_video_document, update_video_document

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    # Mongo stores milliseconds; truncate so responses match what is read back
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(video_id: VideoId) -> ObjectId:
    try:
        return ObjectId(video_id)
    except (InvalidId, TypeError) as e:
        raise DatabaseError(str(e), "parse_id") from e


class MongoVideoRepository:
    """Video persistence over an AsyncCollection."""

    def __init__(
        self, collection: AsyncCollection,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._collection = collection
        self._clock = clock

    async def create(self, fields: dict) -> dict:
        document = new_video_document(fields, self._clock())
        try:
            result = await self._collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Video insert failed: {e}", extra={"operation": "insert"})
            raise DatabaseError(str(e), "insert") from e
        document["_id"] = result.inserted_id
        logger.info(
            "Video created", extra={"video_id": str(result.inserted_id)},
        )
        return document

    async def list_all(self) -> list[dict]:
        try:
            cursor = self._collection.find().sort(
                [("createdAt", DESCENDING), ("_id", DESCENDING)],
            )
            return await cursor.to_list()
        except PyMongoError as e:
            logger.error(f"Video listing failed: {e}", extra={"operation": "find"})
            raise DatabaseError(str(e), "find") from e

    async def get(self, video_id: VideoId) -> dict | None:
        oid = parse_object_id(video_id)
        try:
            return await self._collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(
                f"Video lookup failed: {e}",
                extra={"operation": "find_one", "video_id": video_id},
            )
            raise DatabaseError(str(e), "find_one") from e

    async def update(self, video_id: VideoId, fields: dict) -> dict | None:
        changes = update_video_document(fields, self._clock())
        oid = parse_object_id(video_id)
        try:
            return await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(
                f"Video update failed: {e}",
                extra={"operation": "update", "video_id": video_id},
            )
            raise DatabaseError(str(e), "update") from e

    async def delete(self, video_id: VideoId) -> bool:
        oid = parse_object_id(video_id)
        try:
            result = await self._collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error(
                f"Video delete failed: {e}",
                extra={"operation": "delete", "video_id": video_id},
            )
            raise DatabaseError(str(e), "delete") from e
        return result.deleted_count > 0
