"""API test fixtures: in-memory video repository + FastAPI test client.

Invariants:
    - Every test gets a fresh, empty InMemoryVideoRepository
    - get_video_repository and get_mongo dependencies are overridden
    - The clock ticks 1 ms per call so createdAt/updatedAt always advance

Design Decisions:
    - The fake enforces the same id rules as Mongo (bson.ObjectId) so
      malformed-id handling is exercised without a server
"""

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from nexuscore.core.domain_types import VideoId
from nexuscore.core.errors import DatabaseError
from nexuscore.core.video_records import new_video_document, update_video_document
from nexuscore.infrastructure.database import get_mongo, get_video_repository
from nexuscore.main import app


class TickingClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(milliseconds=1)
        return self.now


class InMemoryVideoRepository:
    """Dict-backed VideoRepository with Mongo-like id semantics."""

    def __init__(self, clock=None):
        self.documents: dict[ObjectId, dict] = {}
        self._clock = clock or TickingClock()

    def _oid(self, video_id: VideoId) -> ObjectId:
        if not ObjectId.is_valid(video_id):
            raise DatabaseError(
                f"'{video_id}' is not a valid ObjectId, it must be a 12-byte "
                "input or a 24-character hex string",
                "parse_id",
            )
        return ObjectId(video_id)

    async def create(self, fields: dict) -> dict:
        document = new_video_document(fields, self._clock())
        document["_id"] = ObjectId()
        self.documents[document["_id"]] = document
        return dict(document)

    async def list_all(self) -> list[dict]:
        return sorted(
            (dict(d) for d in self.documents.values()),
            key=lambda d: (d["createdAt"], d["_id"]),
            reverse=True,
        )

    async def get(self, video_id: VideoId) -> dict | None:
        document = self.documents.get(self._oid(video_id))
        return dict(document) if document else None

    async def update(self, video_id: VideoId, fields: dict) -> dict | None:
        changes = update_video_document(fields, self._clock())
        document = self.documents.get(self._oid(video_id))
        if document is None:
            return None
        document.update(changes)
        return dict(document)

    async def delete(self, video_id: VideoId) -> bool:
        return self.documents.pop(self._oid(video_id), None) is not None


class FakeMongo:
    def __init__(self, connected: bool = True):
        self.connected = connected

    async def health_check(self) -> bool:
        return self.connected


@pytest.fixture
def repo():
    return InMemoryVideoRepository()


@pytest.fixture
def fake_mongo():
    return FakeMongo()


@pytest.fixture
async def client(repo, fake_mongo):
    """FastAPI test client with persistence dependencies overridden."""
    app.dependency_overrides[get_video_repository] = lambda: repo
    app.dependency_overrides[get_mongo] = lambda: fake_mongo

    # raise_app_exceptions=False: the catch-all handler's 500 reaches the client
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def video_payload():
    return {
        "title": "Intro to Nexuscore",
        "thumbnail": "https://img.example.com/intro.jpg",
        "link": "https://videos.example.com/intro",
    }
