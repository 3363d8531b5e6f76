"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - "No matching record" is a return value (None / False), never an exception
    - Storage faults surface as DatabaseError (core/errors.py)

Design Decisions:
    - Protocol over ABC: the Mongo repository and the in-memory test fake
      satisfy it structurally
"""

from typing import Protocol

from nexuscore.core.domain_types import VideoId


class VideoRepository(Protocol):
    """Contract for video persistence, implemented by infrastructure."""
    async def create(self, fields: dict) -> dict: ...
    async def list_all(self) -> list[dict]: ...
    async def get(self, video_id: VideoId) -> dict | None: ...
    async def update(self, video_id: VideoId, fields: dict) -> dict | None: ...
    async def delete(self, video_id: VideoId) -> bool: ...
