"""Domain Types: names for the primitives that cross the core/shell boundary.

Invariants:
    - VideoId is the hex string form of the store's identifier, never the raw ObjectId
    - VIDEO_FIELDS lists the mutable, required fields in their canonical order
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

VideoId = NewType("VideoId", str)


# ─── Field Names ─────────────────────────────────────────────────

VIDEO_FIELDS: tuple[str, ...] = ("title", "thumbnail", "link")

VIDEO_RESOURCE = "Video"
