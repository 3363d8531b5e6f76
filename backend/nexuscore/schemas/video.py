"""Video Schemas: Pydantic models for the /api/videos boundary.

Invariants:
    - Request bodies are typed (strings or absent); presence is checked in core
    - VideoResponse serializes with camelCase aliases: createdAt, updatedAt
    - VideoResponse.id is the hex form of the store identifier
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VideoCreate(BaseModel):
    """Video creation body. Missing fields are reported by core as a 400."""
    title: str | None = None
    thumbnail: str | None = None
    link: str | None = None


class VideoUpdate(BaseModel):
    """Video update body. Omitted fields keep their stored values."""
    title: str | None = None
    thumbnail: str | None = None
    link: str | None = None


class VideoResponse(BaseModel):
    """Public video record."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    title: str
    thumbnail: str
    link: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
