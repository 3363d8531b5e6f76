"""Video Routes: the five CRUD endpoints under /api/videos.

Invariants:
    - Bodies are parsed into Pydantic models before a handler runs
    - Presence checks live in core/video_records.py, not here; update bodies
      are checked by the repository as part of the write
    - A repository None/False result becomes ResourceNotFoundError (404)
    - Every record leaves through reshape_video() → VideoResponse
"""

import logging

from fastapi import APIRouter, Depends, status

from nexuscore.core.domain_types import VIDEO_RESOURCE, VideoId
from nexuscore.core.errors import ResourceNotFoundError
from nexuscore.core.repository_protocols import VideoRepository
from nexuscore.core.video_records import (
    check_create_payload, reshape_video,
)
from nexuscore.infrastructure.database import get_video_repository
from nexuscore.schemas.video import (
    MessageResponse, VideoCreate, VideoResponse, VideoUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/videos", tags=["videos"])

DELETED_MESSAGE = "Video deleted successfully."


def _to_response(document: dict) -> VideoResponse:
    return VideoResponse.model_validate(reshape_video(document))


@router.post(
    "", response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_video(
    body: VideoCreate,
    repo: VideoRepository = Depends(get_video_repository),
):
    """Create a video from title, thumbnail and link."""
    fields = check_create_payload(body.model_dump())
    document = await repo.create(fields)
    return _to_response(document)


@router.get("", response_model=list[VideoResponse])
async def list_videos(repo: VideoRepository = Depends(get_video_repository)):
    """All videos, most recently created first."""
    documents = await repo.list_all()
    return [_to_response(d) for d in documents]


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: str, repo: VideoRepository = Depends(get_video_repository),
):
    document = await repo.get(VideoId(video_id))
    if document is None:
        raise ResourceNotFoundError(VIDEO_RESOURCE, video_id)
    return _to_response(document)


@router.put("/{video_id}", response_model=VideoResponse)
async def update_video(
    video_id: str,
    body: VideoUpdate,
    repo: VideoRepository = Depends(get_video_repository),
):
    """Replace the supplied fields and refresh updatedAt."""
    document = await repo.update(
        VideoId(video_id), body.model_dump(exclude_unset=True),
    )
    if document is None:
        raise ResourceNotFoundError(VIDEO_RESOURCE, video_id)
    return _to_response(document)


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(
    video_id: str, repo: VideoRepository = Depends(get_video_repository),
):
    deleted = await repo.delete(VideoId(video_id))
    if not deleted:
        raise ResourceNotFoundError(VIDEO_RESOURCE, video_id)
    logger.info("Video deleted", extra={"video_id": video_id})
    return MessageResponse(message=DELETED_MESSAGE)
