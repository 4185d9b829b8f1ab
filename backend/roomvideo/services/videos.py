"""Video listing, detail and deletion."""
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from roomvideo.core.exceptions import RecordNotFoundError
from roomvideo.models.room import Room
from roomvideo.models.user import User
from roomvideo.models.video import Video
from roomvideo.schemas.auth import TokenData
from roomvideo.schemas.user import RoomResponse, UserSummary
from roomvideo.schemas.video import VideoResponse
from roomvideo.services.access_control import visible_videos, deletable_videos
from roomvideo.services.storage import VideoStorage

logger = logging.getLogger(__name__)


def to_response(db: Session, video: Video) -> VideoResponse:
    """Serialize a video with its room and uploader.

    Both are looked up by id, soft-deleted rows included, so historical
    references keep resolving.
    """
    room: Optional[Room] = db.get(Room, video.room_id) if video.room_id is not None else None
    uploader: Optional[User] = db.get(User, video.uploaded_by)

    response = VideoResponse(
        id=video.id,
        filename=video.filename,
        original_filename=video.original_filename,
        file_path=video.file_path,
        file_size=video.file_size,
        duration=video.duration,
        room_id=video.room_id,
        uploaded_by=video.uploaded_by,
        upload_date=video.upload_date,
        video_metadata=video.video_metadata or {},
        created_at=video.created_at,
    )
    if room is not None:
        response.room = RoomResponse.model_validate(room)
    if uploader is not None:
        response.user = UserSummary.model_validate(uploader)
    return response


def list_videos(db: Session, viewer: TokenData, visibility: str = "all") -> List[Video]:
    """List live videos the viewer may see, newest first."""
    query = db.query(Video).filter(Video.deleted_at.is_(None))
    query = visible_videos(query, viewer, visibility)
    return query.order_by(Video.upload_date.desc(), Video.id.desc()).all()


def get_video(db: Session, video_id: int, viewer: Optional[TokenData] = None, visibility: str = "all") -> Video:
    """Get a live video by id.

    Without a viewer no visibility filter is applied (used by streaming).
    """
    query = db.query(Video).filter(Video.id == video_id, Video.deleted_at.is_(None))
    if viewer is not None:
        query = visible_videos(query, viewer, visibility)

    video = query.first()
    if not video:
        raise RecordNotFoundError("Video not found")
    return video


def delete_video(db: Session, storage: VideoStorage, video_id: int, user: TokenData) -> None:
    """Remove a video's file and soft-delete its record.

    Ownership is part of the lookup, so a video the caller may not delete
    looks the same as a missing one.
    """
    query = db.query(Video).filter(Video.id == video_id, Video.deleted_at.is_(None))
    video = deletable_videos(query, user).first()

    if not video:
        raise RecordNotFoundError("Video not found")

    if not storage.remove(video.file_path):
        # Log error but continue with database deletion
        logger.warning(f"Backing file for video {video.id} was not removed: {video.file_path}")

    video.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info(f"Video {video.id} deleted by {user.username}")
