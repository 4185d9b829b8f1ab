"""Upload pipeline: store the file, then record it."""
from datetime import datetime
from typing import BinaryIO, Optional, Union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from roomvideo.config import Settings
from roomvideo.core.exceptions import (
    FileTooLargeError,
    InternalError,
    MissingFileError,
    NotFoundError,
    RoomNotFoundError,
    ValidationError,
)
from roomvideo.models.room import Room
from roomvideo.models.user import User
from roomvideo.models.video import Video
from roomvideo.schemas.auth import TokenData
from roomvideo.services.storage import VideoStorage

logger = logging.getLogger(__name__)


def parse_room_id(raw: Union[str, int, None]) -> int:
    """Validate the ``room_id`` form field."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("Room ID is required")
    try:
        room_id = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("Invalid room ID")
    if room_id <= 0:
        raise ValidationError("Invalid room ID")
    return room_id


class UploadPipeline:
    """Receive a video file for a room on behalf of an uploader.

    Either both the file and its record exist afterwards, or neither does:
    if the record cannot be written the file is removed again. Removal is
    best-effort and only logged when it fails.
    """

    def __init__(self, db: Session, storage: VideoStorage, settings: Settings):
        self.db = db
        self.storage = storage
        self.settings = settings

    def upload(
        self,
        stream: Optional[BinaryIO],
        original_filename: Optional[str],
        content_type: Optional[str],
        room_id: Union[str, int, None],
        uploader: TokenData,
        declared_size: Optional[int] = None,
    ) -> Video:
        """Run the pipeline and return the new Video record."""
        if stream is None or not original_filename:
            raise MissingFileError()

        if declared_size is not None and declared_size > self.settings.max_upload_size:
            raise FileTooLargeError(self.settings.max_upload_size)

        room = self._resolve_room(parse_room_id(room_id))
        self._resolve_uploader(uploader)

        now = datetime.now()
        directory = self.storage.directory_for(room.room_number, now)
        filename = self.storage.generate_filename(room.room_number, original_filename, now)
        file_path = directory / filename

        file_size = self.storage.save(stream, file_path, self.settings.max_upload_size)

        video = Video(
            filename=filename,
            original_filename=original_filename,
            file_path=str(file_path),
            file_size=file_size,
            room_id=room.id,
            uploaded_by=uploader.user_id,
            upload_date=now,
            video_metadata={
                "content_type": content_type or "",
                "room_number": room.room_number,
            },
        )

        try:
            self._create_record(video)
        except SQLAlchemyError as e:
            logger.error(f"Failed to save video record for {file_path}: {e}")
            self.db.rollback()
            # Clean up file if database save fails
            self.storage.remove(file_path)
            raise InternalError("Failed to save video record")

        # The row is committed from here on, so the file must stay
        self.db.refresh(video)

        logger.info(
            f"Stored video {video.id} ({file_size} bytes) for room {room.room_number} "
            f"uploaded by {uploader.username}"
        )
        return video

    def _resolve_room(self, room_id: int) -> Room:
        room = self.db.query(Room).filter(
            Room.id == room_id,
            Room.deleted_at.is_(None),
        ).first()
        if not room:
            raise RoomNotFoundError(room_id)
        return room

    def _resolve_uploader(self, uploader: TokenData) -> User:
        user = self.db.query(User).filter(
            User.id == uploader.user_id,
            User.deleted_at.is_(None),
        ).first()
        if not user:
            raise NotFoundError("Uploader not found")
        return user

    def _create_record(self, video: Video) -> None:
        self.db.add(video)
        self.db.commit()
