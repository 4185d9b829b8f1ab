"""Room registry."""
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from roomvideo.core.exceptions import ConflictError, DependencyError, RecordNotFoundError
from roomvideo.models.room import Room
from roomvideo.models.video import Video
from roomvideo.schemas.user import RoomCreate, RoomUpdate

logger = logging.getLogger(__name__)


def list_rooms(db: Session) -> List[Room]:
    return db.query(Room).filter(Room.deleted_at.is_(None)).order_by(Room.room_number).all()


def get_room(db: Session, room_id: int) -> Room:
    room = db.query(Room).filter(Room.id == room_id, Room.deleted_at.is_(None)).first()
    if not room:
        raise RecordNotFoundError("Room not found")
    return room


def _room_number_taken(db: Session, room_number: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(Room).filter(Room.room_number == room_number, Room.deleted_at.is_(None))
    if exclude_id is not None:
        query = query.filter(Room.id != exclude_id)
    return query.first() is not None


def _commit(db: Session) -> None:
    # The unique index has the final word when two writers race the pre-check
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Room number already exists")


def create_room(db: Session, room_data: RoomCreate) -> Room:
    """Create a room with a room number no live room uses."""
    if _room_number_taken(db, room_data.room_number):
        raise ConflictError("Room number already exists")

    room = Room(room_number=room_data.room_number, is_active=True)
    db.add(room)
    _commit(db)
    db.refresh(room)

    logger.info(f"Room {room.room_number} created")
    return room


def update_room(db: Session, room_id: int, room_update: RoomUpdate) -> Room:
    """Replace a room's mutable fields."""
    room = get_room(db, room_id)

    if _room_number_taken(db, room_update.room_number, exclude_id=room.id):
        raise ConflictError("Room number already exists")

    room.room_number = room_update.room_number
    room.is_active = room_update.is_active
    _commit(db)
    db.refresh(room)

    return room


def delete_room(db: Session, room_id: int) -> None:
    """Soft-delete a room that no live video references."""
    room = get_room(db, room_id)

    video_count = db.query(Video).filter(
        Video.room_id == room.id,
        Video.deleted_at.is_(None),
    ).count()
    if video_count > 0:
        raise DependencyError(f"Cannot delete room with {video_count} existing videos")

    room.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info(f"Room {room.room_number} deleted")
