"""Room management endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from roomvideo.database import get_db
from roomvideo.dependencies import get_current_user, require_admin
from roomvideo.schemas.auth import TokenData
from roomvideo.schemas.user import RoomResponse, RoomCreate, RoomUpdate
from roomvideo.services import rooms as room_service

router = APIRouter()


@router.get("", response_model=List[RoomResponse])
async def list_rooms(
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List rooms (any authenticated user)."""
    return room_service.list_rooms(db)


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: int,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get room by ID."""
    return room_service.get_room(db, room_id)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    room_data: RoomCreate,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Create a room (manager/supervisor)."""
    return room_service.create_room(db, room_data)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: int,
    room_update: RoomUpdate,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Replace a room (manager/supervisor)."""
    return room_service.update_room(db, room_id, room_update)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: int,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a room without videos (manager/supervisor)."""
    room_service.delete_room(db, room_id)
    return None
