"""User management endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from roomvideo.database import get_db
from roomvideo.dependencies import require_admin
from roomvideo.schemas.auth import TokenData
from roomvideo.schemas.user import UserResponse, UserCreate, UserUpdate
from roomvideo.services import users as user_service

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """List users (manager/supervisor)."""
    return user_service.list_users(db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Create a new user (manager/supervisor)."""
    return user_service.create_user_from_schema(db, user_data)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Get user by ID."""
    return user_service.get_user(db, user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Replace a user (manager/supervisor)."""
    return user_service.update_user(db, user_id, user_update)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    current_user: TokenData = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a user without videos (manager/supervisor)."""
    user_service.delete_user(db, user_id)
    return None
