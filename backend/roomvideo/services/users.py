"""Credential store: user administration."""
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from roomvideo.core.exceptions import ConflictError, DependencyError, RecordNotFoundError
from roomvideo.models.enums import Role
from roomvideo.models.user import User
from roomvideo.models.video import Video
from roomvideo.schemas.user import UserCreate, UserUpdate
from roomvideo.utils.security import get_password_hash

logger = logging.getLogger(__name__)


def list_users(db: Session) -> List[User]:
    return db.query(User).filter(User.deleted_at.is_(None)).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id, User.deleted_at.is_(None)).first()
    if not user:
        raise RecordNotFoundError("User not found")
    return user


def _check_unique(db: Session, username: str, email: str, exclude_id: Optional[int] = None) -> None:
    """Friendly pre-check; the unique indexes are the real guarantee."""
    live = db.query(User).filter(User.deleted_at.is_(None))
    if exclude_id is not None:
        live = live.filter(User.id != exclude_id)

    if live.filter(User.username == username).first():
        raise ConflictError("Username already exists")
    if live.filter(User.email == email).first():
        raise ConflictError("Email already exists")


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Username or email already exists")


def create_user(
    db: Session,
    username: str,
    email: str,
    password: str,
    role: Role = Role.USER,
    is_active: bool = True,
) -> User:
    """Create a user with a hashed password."""
    _check_unique(db, username, email)

    user = User(
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        role=role,
        is_active=is_active,
    )
    db.add(user)
    _commit(db)
    db.refresh(user)

    logger.info(f"User {user.username} created with role {user.role.value}")
    return user


def create_user_from_schema(db: Session, user_data: UserCreate) -> User:
    return create_user(
        db,
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        role=user_data.role,
    )


def update_user(db: Session, user_id: int, user_update: UserUpdate) -> User:
    """Replace a user's mutable fields."""
    user = get_user(db, user_id)

    _check_unique(db, user_update.username, user_update.email, exclude_id=user.id)

    user.username = user_update.username
    user.email = user_update.email
    user.role = user_update.role
    user.is_active = user_update.is_active
    _commit(db)
    db.refresh(user)

    return user


def delete_user(db: Session, user_id: int) -> None:
    """Soft-delete a user who has no live uploads."""
    user = get_user(db, user_id)

    video_count = db.query(Video).filter(
        Video.uploaded_by == user.id,
        Video.deleted_at.is_(None),
    ).count()
    if video_count > 0:
        raise DependencyError(f"Cannot delete user with {video_count} existing videos")

    user.deleted_at = datetime.now(timezone.utc)
    db.commit()
    logger.info(f"User {user.username} deleted")
