"""Authentication service."""
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from typing import Optional, Dict, Any
from sqlalchemy.orm import Session
from roomvideo.config import Settings
from roomvideo.core.exceptions import AuthenticationError, InvalidCredentialsError
from roomvideo.models.user import User
from roomvideo.schemas.auth import TokenData
from roomvideo.utils.security import verify_password
import logging

logger = logging.getLogger(__name__)


def create_access_token(
    data: Dict[str, Any],
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()

    if expires_delta is not None:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_access_token_expire_minutes)

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    return encoded_jwt


def create_user_token(user: User, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a token binding the user's id, username and role."""
    return create_access_token(
        data={
            "sub": str(user.id),
            "username": user.username,
            "role": user.role.value,
        },
        settings=settings,
        expires_delta=expires_delta,
    )


def decode_access_token(token: str, settings: Settings) -> TokenData:
    """Decode and verify a JWT access token.

    Signature and expiry are both checked; any failure is an
    AuthenticationError.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise AuthenticationError("Invalid or expired token")

    try:
        return TokenData(
            user_id=int(payload["sub"]),
            username=payload["username"],
            role=payload["role"],
        )
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError("Invalid token payload")


def authenticate(db: Session, username: str, password: str) -> User:
    """Verify a username/password pair against live, active users."""
    user = db.query(User).filter(
        User.username == username,
        User.is_active.is_(True),
        User.deleted_at.is_(None),
    ).first()

    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Failed login attempt for username '{username}'")
        raise InvalidCredentialsError()

    return user
