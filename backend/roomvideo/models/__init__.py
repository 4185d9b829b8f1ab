"""Database models."""
from roomvideo.models.user import User
from roomvideo.models.room import Room
from roomvideo.models.video import Video
from roomvideo.models.enums import Role, ELEVATED_ROLES

__all__ = [
    "User",
    "Room",
    "Video",
    "Role",
    "ELEVATED_ROLES",
]
