"""Enum types for database models."""
import enum


class Role(str, enum.Enum):
    """User role enum."""
    USER = "user"
    MANAGER = "manager"
    SUPERVISOR = "supervisor"


# Roles allowed to manage rooms and users and to delete any video
ELEVATED_ROLES = (Role.MANAGER, Role.SUPERVISOR)
