"""User and room schemas."""
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional
from roomvideo.models.enums import Role


class UserBase(BaseModel):
    """Base user schema."""
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    role: Role = Role.USER


class UserCreate(UserBase):
    """User creation schema."""
    password: str = Field(..., min_length=6, max_length=100)


class UserUpdate(UserBase):
    """User replacement schema; every mutable field is required."""
    role: Role
    is_active: bool


class UserResponse(BaseModel):
    """User response schema."""
    id: int
    username: str
    email: str
    role: Role
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserSummary(BaseModel):
    """Uploader identity attached to videos."""
    id: int
    username: str
    role: Role

    class Config:
        from_attributes = True


class RoomBase(BaseModel):
    """Base room schema."""
    room_number: str = Field(..., min_length=1, max_length=20)


class RoomCreate(RoomBase):
    """Room creation schema."""
    pass


class RoomUpdate(RoomBase):
    """Room replacement schema; every mutable field is required."""
    is_active: bool


class RoomResponse(RoomBase):
    """Room response schema."""
    id: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
