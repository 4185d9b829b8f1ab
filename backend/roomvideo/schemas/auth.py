"""Authentication schemas."""
from pydantic import BaseModel
from roomvideo.models.enums import Role, ELEVATED_ROLES
from roomvideo.schemas.user import UserResponse


class UserLogin(BaseModel):
    """User login schema."""
    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response with the signed token and the user it was issued to."""
    token: str
    token_type: str = "bearer"
    user: UserResponse


class TokenData(BaseModel):
    """JWT token payload data."""
    user_id: int
    username: str
    role: Role

    @property
    def is_elevated(self) -> bool:
        return self.role in ELEVATED_ROLES


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str
