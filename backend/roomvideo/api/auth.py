"""Authentication endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from roomvideo.config import Settings
from roomvideo.database import get_db
from roomvideo.dependencies import get_app_settings, get_current_user
from roomvideo.schemas.auth import UserLogin, LoginResponse, MessageResponse, TokenData
from roomvideo.schemas.user import UserResponse
from roomvideo.services.auth import authenticate, create_user_token
from roomvideo.services.users import get_user

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    user_data: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Login and get access token."""
    user = authenticate(db, user_data.username, user_data.password)
    token = create_user_token(user, settings)

    return {"token": token, "token_type": "bearer", "user": UserResponse.model_validate(user)}


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Logout. Tokens are stateless, so the client just drops its copy."""
    return {"message": "Logout successful"}


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get current user information."""
    return get_user(db, current_user.user_id)
