"""Video schemas."""
from pydantic import BaseModel
from datetime import datetime
from typing import Optional, Dict, Any
from roomvideo.schemas.user import RoomResponse, UserSummary


class VideoResponse(BaseModel):
    """Video response schema with its room and uploader resolved."""
    id: int
    filename: str
    original_filename: str
    file_path: str
    file_size: int
    duration: Optional[float] = None
    room_id: Optional[int] = None
    uploaded_by: int
    upload_date: Optional[datetime] = None
    video_metadata: Dict[str, Any] = {}
    created_at: Optional[datetime] = None
    room: Optional[RoomResponse] = None
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True
