"""Access control for video listing, detail and deletion."""
from sqlalchemy.orm import Query
from roomvideo.models.video import Video
from roomvideo.schemas.auth import TokenData


def visible_videos(query: Query, user: TokenData, visibility: str) -> Query:
    """Restrict a video query to what the viewer may see.

    Access rules:
    1. visibility "all": every authenticated caller sees every video
    2. visibility "own": managers and supervisors see every video,
       plain users only see their own uploads
    """
    if visibility == "own" and not user.is_elevated:
        return query.filter(Video.uploaded_by == user.user_id)
    return query


def deletable_videos(query: Query, user: TokenData) -> Query:
    """Restrict a video query to what the caller may delete.

    Managers and supervisors may delete any video, everyone else only
    their own uploads.
    """
    if user.is_elevated:
        return query
    return query.filter(Video.uploaded_by == user.user_id)
