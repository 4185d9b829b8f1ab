"""Video management endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Request, Response
from fastapi.responses import StreamingResponse, FileResponse
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple
from pathlib import Path
from roomvideo.config import Settings
from roomvideo.core.exceptions import AuthenticationError, FileMissingError
from roomvideo.database import get_db
from roomvideo.dependencies import get_app_settings, get_current_user, get_optional_user
from roomvideo.schemas.auth import TokenData
from roomvideo.schemas.video import VideoResponse
from roomvideo.services import videos as video_service
from roomvideo.services.storage import VideoStorage
from roomvideo.services.upload import UploadPipeline

router = APIRouter()

MIME_TYPES = {
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".ogg": "video/ogg",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
    ".mkv": "video/x-matroska",
}

# Playback clients may fetch ranges from another origin
STREAM_HEADERS = {
    "Accept-Ranges": "bytes",
    "Cache-Control": "no-cache",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, HEAD, OPTIONS",
    "Access-Control-Allow-Headers": "Range, Content-Range, Accept-Ranges",
    "Access-Control-Expose-Headers": "Content-Length, Content-Range, Accept-Ranges, Content-Type",
}


def get_storage(settings: Settings = Depends(get_app_settings)) -> VideoStorage:
    """Storage rooted at the configured upload directory."""
    return VideoStorage(settings.upload_dir)


def parse_range(range_header: str, file_size: int) -> Optional[Tuple[int, int]]:
    """Parse a single ``bytes=`` range into inclusive offsets.

    Returns None when the header is not a byte range we understand, so the
    whole file is served. Raises 416 for ranges outside the file.
    """
    unit, _, ranges = range_header.partition("=")
    if unit.strip().lower() != "bytes" or "," in ranges:
        return None

    first, _, last = ranges.strip().partition("-")
    try:
        if first:
            start = int(first)
            end = int(last) if last else file_size - 1
        elif last:
            # Suffix range: the final N bytes
            start = max(file_size - int(last), 0)
            end = file_size - 1
        else:
            return None
    except ValueError:
        return None

    end = min(end, file_size - 1)
    if start > end or start >= file_size:
        raise HTTPException(
            status_code=status.HTTP_416_REQUESTED_RANGE_NOT_SATISFIABLE,
            detail="Requested range not satisfiable",
            headers={"Content-Range": f"bytes */{file_size}"},
        )
    return start, end


@router.post("/upload", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
def upload_video(
    request: Request,
    video: Optional[UploadFile] = File(None),
    room_id: Optional[str] = Form(None),
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    storage: VideoStorage = Depends(get_storage),
):
    """Upload a video file for a room."""
    content_length = request.headers.get("content-length")
    declared_size = int(content_length) if content_length and content_length.isdigit() else None

    pipeline = UploadPipeline(db, storage, settings)
    record = pipeline.upload(
        stream=video.file if video is not None else None,
        original_filename=video.filename if video is not None else None,
        content_type=video.content_type if video is not None else None,
        room_id=room_id,
        uploader=current_user,
        declared_size=declared_size,
    )

    return video_service.to_response(db, record)


@router.get("", response_model=List[VideoResponse])
async def list_videos(
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """List videos with their rooms and uploaders."""
    videos = video_service.list_videos(db, current_user, settings.video_visibility)
    return [video_service.to_response(db, v) for v in videos]


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: int,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Get video by ID."""
    video = video_service.get_video(db, video_id, current_user, settings.video_visibility)
    return video_service.to_response(db, video)


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: int,
    current_user: TokenData = Depends(get_current_user),
    db: Session = Depends(get_db),
    storage: VideoStorage = Depends(get_storage),
):
    """Delete a video (uploader, manager or supervisor)."""
    video_service.delete_video(db, storage, video_id, current_user)
    return None


@router.options("/{video_id}/stream")
async def stream_video_preflight(video_id: int):
    """Answer CORS preflight for the stream."""
    return Response(status_code=status.HTTP_200_OK, headers=STREAM_HEADERS)


@router.api_route("/{video_id}/stream", methods=["GET", "HEAD"])
async def stream_video(
    video_id: int,
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Stream video file with HTTP range support for seeking.

    Open to anonymous callers unless ``stream_requires_auth`` is set, in
    which case a bearer header or a ``token`` query parameter is required.
    """
    current_user = None
    if settings.stream_requires_auth:
        current_user = await get_optional_user(request, settings)
        if current_user is None:
            raise AuthenticationError("Authentication required")

    video = video_service.get_video(db, video_id, current_user, settings.video_visibility)

    file_path = Path(video.file_path)
    if not file_path.is_file():
        raise FileMissingError()

    file_size = file_path.stat().st_size
    content_type = (video.video_metadata or {}).get("content_type") or ""
    if not content_type.startswith("video/"):
        content_type = MIME_TYPES.get(file_path.suffix.lower(), "video/mp4")

    # Handle range requests for video seeking
    range_header = request.headers.get("range")
    byte_range = parse_range(range_header, file_size) if range_header and file_size else None

    if byte_range is not None:
        start, end = byte_range
        chunk_size = end - start + 1

        def file_chunk_generator():
            with open(file_path, "rb") as video_file:
                video_file.seek(start)
                remaining = chunk_size
                while remaining > 0:
                    chunk = video_file.read(min(64 * 1024, remaining))
                    if not chunk:
                        break
                    remaining -= len(chunk)
                    yield chunk

        headers = dict(STREAM_HEADERS)
        headers.update({
            "Content-Range": f"bytes {start}-{end}/{file_size}",
            "Content-Length": str(chunk_size),
        })

        if request.method == "HEAD":
            return Response(status_code=status.HTTP_206_PARTIAL_CONTENT, headers=headers, media_type=content_type)

        return StreamingResponse(
            file_chunk_generator(),
            status_code=status.HTTP_206_PARTIAL_CONTENT,
            media_type=content_type,
            headers=headers,
        )

    # No range request, return full file
    if request.method == "HEAD":
        headers = dict(STREAM_HEADERS)
        headers["Content-Length"] = str(file_size)
        return Response(status_code=status.HTTP_200_OK, headers=headers, media_type=content_type)

    return FileResponse(file_path, media_type=content_type, headers=STREAM_HEADERS)
