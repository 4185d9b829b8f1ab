"""Application exceptions.

Every error carries the HTTP status it is rendered with, so services can raise
them without knowing about FastAPI.
"""


class RoomVideoError(Exception):
    """Base exception for all service errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RoomVideoError):
    """Raised when input is malformed or missing."""

    status_code = 400


class MissingFileError(ValidationError):
    """Raised when an upload carries no file part."""

    def __init__(self, message: str = "No video file provided"):
        super().__init__(message)


class FileTooLargeError(ValidationError):
    """Raised when an upload exceeds the configured size ceiling."""

    def __init__(self, max_size: int):
        """Initialize the exception.

        Args:
            max_size: The configured ceiling in bytes.
        """
        self.max_size = max_size
        super().__init__(f"File too large (limit {max_size} bytes)")


class AuthenticationError(RoomVideoError):
    """Raised for bad credentials or a missing/invalid token."""

    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    """Raised when a username/password pair does not match an active user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthorizationError(RoomVideoError):
    """Raised when the caller's role is not allowed to perform an operation."""

    status_code = 403


class NotFoundError(RoomVideoError):
    """Raised when a requested resource does not exist."""

    status_code = 404


class RecordNotFoundError(NotFoundError):
    """Raised when a database record does not exist."""


class RoomNotFoundError(NotFoundError):
    """Raised when an upload targets a room that does not exist."""

    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__("Room not found")


class FileMissingError(NotFoundError):
    """Raised when a video record exists but its file is gone from storage."""

    def __init__(self, message: str = "Video file not found"):
        super().__init__(message)


class ConflictError(RoomVideoError):
    """Raised when a natural key is already taken."""

    status_code = 409


class DependencyError(RoomVideoError):
    """Raised when a delete is blocked by dependent records."""

    status_code = 400


class InternalError(RoomVideoError):
    """Raised on storage or filesystem failures."""

    status_code = 500
