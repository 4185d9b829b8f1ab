"""Filesystem storage for uploaded videos."""
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Optional
import logging
import re
import uuid

from roomvideo.core.exceptions import FileTooLargeError, InternalError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def safe_component(value: str) -> str:
    """Make a room number usable as a single path component."""
    cleaned = _UNSAFE_CHARS.sub("_", value).strip(".")
    return cleaned or "_"


class VideoStorage:
    """Lays out and writes video files under the upload directory.

    Files are grouped as ``<root>/<year>/<month>/room_<room number>/``.
    """

    def __init__(self, root: str):
        self.root = Path(root)

    def directory_for(self, room_number: str, now: datetime) -> Path:
        """Directory for a room's uploads in the month of ``now``."""
        return self.root / f"{now.year}" / f"{now.month:02d}" / f"room_{safe_component(room_number)}"

    def generate_filename(self, room_number: str, original_filename: Optional[str], now: datetime) -> str:
        """Generate a storage filename.

        The timestamp and room keep names browsable; the random suffix keeps
        two uploads to the same room in the same second apart.
        """
        extension = Path(original_filename or "").suffix.lower()
        timestamp = now.strftime("%Y%m%d_%H%M%S")
        return f"video_{timestamp}_{safe_component(room_number)}_{uuid.uuid4().hex}{extension}"

    def save(self, stream: BinaryIO, path: Path, max_size: int) -> int:
        """Write ``stream`` to ``path`` and return the number of bytes written.

        The file is created exclusively. If the stream exceeds ``max_size``
        the partial file is removed and FileTooLargeError is raised.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create upload directory {path.parent}: {e}")
            raise InternalError("Failed to create upload directory")

        try:
            buffer = path.open("xb")
        except FileExistsError:
            logger.error(f"Refusing to overwrite existing file {path}")
            raise InternalError("Failed to create file")
        except OSError as e:
            logger.error(f"Failed to create file {path}: {e}")
            raise InternalError("Failed to create file")

        written = 0
        try:
            with buffer:
                while True:
                    chunk = stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > max_size:
                        raise FileTooLargeError(max_size)
                    buffer.write(chunk)
        except FileTooLargeError:
            self.remove(path)
            raise
        except OSError as e:
            logger.error(f"Failed to save file {path}: {e}")
            self.remove(path)
            raise InternalError("Failed to save file")

        return written

    def remove(self, path) -> bool:
        """Remove a stored file. Failures are logged, never raised."""
        try:
            Path(path).unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"Failed to delete file {path}: {e}")
            return False

    def exists(self, path) -> bool:
        return Path(path).is_file()
