"""
Local filesystem storage for uploaded travel story images.

Files are written under the configured upload directory with a generated
name, and served by the `/uploads` static mount.
"""

# Standard library imports
import logging
import posixpath
import uuid
from pathlib import Path
from typing import Optional, Protocol

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


class ImageTooLargeError(ValueError):
    """Raised when an upload exceeds the configured size limit"""

    def __init__(self, max_bytes: int) -> None:
        self.max_bytes = max_bytes
        super().__init__(f"Image too large. Max {max_bytes // (1024 * 1024)} MB.")


class AsyncReadable(Protocol):
    async def read(self, size: int = -1) -> bytes:
        ...


class LocalImageStorage:
    """Stores images as files in a single directory"""

    def __init__(self, upload_dir: Optional[str] = None, max_bytes: Optional[int] = None) -> None:
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_bytes = max_bytes if max_bytes is not None else settings.image_upload_max_mb * 1024 * 1024

    def _ensure_dir(self) -> Path:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    async def save(self, source: AsyncReadable, extension: str) -> str:
        """
        Stream an upload to disk under a new unique name

        Args:
            source: Object with an async `read(size)` (e.g. FastAPI UploadFile)
            extension: File extension including the dot, e.g. ".png"

        Returns:
            The stored filename

        Raises:
            ImageTooLargeError: If the upload exceeds `max_bytes`
        """
        filename = f"{uuid.uuid4().hex}{extension.lower()}"
        final_path = self._ensure_dir() / filename

        size = 0
        with open(final_path, "wb") as f:
            while True:
                chunk = await source.read(_CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self.max_bytes:
                    f.close()
                    final_path.unlink(missing_ok=True)
                    raise ImageTooLargeError(self.max_bytes)
                f.write(chunk)

        logger.info("Stored image %s (%d bytes)", filename, size)
        return filename

    def resolve(self, image_ref: str) -> Optional[Path]:
        """
        Map an image URL or filename to a stored file path

        Only the last path segment is used, so references cannot escape the
        upload directory.

        Returns:
            Path of the stored file, or None if no such file exists
        """
        filename = posixpath.basename(image_ref.split("?", 1)[0].split("#", 1)[0])
        if not filename or filename in (".", ".."):
            return None
        path = self.upload_dir / filename
        if not path.is_file():
            return None
        return path

    def delete(self, image_ref: str) -> bool:
        """
        Delete the stored file referenced by an image URL or filename

        Returns:
            True if a file was removed, False if none was found
        """
        path = self.resolve(image_ref)
        if path is None:
            return False
        path.unlink(missing_ok=True)
        logger.info("Deleted image %s", path.name)
        return True
