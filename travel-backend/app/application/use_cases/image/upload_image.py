# Standard library imports
from pathlib import Path
from typing import Optional

# Local application imports
from ....core.config import get_settings
from ....domain.constants import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    ALLOWED_IMAGE_EXTENSIONS,
    UPLOADS_URL_PATH,
)
from ....infrastructure.storage.local_image_storage import AsyncReadable, LocalImageStorage
from ...dto.image_dto import ImageUploadResponse


_DEFAULT_EXTENSION_BY_CONTENT_TYPE = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class UploadImageUseCase:
    """Use case for storing an uploaded image and returning its public URL"""

    def __init__(self, image_storage: LocalImageStorage) -> None:
        self.image_storage = image_storage

    async def execute(
        self,
        source: AsyncReadable,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> ImageUploadResponse:
        """
        Store an image

        Args:
            source: Upload stream
            filename: Client-supplied filename (only its extension is kept)
            content_type: Client-supplied MIME type

        Returns:
            ImageUploadResponse with the URL the image is served from

        Raises:
            ValueError: If the upload is not an allowed image type
            ImageTooLargeError: If the upload exceeds the size limit
        """
        content_type = (content_type or "").split(";", 1)[0].strip().lower()
        extension = Path(filename or "").suffix.lower()

        if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
            raise ValueError("Only image files are allowed (jpg, png, gif, webp)")
        if extension not in ALLOWED_IMAGE_EXTENSIONS:
            extension = _DEFAULT_EXTENSION_BY_CONTENT_TYPE[content_type]

        stored_name = await self.image_storage.save(source, extension)
        base_url = get_settings().public_base_url
        return ImageUploadResponse(image_url=f"{base_url}/{UPLOADS_URL_PATH}/{stored_name}")
