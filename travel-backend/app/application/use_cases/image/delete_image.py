# Local application imports
from ....infrastructure.storage.local_image_storage import LocalImageStorage
from ...dto.image_dto import ImageDeleteResponse


class DeleteImageUseCase:
    """Use case for deleting a stored image by its URL"""

    def __init__(self, image_storage: LocalImageStorage) -> None:
        self.image_storage = image_storage

    async def execute(self, image_url: str) -> ImageDeleteResponse:
        """
        Delete the image a URL points to

        A missing image is reported in the body with `error` set, not raised.

        Raises:
            ValueError: If no URL is given
        """
        if not image_url:
            raise ValueError("imageUrl parameter is required")

        if self.image_storage.delete(image_url):
            return ImageDeleteResponse(message="Image deleted successfully")
        return ImageDeleteResponse(error=True, message="Image not found")
