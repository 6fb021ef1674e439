from typing import TYPE_CHECKING
from ...infrastructure.storage.local_image_storage import LocalImageStorage
from ...application.use_cases.image.upload_image import UploadImageUseCase
from ...application.use_cases.image.delete_image import DeleteImageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ImageProvider:
    """Image storage provider - registers local storage and the upload/delete use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register image storage as a singleton and image use cases as factories.
        """
        try:
            container.get(LocalImageStorage)
        except ValueError:
            container.register_singleton(LocalImageStorage, LocalImageStorage())

        container.register_factory(
            UploadImageUseCase,
            lambda: UploadImageUseCase(image_storage=container.get(LocalImageStorage))
        )

        container.register_factory(
            DeleteImageUseCase,
            lambda: DeleteImageUseCase(image_storage=container.get(LocalImageStorage))
        )
