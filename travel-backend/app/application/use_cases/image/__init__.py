from .upload_image import UploadImageUseCase
from .delete_image import DeleteImageUseCase

__all__ = ["UploadImageUseCase", "DeleteImageUseCase"]
