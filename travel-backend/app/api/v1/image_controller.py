"""
Image upload API.

Endpoints:
  POST   /image-upload   multipart field "image" -> {"imageUrl": ...}
  DELETE /delete-image   ?imageUrl=...           -> {"message": ...}

Neither route requires authentication. A delete for an unknown image answers
200 with `"error": true` in the body.
"""

# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, File, Query, UploadFile

# Local application imports
from ...application.dto.image_dto import ImageUploadResponse, ImageDeleteResponse
from ...application.use_cases.image.upload_image import UploadImageUseCase
from ...application.use_cases.image.delete_image import DeleteImageUseCase
from ...infrastructure.storage.local_image_storage import ImageTooLargeError
from ...di.container import get_container
from ..exceptions import BadRequestError, PayloadTooLargeError


router = APIRouter(tags=["images"])


@router.post("/image-upload", response_model=ImageUploadResponse)
async def upload_image(image: Optional[UploadFile] = File(None)) -> ImageUploadResponse:
    """
    Upload an image for a travel story

    Returns:
        ImageUploadResponse with the public URL of the stored image
    """
    if image is None or not image.filename:
        raise BadRequestError("No image uploaded")

    container = get_container()
    upload_use_case = container.get(UploadImageUseCase)

    try:
        return await upload_use_case.execute(image, image.filename, image.content_type)
    except ImageTooLargeError as exception:
        raise PayloadTooLargeError(str(exception))
    except ValueError as exception:
        raise BadRequestError(str(exception))
    finally:
        await image.close()


@router.delete(
    "/delete-image",
    response_model=ImageDeleteResponse,
    response_model_exclude_none=True,
)
async def delete_image(image_url: Optional[str] = Query(None, alias="imageUrl")) -> ImageDeleteResponse:
    """
    Delete a previously uploaded image

    Args:
        image_url: URL returned by the upload (only the filename is used)

    Returns:
        ImageDeleteResponse; `error` is set when no such image exists
    """
    container = get_container()
    delete_use_case = container.get(DeleteImageUseCase)

    try:
        return await delete_use_case.execute(image_url or "")
    except ValueError as exception:
        raise BadRequestError(str(exception))
