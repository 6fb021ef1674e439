"""Filesystem storage for uploaded images"""

from .local_image_storage import LocalImageStorage, ImageTooLargeError

__all__ = ["LocalImageStorage", "ImageTooLargeError"]
