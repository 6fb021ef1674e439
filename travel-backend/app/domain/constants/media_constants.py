"""
Shared constants for image uploads.

Used by the image upload use case and the local image storage. Single place
for easier updates.
"""

# -----------------------------------------------------------------------------
# Travel story images
# -----------------------------------------------------------------------------
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})
ALLOWED_IMAGE_CONTENT_TYPES = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
})

# Subfolder of the configured upload directory served under /uploads
UPLOADS_URL_PATH = "uploads"
