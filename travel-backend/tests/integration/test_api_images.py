"""
Integration tests for image upload and delete endpoints.
"""
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration


def _upload(client, content=b"\x89PNG fake", filename="beach.png", content_type="image/png"):
    return client.post("/image-upload", files={"image": (filename, content, content_type)})


class TestImageUpload:
    """Tests for POST /image-upload"""

    def test_upload_returns_url(self, client, mock_settings):
        response = _upload(client)

        assert response.status_code == 200
        image_url = response.json()["imageUrl"]
        assert image_url.startswith("http://localhost:8000/uploads/")
        assert image_url.endswith(".png")
        stored = Path(mock_settings.upload_dir) / image_url.rsplit("/", 1)[1]
        assert stored.read_bytes() == b"\x89PNG fake"

    def test_upload_without_file(self, client):
        response = client.post("/image-upload")

        assert response.status_code == 400
        assert response.json() == {"error": True, "message": "No image uploaded"}

    def test_upload_non_image(self, client):
        response = _upload(client, content=b"%PDF", filename="doc.pdf", content_type="application/pdf")
        assert response.status_code == 400

    def test_upload_too_large(self, client):
        response = _upload(client, content=b"x" * 2048)
        assert response.status_code == 413
        assert response.json()["error"] is True


class TestDeleteImage:
    """Tests for DELETE /delete-image"""

    def test_delete_existing(self, client, mock_settings):
        image_url = _upload(client).json()["imageUrl"]

        response = client.delete("/delete-image", params={"imageUrl": image_url})

        assert response.status_code == 200
        assert response.json() == {"message": "Image deleted successfully"}
        assert not (Path(mock_settings.upload_dir) / image_url.rsplit("/", 1)[1]).exists()

    def test_delete_not_found_is_200_with_error_flag(self, client):
        response = client.delete("/delete-image?imageUrl=http://x/uploads/none.png")

        assert response.status_code == 200
        assert response.json() == {"error": True, "message": "Image not found"}

    def test_delete_missing_parameter(self, client):
        response = client.delete("/delete-image")

        assert response.status_code == 400
        assert response.json() == {"error": True, "message": "imageUrl parameter is required"}
