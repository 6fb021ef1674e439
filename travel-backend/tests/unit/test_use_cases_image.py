"""
Unit tests for image use cases (Upload, Delete).
"""
import io
from unittest.mock import AsyncMock, MagicMock

import pytest
from app.application.use_cases.image.delete_image import DeleteImageUseCase
from app.application.use_cases.image.upload_image import UploadImageUseCase


class _Source:
    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)


class TestUploadImageUseCase:
    """Tests for UploadImageUseCase"""

    @pytest.mark.asyncio
    async def test_returns_public_url(self, mock_settings):
        storage = MagicMock()
        storage.save = AsyncMock(return_value="f00d.png")

        use_case = UploadImageUseCase(storage)
        result = await use_case.execute(_Source(b"png"), "beach.PNG", "image/png")

        assert result.image_url == "http://localhost:8000/uploads/f00d.png"
        assert storage.save.await_args.args[1] == ".png"

    @pytest.mark.asyncio
    async def test_extension_derived_from_content_type(self, mock_settings):
        storage = MagicMock()
        storage.save = AsyncMock(return_value="f00d.jpg")

        use_case = UploadImageUseCase(storage)
        await use_case.execute(_Source(b"jpg"), "photo", "image/jpeg")

        assert storage.save.await_args.args[1] == ".jpg"

    @pytest.mark.asyncio
    async def test_non_image_rejected(self, mock_settings):
        storage = MagicMock()
        storage.save = AsyncMock()

        use_case = UploadImageUseCase(storage)
        with pytest.raises(ValueError, match="Only image files"):
            await use_case.execute(_Source(b"%PDF"), "notes.pdf", "application/pdf")
        storage.save.assert_not_called()


class TestDeleteImageUseCase:
    """Tests for DeleteImageUseCase"""

    @pytest.mark.asyncio
    async def test_deleted(self):
        storage = MagicMock()
        storage.delete.return_value = True

        result = await DeleteImageUseCase(storage).execute("http://x/uploads/a.png")

        assert result.error is None
        assert result.message == "Image deleted successfully"
        storage.delete.assert_called_once_with("http://x/uploads/a.png")

    @pytest.mark.asyncio
    async def test_not_found_sets_error_flag(self):
        storage = MagicMock()
        storage.delete.return_value = False

        result = await DeleteImageUseCase(storage).execute("http://x/uploads/none.png")

        assert result.error is True
        assert result.message == "Image not found"

    @pytest.mark.asyncio
    async def test_missing_url_raises(self):
        with pytest.raises(ValueError, match="imageUrl parameter is required"):
            await DeleteImageUseCase(MagicMock()).execute("")
