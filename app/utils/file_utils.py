"""
File upload utilities for image validation and storage.
Uploaded files live under the upload directory and are served from the media prefix.
"""

import io
import logging
import secrets
import time
from pathlib import Path, PurePosixPath
from typing import List, Optional, Tuple
from PIL import Image, UnidentifiedImageError
import aiofiles
from fastapi import UploadFile

from app.config import get_settings
from app.utils.exceptions import (
    BadRequestError,
    UnsupportedFileTypeError,
    FileSizeExceededError,
    UpstreamError,
)

settings = get_settings()
logger = logging.getLogger(__name__)


class FileValidator:
    """Utility class for file validation operations."""

    # Stored extension and expected Pillow format per MIME type
    EXTENSIONS = {
        "image/jpeg": "jpg",
        "image/png": "png",
        "image/webp": "webp",
    }
    PIL_FORMATS = {
        "image/jpeg": "jpeg",
        "image/png": "png",
        "image/webp": "webp",
    }

    @classmethod
    def validate_mime_type(cls, mime_type: Optional[str], allowed_types: Optional[List[str]] = None) -> str:
        """
        Validate MIME type against the allow-list.

        Args:
            mime_type: Content type reported by the client
            allowed_types: Allow-list, defaults to the configured image types

        Returns:
            Validated MIME type

        Raises:
            UnsupportedFileTypeError: If the type is missing or not allowed
        """
        allowed = allowed_types or settings.allowed_image_types
        if not mime_type or mime_type not in allowed or mime_type not in cls.EXTENSIONS:
            raise UnsupportedFileTypeError(mime_type or "unknown", allowed)
        return mime_type

    @classmethod
    def validate_file_size(cls, file_size: int, max_size: int) -> int:
        if file_size <= 0:
            raise BadRequestError("Uploaded file is empty")
        if file_size > max_size:
            raise FileSizeExceededError(file_size, max_size)
        return file_size

    @classmethod
    def verify_image(cls, content: bytes, mime_type: str) -> None:
        """
        Check that the bytes decode as an image of the declared type.

        Raises:
            BadRequestError: If Pillow cannot read the content or the format differs
        """
        try:
            with Image.open(io.BytesIO(content)) as img:
                pil_format = (img.format or "").lower()
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise BadRequestError(f"Invalid image file: {str(e)}")

        if pil_format != cls.PIL_FORMATS[mime_type]:
            raise BadRequestError(
                f"Image format '{pil_format}' doesn't match MIME type '{mime_type}'"
            )

    @classmethod
    async def read_upload(
        cls,
        file: UploadFile,
        max_size: int,
        allowed_types: Optional[List[str]] = None
    ) -> Tuple[bytes, str]:
        """
        Validate an uploaded image and return its bytes.

        Args:
            file: FastAPI UploadFile object
            max_size: Maximum size in bytes
            allowed_types: Optional MIME allow-list

        Returns:
            Tuple of (content, file extension)

        Raises:
            UnsupportedFileTypeError: Disallowed MIME type
            FileSizeExceededError: File larger than max_size
            BadRequestError: Empty file or content that is not an image
        """
        mime_type = cls.validate_mime_type(file.content_type, allowed_types)

        await file.seek(0)
        content = await file.read()

        cls.validate_file_size(len(content), max_size)
        cls.verify_image(content, mime_type)

        return content, cls.EXTENSIONS[mime_type]


class FileStorage:
    """
    Local disk storage addressed by slash-separated keys.
    A key maps to `<base_dir>/<key>` on disk and `<url_prefix>/<key>` publicly.
    """

    def __init__(self, base_dir: Optional[Path] = None, url_prefix: Optional[str] = None):
        self.base_dir = Path(base_dir or settings.upload_dir)
        self.url_prefix = (url_prefix or settings.media_url_prefix).rstrip("/")
        self.base_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_key(folder: str, extension: str) -> str:
        """`{folder}/{timestamp-ms}-{random}.{ext}`"""
        return f"{folder}/{int(time.time() * 1000)}-{secrets.token_hex(4)}.{extension}"

    def path_for(self, key: str) -> Path:
        return self.base_dir / PurePosixPath(key)

    def url_for(self, key: str) -> str:
        return f"{self.url_prefix}/{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        """
        Recover the storage key from a public URL.

        Returns:
            The key, or None when the URL is not one of ours
        """
        prefix = f"{self.url_prefix}/"
        if not url.startswith(prefix):
            return None
        key = url[len(prefix):]
        parts = PurePosixPath(key).parts
        if not parts or ".." in parts or key.startswith("/"):
            return None
        return key

    async def save(self, key: str, content: bytes) -> str:
        """
        Write bytes under a key.

        Returns:
            Public URL of the stored file

        Raises:
            UpstreamError: If the write fails
        """
        file_path = self.path_for(key)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error(f"Failed to store {key}: {str(e)}")
            if file_path.exists():
                file_path.unlink(missing_ok=True)
            raise UpstreamError(f"Failed to store file: {str(e)}")

        return self.url_for(key)

    def delete(self, key: str) -> bool:
        """
        Delete the file behind a key.

        Returns:
            True if a file was removed, False otherwise
        """
        file_path = self.path_for(key)
        try:
            if file_path.exists():
                file_path.unlink()
                return True
            return False
        except OSError as e:
            logger.warning(f"Failed to delete {key}: {str(e)}")
            return False

    def delete_url(self, url: str) -> bool:
        key = self.key_from_url(url)
        if key is None:
            return False
        return self.delete(key)
