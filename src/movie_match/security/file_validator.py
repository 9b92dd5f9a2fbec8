"""
Image upload validation.

Every image entry point validates its payload here before it is encoded
and sent to a collaborator.
"""

import io
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .exceptions import FileValidationError

logger = logging.getLogger(__name__)


class FileValidator:
    """
    Validates image payloads by size, declared type and actual content.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024
    ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

    @staticmethod
    def validate_image_bytes(
        data: bytes,
        mime_type: Optional[str],
        max_bytes: int = MAX_FILE_SIZE,
    ) -> str:
        """
        Validate raw image bytes.

        :param data: Image content
        :param mime_type: Declared MIME type (e.g. "image/png")
        :param max_bytes: Size limit in bytes
        :return: The normalized MIME type
        :raises FileValidationError: If the payload is empty, too large or not an image
        """
        size = len(data) if data else 0
        declared = (mime_type or "").lower().strip()

        if not declared.startswith("image/"):
            logger.warning(f"Rejected upload: type={declared or 'unknown'}, size={size}")
            raise FileValidationError("Please select an image file only.")

        if size == 0:
            raise FileValidationError("Image file is empty")

        if size > max_bytes:
            logger.warning(f"Rejected upload: type={declared}, size={size} > {max_bytes}")
            raise FileValidationError(
                f"Image size {size} bytes exceeds maximum {max_bytes} bytes"
            )

        try:
            with Image.open(io.BytesIO(data)) as img:
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            logger.warning(f"Rejected upload: type={declared}, size={size}, not decodable: {e}")
            raise FileValidationError("File is not a valid image") from e

        return declared

    @staticmethod
    def validate_image_file(file_path: str, max_bytes: int = MAX_FILE_SIZE) -> Tuple[bool, Optional[str]]:
        """
        Validate an image file on disk.

        :param file_path: Path to the file to validate
        :param max_bytes: Size limit in bytes
        :return: Tuple of (is_valid, error_message)
        """
        path = Path(file_path)

        if not path.is_file():
            return False, "File does not exist"

        if path.suffix.lower() not in FileValidator.ALLOWED_EXTENSIONS:
            return False, (
                f"File extension '{path.suffix}' not allowed. "
                f"Allowed: {', '.join(sorted(FileValidator.ALLOWED_EXTENSIONS))}"
            )

        try:
            data = path.read_bytes()
        except OSError as e:
            return False, f"Cannot read file: {e}"

        try:
            FileValidator.validate_image_bytes(data, guess_mime_type(path), max_bytes)
        except FileValidationError as e:
            return False, str(e)

        return True, None


def guess_mime_type(path) -> Optional[str]:
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type
