"""
Base64 encoding of image payloads for the image-based producers.
"""
import base64
import binascii
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from .security import FileValidator, FileValidationError, guess_mime_type

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


@dataclass(frozen=True)
class EncodedImage:
    """A validated image ready to be sent to a collaborator."""
    content: str
    mime_type: str
    size_bytes: int

    @classmethod
    def from_data_url(cls, data_url: str, max_bytes: int = FileValidator.MAX_FILE_SIZE) -> "EncodedImage":
        """
        Build from a "data:<mime>;base64,<payload>" URL.

        :raises FileValidationError: If the URL is malformed or the image invalid
        """
        match = _DATA_URL.match((data_url or "").strip())
        if not match:
            raise FileValidationError("Expected a base64 data URL")
        try:
            data = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError) as e:
            raise FileValidationError("Data URL payload is not valid base64") from e
        return encode_image_bytes(data, match.group("mime"), max_bytes=max_bytes)


def encode_image_bytes(
    data: bytes,
    mime_type: str,
    max_bytes: int = FileValidator.MAX_FILE_SIZE,
) -> EncodedImage:
    """
    Validate and base64-encode raw image bytes.

    :raises FileValidationError: If the image is rejected
    """
    mime_type = FileValidator.validate_image_bytes(data, mime_type, max_bytes)
    encoded = base64.b64encode(data).decode("ascii")
    logger.debug(f"Encoded image: type={mime_type}, size={len(data)}, encoded={len(encoded)} chars")
    return EncodedImage(content=encoded, mime_type=mime_type, size_bytes=len(data))


def encode_image_file(path, max_bytes: int = FileValidator.MAX_FILE_SIZE) -> EncodedImage:
    """
    Read, validate and encode an image file.

    :raises FileValidationError: If the file is missing, unreadable or rejected
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise FileValidationError(f"Cannot read image file: {file_path.name}") from e
    return encode_image_bytes(data, guess_mime_type(file_path), max_bytes=max_bytes)
