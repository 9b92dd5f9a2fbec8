"""
Tests for image encoding.
"""
import base64

import pytest

from movie_match.encoding import EncodedImage, encode_image_bytes, encode_image_file
from movie_match.security import FileValidationError

from conftest import png_bytes


class TestEncodeImage:
    def test_bytes_are_base64_encoded(self):
        data = png_bytes()

        image = encode_image_bytes(data, "image/png")

        assert base64.b64decode(image.content) == data
        assert image.mime_type == "image/png"
        assert image.size_bytes == len(data)

    def test_rejected_bytes_are_not_encoded(self):
        with pytest.raises(FileValidationError):
            encode_image_bytes(b"plain text", "text/plain")

    def test_file(self, tmp_path):
        path = tmp_path / "still.png"
        path.write_bytes(png_bytes())

        image = encode_image_file(path)

        assert image.mime_type == "image/png"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileValidationError, match="Cannot read"):
            encode_image_file(tmp_path / "missing.png")


class TestDataUrl:
    def test_from_data_url(self):
        data = png_bytes()
        url = "data:image/png;base64," + base64.b64encode(data).decode("ascii")

        image = EncodedImage.from_data_url(url)

        assert image.size_bytes == len(data)
        assert image.mime_type == "image/png"

    @pytest.mark.parametrize(
        "url",
        ["", "image/png;base64,AAAA", "data:image/png;base64,@@not-base64@@"],
    )
    def test_malformed(self, url):
        with pytest.raises(FileValidationError):
            EncodedImage.from_data_url(url)
