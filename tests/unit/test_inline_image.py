"""Unit tests for inline image data strings."""

import base64

import pytest
from PIL import Image

from fakes import make_image_bytes
from foodshot.core.errors import InputImageError
from foodshot.core.inline_image import (
    FALLBACK_MIME_TYPE,
    InlinePayload,
    parse_inline_image,
    to_data_url,
    to_pil_image,
)


class TestParseInlineImage:
    """Tests for parse_inline_image()."""

    @pytest.mark.parametrize("mime_type", ["image/jpeg", "image/png", "image/webp"])
    def test_allowed_data_urls(self, mime_type):
        payload = parse_inline_image(f"data:{mime_type};base64,QUJD")
        assert payload == InlinePayload(mime_type=mime_type, data="QUJD")

    def test_bare_base64_defaults_to_jpeg(self):
        payload = parse_inline_image("QUJDRA==")
        assert payload.mime_type == FALLBACK_MIME_TYPE == "image/jpeg"
        assert payload.data == "QUJDRA=="

    def test_empty_string_rejected(self):
        with pytest.raises(InputImageError, match="empty"):
            parse_inline_image("")

    def test_empty_data_url_content_rejected(self):
        with pytest.raises(InputImageError, match="empty"):
            parse_inline_image("data:image/png;base64,")

    def test_unsupported_mime_rejected(self):
        with pytest.raises(InputImageError, match="Invalid base64 image string format"):
            parse_inline_image("data:image/gif;base64,R0lGOD")

    def test_garbage_rejected(self):
        with pytest.raises(InputImageError, match="Invalid base64 image string format"):
            parse_inline_image("not an image!")

    def test_non_base64_data_url_header(self):
        with pytest.raises(InputImageError):
            parse_inline_image("data:image/png,rawdata")


class TestInlinePayload:
    """Tests for InlinePayload."""

    def test_to_bytes(self):
        assert InlinePayload("image/png", "QUJD").to_bytes() == b"ABC"

    def test_to_bytes_invalid(self):
        with pytest.raises(InputImageError, match="Invalid base64"):
            InlinePayload("image/png", "QUJ").to_bytes()


class TestToDataUrl:
    """Tests for to_data_url()."""

    def test_bytes_are_encoded(self):
        assert to_data_url(b"ABC", "image/png") == "data:image/png;base64,QUJD"

    def test_text_is_used_as_is(self):
        assert to_data_url("QUJD", "image/jpeg") == "data:image/jpeg;base64,QUJD"


class TestToPilImage:
    """Tests for to_pil_image()."""

    def test_decodes_image(self, png_data_url):
        image = to_pil_image(png_data_url)
        assert isinstance(image, Image.Image)
        assert image.size == (8, 8)

    def test_bare_base64_jpeg(self):
        content = base64.b64encode(make_image_bytes("JPEG")).decode("ascii")
        assert to_pil_image(content).format == "JPEG"

    def test_not_an_image(self):
        with pytest.raises(InputImageError, match="Could not decode image"):
            to_pil_image("data:image/png;base64,QUJD")
