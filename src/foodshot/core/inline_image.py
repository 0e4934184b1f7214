"""Inline image data strings.

Images travel through the application as self-describing strings of the form
``data:<mime type>;base64,<content>``. The same string is used as the display
source of an uploaded thumbnail, as the selection key, and as the request
payload for the remote model.

Accepted MIME types are JPEG, PNG and WEBP. A bare base64 string (no
``data:`` header) is also accepted and assumed to be JPEG. That fallback is a
heuristic for callers that strip the header, not a format detection: the
real type of such a payload is unknown.
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from io import BytesIO

from PIL import Image

from .errors import InputImageError

ALLOWED_MIME_TYPES = ("image/jpeg", "image/png", "image/webp")
FALLBACK_MIME_TYPE = "image/jpeg"

_DATA_URL_PATTERN = re.compile(r"^data:(image/(?:jpeg|png|webp));base64,(.*)$", re.DOTALL)
_BARE_BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]+={0,2}$")


@dataclass(frozen=True)
class InlinePayload:
    """MIME type and base64 content of an inline image."""

    mime_type: str
    data: str

    def to_bytes(self) -> bytes:
        """Decode the base64 content.

        Raises:
            InputImageError: If the content is not valid base64
        """
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InputImageError(f"Invalid base64 image data: {e}") from e


def parse_inline_image(value: str) -> InlinePayload:
    """Split an inline image string into MIME type and base64 content.

    Args:
        value: ``data:image/...;base64,...`` string, or bare base64

    Returns:
        InlinePayload for the image

    Raises:
        InputImageError: If the string is empty or has neither shape
    """
    if not value:
        raise InputImageError("Image payload is empty")

    match = _DATA_URL_PATTERN.match(value)
    if match:
        if not match.group(2):
            raise InputImageError("Image payload is empty")
        return InlinePayload(mime_type=match.group(1), data=match.group(2))

    if _BARE_BASE64_PATTERN.match(value):
        return InlinePayload(mime_type=FALLBACK_MIME_TYPE, data=value)

    raise InputImageError("Invalid base64 image string format")


def to_data_url(content: bytes | str, mime_type: str) -> str:
    """Encode image content as an inline data string.

    Args:
        content: Raw image bytes, or content that is already base64 text
        mime_type: MIME type declared in the header

    Returns:
        ``data:<mime_type>;base64,<content>``
    """
    if isinstance(content, bytes):
        content = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{content}"


def to_pil_image(value: str) -> Image.Image:
    """Decode an inline image string into a Pillow image for display.

    Raises:
        InputImageError: If the string cannot be parsed or decoded as an image
    """
    raw = parse_inline_image(value).to_bytes()
    try:
        image = Image.open(BytesIO(raw))
        image.load()
    except (OSError, Image.DecompressionBombError) as e:
        raise InputImageError(f"Could not decode image: {e}") from e
    return image
