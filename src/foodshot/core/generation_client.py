"""Client for the remote image re-creation model.

``GenerationClient.generate()`` sends one uploaded photograph and the
compiled prompt to a Gemini image model through the ``google-genai`` SDK and
returns the re-created image as an inline data string ready for display.

Request
-------
The request carries two parts, in order:

1. The image, decoded from its inline data string (MIME type + raw bytes)
2. The prompt wrapped by ``frame_instruction()``

and asks for image-only output. Exactly one request is made per call: there
is no retry, batching or caching, and timeouts are whatever the SDK
transport applies.

Failure Modes
-------------
- Missing API key: ``ConfigurationError``, nothing is sent
- Empty or malformed image string: ``InputImageError``, nothing is sent
- SDK call raises: ``GenerationError`` carrying the underlying message
- Response without an image part: ``NoImageGeneratedError``
"""

import logging
import os
from collections.abc import Callable
from typing import Any

from google import genai
from google.genai import types

from .config import FoodshotConfig, config
from .errors import ConfigurationError, GenerationError, NoImageGeneratedError
from .inline_image import parse_inline_image, to_data_url
from .prompt_builder import frame_instruction

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "No image was generated in the response for re-creation."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while re-creating the image."

# MIME type assumed for returned image parts that do not declare one
DEFAULT_OUTPUT_MIME_TYPE = "image/png"


def extract_image(response: Any) -> str:
    """Return the first inline image of a response as a data string.

    Parts of the first candidate are scanned in order; text parts are skipped.

    Args:
        response: ``GenerateContentResponse`` from the SDK

    Returns:
        ``data:<mime>;base64,<content>`` for the first image part

    Raises:
        NoImageGeneratedError: If no part carries inline image data
    """
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    parts = getattr(content, "parts", None) or []

    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and inline_data.data:
            mime_type = inline_data.mime_type or DEFAULT_OUTPUT_MIME_TYPE
            return to_data_url(inline_data.data, mime_type)

    raise NoImageGeneratedError(NO_IMAGE_MESSAGE)


class GenerationClient:
    """Re-creates photographs with a Gemini image model.

    Args:
        settings: Configuration providing the model id and the name of the
            API key environment variable
        client_factory: Callable building an SDK client from ``api_key``
    """

    def __init__(
        self,
        settings: FoodshotConfig | None = None,
        client_factory: Callable[..., Any] = genai.Client,
    ):
        self.settings = settings or config
        self.client_factory = client_factory

    def _api_key(self) -> str:
        api_key = os.environ.get(self.settings.api_key_env)
        if not api_key:
            raise ConfigurationError(f"{self.settings.api_key_env} environment variable not set.")
        return api_key

    async def generate(self, prompt: str, selected_image: str) -> str:
        """Re-create a photograph following a prompt.

        Args:
            prompt: Compiled prompt from ``build_prompt()``
            selected_image: Inline data string of the selected upload

        Returns:
            Inline data string of the generated image

        Raises:
            ConfigurationError: If the API key is not set
            InputImageError: If the image string is empty or malformed
            GenerationError: If the remote call fails or returns no image
        """
        api_key = self._api_key()
        payload = parse_inline_image(selected_image)

        image_part = types.Part.from_bytes(data=payload.to_bytes(), mime_type=payload.mime_type)
        contents = [image_part, frame_instruction(prompt)]

        client = self.client_factory(api_key=api_key)
        logger.info(f"Requesting re-creation from {self.settings.model_id} ({payload.mime_type})")

        try:
            response = await client.aio.models.generate_content(
                model=self.settings.model_id,
                contents=contents,
                config=types.GenerateContentConfig(
                    response_modalities=[types.Modality.IMAGE],
                ),
            )
        except Exception as e:
            logger.error(f"Error re-creating image with Gemini: {e}", exc_info=True)
            raise GenerationError(str(e) or UNKNOWN_ERROR_MESSAGE) from e

        image = extract_image(response)
        logger.info("Re-created image received")
        return image
