"""Image re-creation handler."""

import logging
import tempfile
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import gradio as gr
from PIL import Image

from foodshot.core.config import config
from foodshot.core.errors import FoodshotError
from foodshot.core.inline_image import parse_inline_image, to_pil_image

from ..components import StyleFormUI, format_prompt, format_status, submit_button_update
from ..models import DEFAULT_ERROR_MESSAGE, UIState
from ..state import begin_submission, finish_submission, initialize_ui_state
from ..validation import ValidationError

logger = logging.getLogger(__name__)

RecreateUpdate = tuple[dict[str, Any], str, str, dict[str, Any], dict[str, Any], UIState]


def save_for_download(image: str, filename: str | None = None) -> Path:
    """Write a generated image to a fresh temporary folder under a fixed name.

    Args:
        image: Inline data string of the generated image
        filename: File name to use (default: ``config.download_filename``)

    Returns:
        Path of the written file
    """
    folder = Path(tempfile.mkdtemp(prefix="foodshot-"))
    path = folder / (filename or config.download_filename)
    path.write_bytes(parse_inline_image(image).to_bytes())
    return path


def _outcome_updates(
    state: UIState,
    preview: Image.Image | None = None,
    download_path: Path | None = None,
) -> RecreateUpdate:
    return (
        gr.update(value=preview, visible=preview is not None),
        format_status(state),
        format_prompt(state),
        gr.update(value=str(download_path) if download_path else None, visible=download_path is not None),
        submit_button_update(state),
        state,
    )


async def recreate_image(state: UIState, *field_values: str) -> AsyncIterator[RecreateUpdate]:
    """Re-create the selected image from the current style form.

    Yields up to two updates: a busy update with the submit button disabled
    once the request is under way, then the result or the error. A failed
    validation yields a single update and sends nothing.

    Args:
        state: UI state
        *field_values: Style form component values in ``FIELD_IDS`` order

    Yields:
        Tuple of (result_image_update, status_markdown, prompt_markdown,
        download_button_update, submit_button_update, updated_state)
    """
    state = initialize_ui_state(state)
    if field_values:
        state.form = StyleFormUI.values_to_form(*field_values)

    try:
        prompt = begin_submission(state)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        yield _outcome_updates(state)
        return

    yield _outcome_updates(state)

    try:
        image = await state.client.generate(prompt, state.tray.selected)
        preview = to_pil_image(image)
        download_path = save_for_download(image)
    except FoodshotError as e:
        finish_submission(state, error=str(e) or DEFAULT_ERROR_MESSAGE)
        yield _outcome_updates(state)
        return
    except Exception as e:
        # Unexpected error
        logger.error(f"Error re-creating image: {e}", exc_info=True)
        finish_submission(state, error=DEFAULT_ERROR_MESSAGE)
        yield _outcome_updates(state)
        return

    finish_submission(state, image=image)
    yield _outcome_updates(state, preview, download_path)
