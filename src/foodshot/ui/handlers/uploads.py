"""Upload tray handlers: ingestion, selection and removal."""

import logging
from typing import Any

import gradio as gr
from PIL import Image

from foodshot.core.errors import InputImageError
from foodshot.core.inline_image import to_pil_image

from ..components import format_selection, submit_button_update
from ..models import UIState

logger = logging.getLogger(__name__)

# Shown in place of a thumbnail that cannot be decoded
PLACEHOLDER_COLOR = "#d9d9d9"
PLACEHOLDER_SIZE = (64, 64)


def _thumbnail(data: str, name: str) -> Image.Image:
    try:
        return to_pil_image(data)
    except InputImageError as e:
        logger.warning(f"Cannot render thumbnail for {name}: {e}")
        return Image.new("RGB", PLACEHOLDER_SIZE, PLACEHOLDER_COLOR)


def gallery_items(state: UIState) -> list[tuple[Image.Image, str]]:
    """Build the upload gallery value from the tray.

    An entry that cannot be decoded is shown as a placeholder so that gallery
    positions keep matching tray positions.

    Args:
        state: UI state

    Returns:
        List of (image, caption) pairs in upload order
    """
    items = []
    for image in state.tray.images:
        caption = f"✅ {image.name}" if image.data == state.tray.selected else image.name
        items.append((_thumbnail(image.data, image.name), caption))
    return items


def removal_choices(state: UIState) -> dict[str, Any]:
    """Choices of the "image to remove" dropdown, one per uploaded image.

    Values are tray positions; labels are numbered so that duplicate
    filenames stay distinguishable.
    """
    choices = [(f"{i + 1}. {image.name}", i) for i, image in enumerate(state.tray.images)]
    return gr.update(choices=choices, value=None)


async def upload_images(
    files: list[str] | None, state: UIState
) -> tuple[list, str, dict[str, Any], dict[str, Any], None, UIState]:
    """Ingest a batch of uploaded files.

    Args:
        files: Paths of the uploaded files (None or empty for no files)
        state: UI state

    Returns:
        Tuple of (gallery_items, selection_info, submit_button_update,
        removal_choices, cleared_file_input, updated_state)
    """
    if files:
        added = await state.tray.ingest(files)
        if len(added) < len(files):
            gr.Warning(f"{len(files) - len(added)} file(s) could not be read and were skipped.")

    return (
        gallery_items(state),
        format_selection(state),
        submit_button_update(state),
        removal_choices(state),
        None,
        state,
    )


def select_uploaded_image(
    state: UIState, evt: gr.SelectData
) -> tuple[list, str, dict[str, Any], UIState]:
    """Select the clicked thumbnail as input for re-creation.

    Args:
        state: UI state
        evt: Gradio select event carrying the thumbnail index

    Returns:
        Tuple of (gallery_items, selection_info, submit_button_update, updated_state)
    """
    index = evt.index
    if isinstance(index, (list, tuple)):
        index = index[0]

    if index is not None and 0 <= index < len(state.tray):
        state.tray.select(state.tray.images[index].data)
        logger.info(f"Selected upload {index}: {state.tray.images[index].name}")

    return gallery_items(state), format_selection(state), submit_button_update(state), state


def remove_uploaded_image(
    index: int | None, state: UIState
) -> tuple[list, str, dict[str, Any], dict[str, Any], UIState]:
    """Remove the image chosen in the removal dropdown.

    The selection is kept unless the removed image is the selected one.

    Args:
        index: Tray position of the image to remove, or None if nothing is chosen
        state: UI state

    Returns:
        Tuple of (gallery_items, selection_info, submit_button_update,
        removal_choices, updated_state)
    """
    if index is None:
        gr.Info("Choose the image to remove first.")
    else:
        removed = state.tray.remove(int(index))
        if removed is not None:
            logger.info(f"Removed upload {index}: {removed.name}")

    return (
        gallery_items(state),
        format_selection(state),
        submit_button_update(state),
        removal_choices(state),
        state,
    )
