"""State management utilities for Food Photography Pro UI.

This module owns every transition of ``UIState``: form edits, styling ideas,
and the two halves of a submission. Handlers call these functions and only
translate the resulting state into Gradio updates.
"""

import logging

from foodshot.core.generation_client import GenerationClient
from foodshot.core.prompt_builder import build_prompt

from .models import UIState
from .validation import ValidationError, validate_selection

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    Args:
        state: Existing UIState or None

    Returns:
        UIState with a generation client attached
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if state.client is None:
        logger.info("Initializing GenerationClient")
        state.client = GenerationClient()

    return state


def update_form_field(state: UIState, field_id: str, value: str) -> UIState:
    """Replace the value of one style field.

    Args:
        state: UI state
        field_id: Identifier of the edited field
        value: New value

    Returns:
        Updated state
    """
    state.form = state.form.set_field(field_id, value)
    return state


def add_inspiration(state: UIState, idea: str) -> UIState:
    """Append a styling idea to the props field.

    Args:
        state: UI state
        idea: Styling idea text

    Returns:
        Updated state
    """
    state.form = state.form.apply_inspiration(idea)
    logger.debug(f"Props now: {state.form.props}")
    return state


def begin_submission(state: UIState) -> str:
    """Start a re-creation request.

    Validates the selection before touching anything else, then marks the
    state busy, clears the previous outcome and records the compiled prompt.

    Args:
        state: UI state

    Returns:
        The compiled prompt to send

    Raises:
        ValidationError: If no image is selected. The state's error is set
            and nothing else changes.
    """
    try:
        validate_selection(state.tray.selected)
    except ValidationError as e:
        state.clear_outcome()
        state.error = str(e)
        raise

    state.is_loading = True
    state.clear_outcome()

    prompt = build_prompt(state.form)
    state.generated_prompt = prompt
    logger.info("Submission started")
    return prompt


def finish_submission(
    state: UIState, image: str | None = None, error: str | None = None
) -> UIState:
    """Record the outcome of a re-creation request and clear the busy flag.

    Args:
        state: UI state
        image: Inline data string of the generated image on success
        error: Failure message otherwise

    Returns:
        Updated state
    """
    state.is_loading = False
    if error is not None:
        state.result_image = None
        state.error = error
        logger.info(f"Submission failed: {error}")
    else:
        state.result_image = image
        state.error = None
        logger.info("Submission complete")
    return state
