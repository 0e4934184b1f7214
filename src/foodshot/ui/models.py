"""Data models for Food Photography Pro UI state."""

import logging
from dataclasses import dataclass, field
from typing import Any

from foodshot.core.form import FormData
from foodshot.core.uploads import ImageTray

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each user gets their own UIState instance through ``gr.State``, so
    nothing here is shared between sessions.

    Attributes
    ----------
    form : FormData
        Current value of every style field
    tray : ImageTray
        Uploaded images and the selected one
    is_loading : bool
        True while a re-creation request is outstanding
    result_image : str | None
        Inline data string of the last re-created image
    generated_prompt : str
        Prompt compiled for the last submission
    error : str | None
        Message of the last failure (validation, configuration or remote)
    client : Any | None
        GenerationClient instance, created on first use
    """

    form: FormData = field(default_factory=FormData.defaults)
    tray: ImageTray = field(default_factory=ImageTray)

    # Submission outcome; result_image and error are never both set
    is_loading: bool = False
    result_image: str | None = None
    generated_prompt: str = ""
    error: str | None = None

    client: Any | None = None  # GenerationClient instance

    def can_submit(self) -> bool:
        """Check whether the submit button should be enabled.

        Returns:
            True if an image is selected and no request is outstanding
        """
        return self.tray.has_selection and not self.is_loading

    def clear_outcome(self) -> None:
        """Forget the previous result and error."""
        self.result_image = None
        self.error = None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(images={len(self.tray)}, "
            f"selected={self.tray.has_selection}, "
            f"loading={self.is_loading})"
        )


# UI Constants
APP_TITLE = "AI Food Photography Pro"
APP_SUBTITLE = (
    "Upload your food photo and use the options below to re-create it with a professional touch."
)
UPLOAD_FILE_TYPES = [".png", ".jpg", ".jpeg", ".webp"]
DEFAULT_ERROR_MESSAGE = "Failed to re-create image. Please try again."
