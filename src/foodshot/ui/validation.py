"""Validation utilities for Food Photography Pro inputs."""

import logging

from foodshot.core.form import FORM_FIELDS, FormData

logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "Please upload and select an image to re-create."


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    code = "VALIDATION_ERROR"

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": str(self)}


def validate_selection(selected: str | None) -> str:
    """Ensure an image is selected before anything is sent.

    Args:
        selected: Inline data string of the selected image, or None

    Returns:
        The selected image

    Raises:
        ValidationError: If nothing is selected
    """
    if not selected:
        raise ValidationError(NO_SELECTION_MESSAGE)
    return selected


def validate_form_data(form: FormData) -> None:
    """Validate that every choice field holds one of its declared options.

    Free-text fields are not checked.

    Raises:
        ValidationError: If a choice field has a value outside its options
    """
    for descriptor in FORM_FIELDS:
        if not descriptor.is_choice:
            continue
        value = form.get_field(descriptor.id)
        if value not in descriptor.options:
            logger.warning(f"Rejected value for {descriptor.id}: {value!r}")
            raise ValidationError(
                f"{descriptor.label} must be one of: {', '.join(descriptor.options)}"
            )
