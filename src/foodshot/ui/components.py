"""Reusable UI components for the Food Photography Pro Gradio interface."""

from abc import ABC, abstractmethod
from typing import Any

import gradio as gr

from foodshot.core.form import (
    FIELD_IDS,
    FORM_FIELDS,
    PREDEFINED_INSPIRATIONS,
    FieldKind,
    FormData,
    FormFieldDescriptor,
)

from .models import UIState


class FieldRenderer(ABC):
    """Builds the Gradio input component for one kind of form field."""

    @abstractmethod
    def render(self, descriptor: FormFieldDescriptor, value: str) -> gr.components.Component:
        """Create the component for a field.

        Args:
            descriptor: Field metadata
            value: Initial value

        Returns:
            The created Gradio component
        """


class TextFieldRenderer(FieldRenderer):
    """Free-text fields become a multi-line textbox."""

    lines = 3

    def render(self, descriptor: FormFieldDescriptor, value: str) -> gr.components.Component:
        return gr.Textbox(
            label=descriptor.label,
            info=descriptor.description,
            placeholder=descriptor.placeholder,
            value=value,
            lines=self.lines,
            elem_id=descriptor.id,
        )


class ChoiceFieldRenderer(FieldRenderer):
    """Fixed-choice fields become a dropdown limited to the declared options."""

    def render(self, descriptor: FormFieldDescriptor, value: str) -> gr.components.Component:
        return gr.Dropdown(
            label=descriptor.label,
            info=descriptor.description,
            choices=list(descriptor.options),
            value=value,
            allow_custom_value=False,
            elem_id=descriptor.id,
        )


FIELD_RENDERERS: dict[FieldKind, FieldRenderer] = {
    FieldKind.TEXT: TextFieldRenderer(),
    FieldKind.CHOICE: ChoiceFieldRenderer(),
}


def render_field(descriptor: FormFieldDescriptor, value: str) -> gr.components.Component:
    """Create the component for a field with the renderer registered for its kind."""
    return FIELD_RENDERERS[descriptor.kind].render(descriptor, value)


class StyleFormUI:
    """The style form: one component per field plus the styling idea buttons.

    Fields are laid out in ``FORM_FIELDS`` order. The styling idea buttons sit
    directly above the props field they append to.
    """

    def __init__(self, form: FormData):
        """Initialize the style form.

        Args:
            form: Values shown when the page loads
        """
        self.fields: dict[str, gr.components.Component] = {}
        self.inspiration_buttons: list[tuple[str, gr.Button]] = []

        for descriptor in FORM_FIELDS:
            if descriptor.id == "props":
                self._render_inspirations()
            self.fields[descriptor.id] = render_field(descriptor, form.get_field(descriptor.id))

    def _render_inspirations(self) -> None:
        with gr.Group():
            gr.Markdown("**Styling Ideas**  \n*Click to add common props and garnishes.*")
            with gr.Row():
                for idea in PREDEFINED_INSPIRATIONS:
                    button = gr.Button(f"+ {idea}", size="sm", variant="secondary")
                    self.inspiration_buttons.append((idea, button))

    def get_input_components(self) -> list[gr.components.Component]:
        """Return field components in ``FIELD_IDS`` order.

        Returns:
            List of components that should be passed as inputs to handlers
        """
        return [self.fields[field_id] for field_id in FIELD_IDS]

    @staticmethod
    def values_to_form(*values: str) -> FormData:
        """Convert field component values (in ``FIELD_IDS`` order) to FormData."""
        if len(values) != len(FIELD_IDS):
            raise ValueError(f"Expected {len(FIELD_IDS)} form values, got {len(values)}")
        return FormData(**dict(zip(FIELD_IDS, values)))


def format_status(state: UIState) -> str:
    """Markdown shown in the result panel in place of (or above) the image."""
    if state.is_loading:
        return "⏳ *Re-creating your masterpiece...*"
    if state.error:
        return f"### ❌ Operation Failed\n\n{state.error}"
    if state.result_image:
        return "✅ **Re-creation complete!**"
    return "📷 *Your re-created image will appear here*"


def format_prompt(state: UIState) -> str:
    """Markdown block with the prompt of the last submission."""
    if not state.generated_prompt or state.is_loading:
        return ""
    return f"**Generated Prompt:**\n\n```\n{state.generated_prompt}\n```"


def format_selection(state: UIState) -> str:
    """Markdown describing the upload tray and the current selection."""
    if not len(state.tray):
        return "*No images uploaded yet.*"
    name = state.tray.selected_name
    if name is None:
        return f"*{len(state.tray)} image(s) uploaded. Select an image to re-create.*"
    return f"**Selected:** {name}"


def submit_button_update(state: UIState) -> dict[str, Any]:
    """Submit button label and availability for the current state.

    The button is disabled while a request is outstanding and whenever no
    image is selected.
    """
    return gr.update(
        value="Working..." if state.is_loading else "Re-create Image",
        interactive=state.can_submit(),
    )
