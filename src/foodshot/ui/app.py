"""Gradio UI for Food Photography Pro."""

import logging

import gradio as gr

from foodshot.core.config import config

from .components import StyleFormUI, format_prompt, format_selection, format_status
from .handlers import (
    make_field_handler,
    make_inspiration_handler,
    recreate_image,
    remove_uploaded_image,
    select_uploaded_image,
    upload_images,
)
from .models import APP_SUBTITLE, APP_TITLE, UPLOAD_FILE_TYPES, UIState

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the Gradio UI.

    Returns:
        Gradio Blocks app
    """
    initial_state = UIState()
    app = gr.Blocks(title=APP_TITLE)

    with app:
        # Session state - one instance per user
        ui_state = gr.State(initial_state)

        gr.Markdown(f"# {APP_TITLE}\n{APP_SUBTITLE}")

        with gr.Row():
            with gr.Column(scale=1):
                upload = create_upload_section(initial_state)

                gr.Markdown("### 2. Set Your Style")
                style_form = StyleFormUI(initial_state.form)

                submit_btn = gr.Button("Re-create Image", variant="primary", interactive=False)

            with gr.Column(scale=1):
                result = create_result_section(initial_state)

        # Upload tray events
        upload["files"].upload(
            fn=upload_images,
            inputs=[upload["files"], ui_state],
            outputs=[
                upload["gallery"],
                upload["selection_info"],
                submit_btn,
                upload["remove_choice"],
                upload["files"],
                ui_state,
            ],
        )
        upload["gallery"].select(
            fn=select_uploaded_image,
            inputs=[ui_state],
            outputs=[upload["gallery"], upload["selection_info"], submit_btn, ui_state],
        )
        upload["remove_btn"].click(
            fn=remove_uploaded_image,
            inputs=[upload["remove_choice"], ui_state],
            outputs=[
                upload["gallery"],
                upload["selection_info"],
                submit_btn,
                upload["remove_choice"],
                ui_state,
            ],
        )

        # Style form events
        for field_id, component in style_form.fields.items():
            component.change(
                fn=make_field_handler(field_id),
                inputs=[component, ui_state],
                outputs=[ui_state],
            )

        props_input = style_form.fields["props"]
        for idea, button in style_form.inspiration_buttons:
            button.click(
                fn=make_inspiration_handler(idea),
                inputs=[props_input, ui_state],
                outputs=[props_input, ui_state],
            )

        # Re-creation
        submit_btn.click(
            fn=recreate_image,
            inputs=[ui_state, *style_form.get_input_components()],
            outputs=[
                result["image"],
                result["status"],
                result["prompt"],
                result["download_btn"],
                submit_btn,
                ui_state,
            ],
        )

    return app


def create_upload_section(state: UIState) -> dict[str, gr.components.Component]:
    """Create the upload area and the tray of uploaded thumbnails.

    Args:
        state: Initial UI state

    Returns:
        Dictionary of the section's components
    """
    gr.Markdown("### 1. Upload Your Image\n*PNG, JPG or WEBP. Click to upload or drag and drop.*")

    files = gr.File(
        label="Upload",
        file_count="multiple",
        file_types=UPLOAD_FILE_TYPES,
        type="filepath",
    )

    gallery = gr.Gallery(
        label="Select an image to re-create",
        columns=5,
        height=220,
        object_fit="cover",
        allow_preview=False,
    )
    selection_info = gr.Markdown(format_selection(state))
    with gr.Row():
        remove_choice = gr.Dropdown(
            label="Image to remove",
            choices=[],
            value=None,
            scale=3,
        )
        remove_btn = gr.Button("Remove Image", size="sm", variant="stop", scale=1)

    return {
        "files": files,
        "gallery": gallery,
        "selection_info": selection_info,
        "remove_choice": remove_choice,
        "remove_btn": remove_btn,
    }


def create_result_section(state: UIState) -> dict[str, gr.components.Component]:
    """Create the result panel: generated image, status, download and prompt.

    Args:
        state: Initial UI state

    Returns:
        Dictionary of the section's components
    """
    image = gr.Image(
        label="Re-created Image",
        type="pil",
        interactive=False,
        visible=False,
    )
    status = gr.Markdown(format_status(state))
    download_btn = gr.DownloadButton("Download Image", visible=False)
    prompt = gr.Markdown(format_prompt(state))

    return {
        "image": image,
        "status": status,
        "download_btn": download_btn,
        "prompt": prompt,
    }


def main():
    """Main entry point for the application."""
    logger.info("Starting Food Photography Pro...")
    logger.info(f"Configuration: {config.model_dump()}")

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.queue().launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
