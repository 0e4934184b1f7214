"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events, organized into logical modules:
- uploads: Image ingestion, thumbnail selection and removal
- form: Style field edits and styling ideas
- generation: Image re-creation and download preparation
"""

from .form import (
    apply_inspiration,
    make_field_handler,
    make_inspiration_handler,
    update_field,
)
from .generation import (
    recreate_image,
    save_for_download,
)
from .uploads import (
    gallery_items,
    removal_choices,
    remove_uploaded_image,
    select_uploaded_image,
    upload_images,
)

__all__ = [
    # Upload handlers
    "gallery_items",
    "removal_choices",
    "remove_uploaded_image",
    "select_uploaded_image",
    "upload_images",
    # Form handlers
    "apply_inspiration",
    "make_field_handler",
    "make_inspiration_handler",
    "update_field",
    # Generation handlers
    "recreate_image",
    "save_for_download",
]
