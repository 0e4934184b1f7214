"""Pydantic request and response models for the Food Photography Pro API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
StyleForm
    The seven style fields.  Every field is optional and falls back to the
    form default, so ``{}`` is a valid form.
RecreateRequest
    Payload for ``POST /api/recreate``: a style form plus the inline image
    to re-create.
PromptResponse / RecreateResponse
    Response bodies for the prompt preview and re-creation endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from foodshot.core.form import FormData, field_descriptor


def _default(field_id: str) -> str:
    return field_descriptor(field_id).default


class StyleForm(BaseModel):
    """Style fields for prompt compilation.

    Choice fields are validated against their declared options by the route,
    not here, so that the error message matches the UI's.
    """

    photo_style: str = Field(default_factory=lambda: _default("photo_style"))
    background: str = Field(default_factory=lambda: _default("background"))
    angle: str = Field(default_factory=lambda: _default("angle"))
    color_tone: str = Field(default_factory=lambda: _default("color_tone"))
    depth_of_field: str = Field(default_factory=lambda: _default("depth_of_field"))
    props: str = Field(
        default_factory=lambda: _default("props"),
        description="Free-text props; an empty string compiles to 'none'.",
    )
    output_type: str = Field(default_factory=lambda: _default("output_type"))

    def to_form_data(self) -> FormData:
        return FormData.from_dict(self.model_dump())


class RecreateRequest(StyleForm):
    """Request body for the ``POST /api/recreate`` endpoint.

    Attributes:
        image: Inline image string (``data:image/...;base64,...``) or bare
            base64, which is treated as JPEG.
    """

    image: str = Field(
        ...,
        description="Inline image data string of the photograph to re-create.",
    )

    def to_form_data(self) -> FormData:
        return FormData.from_dict(self.model_dump(exclude={"image"}))


class PromptResponse(BaseModel):
    """Response body for ``POST /api/prompt/compile``."""

    prompt: str


class RecreateResponse(BaseModel):
    """Response body for ``POST /api/recreate``."""

    image: str = Field(..., description="Inline data string of the generated image.")
    prompt: str = Field(..., description="Prompt compiled from the style form.")
