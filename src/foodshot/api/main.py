"""Food Photography Pro — FastAPI Application.

This module exposes the re-creation workflow as a JSON API, next to the
Gradio UI.  It defines the FastAPI ``app`` instance, all REST API routes,
and the ``main()`` CLI function that launches the uvicorn server.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/config``               Form fields, styling ideas
POST      ``/api/prompt/compile``       Preview the compiled prompt
POST      ``/api/recreate``             Re-create an image
========  ============================  ====================================

Error Mapping
-------------
Domain errors are returned with their ``to_dict()`` body as ``detail``:

- ``ValidationError`` / ``InputImageError``: 400
- ``ConfigurationError``: 500
- ``GenerationError`` (including no image generated): 502

Usage
-----
CLI (installed entry point)::

    foodshot-api
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from foodshot import __version__
from foodshot.api.models import PromptResponse, RecreateRequest, RecreateResponse, StyleForm
from foodshot.core.config import config
from foodshot.core.errors import (
    ConfigurationError,
    FoodshotError,
    GenerationError,
    InputImageError,
)
from foodshot.core.form import FORM_FIELDS, PREDEFINED_INSPIRATIONS, FormData
from foodshot.core.generation_client import GenerationClient
from foodshot.core.prompt_builder import build_prompt
from foodshot.ui.validation import ValidationError, validate_form_data, validate_selection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the generation client on startup.

    The client holds no connection; the API key is read on every request.
    """
    app.state.generation_client = GenerationClient(config)
    logger.info(f"GenerationClient initialised for model {config.model_id}.")
    yield


app = FastAPI(
    title="Food Photography Pro",
    description="Re-create food photographs with a Gemini image model.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_status(error: Exception) -> int:
    if isinstance(error, (ValidationError, InputImageError)):
        return 400
    if isinstance(error, ConfigurationError):
        return 500
    if isinstance(error, GenerationError):
        return 502
    return 500


def _checked_form(form: FormData) -> FormData:
    try:
        validate_form_data(form)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_dict()) from e
    return form


def _checked_image(image: str) -> str:
    try:
        return validate_selection(image)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.to_dict()) from e


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/config")
async def get_config() -> dict:
    """Return the form definition for a frontend.

    Returns:
        Dictionary with keys ``version``, ``fields``, ``inspirations`` and
        ``download_filename``.
    """
    fields = [
        {
            "id": descriptor.id,
            "label": descriptor.label,
            "description": descriptor.description,
            "kind": descriptor.kind.value,
            "options": list(descriptor.options),
            "placeholder": descriptor.placeholder,
            "default": descriptor.default,
        }
        for descriptor in FORM_FIELDS
    ]
    return {
        "version": __version__,
        "fields": fields,
        "inspirations": list(PREDEFINED_INSPIRATIONS),
        "download_filename": config.download_filename,
    }


@app.post("/api/prompt/compile")
async def compile_prompt(form: StyleForm) -> PromptResponse:
    """Compile the prompt for a style form without calling the model.

    Raises:
        HTTPException: 400 if a choice field holds an undeclared value.
    """
    form_data = _checked_form(form.to_form_data())
    return PromptResponse(prompt=build_prompt(form_data))


@app.post("/api/recreate")
async def recreate(req: RecreateRequest) -> RecreateResponse:
    """Re-create the given image following the style form.

    This endpoint:

    1. Validates the choice fields and the presence of an image.
    2. Compiles the prompt.
    3. Makes exactly one call to the remote model.

    Raises:
        HTTPException: 400 for invalid form values, a missing image or a bad
            image encoding, 500 for
            a missing API key, 502 when the remote call fails or returns no
            image.
    """
    form_data = _checked_form(req.to_form_data())
    selected_image = _checked_image(req.image)
    prompt = build_prompt(form_data)

    client: GenerationClient = app.state.generation_client
    try:
        image = await client.generate(prompt, selected_image)
    except FoodshotError as e:
        logger.warning(f"Re-creation failed: {e}")
        raise HTTPException(status_code=_error_status(e), detail=e.to_dict()) from e

    return RecreateResponse(image=image, prompt=prompt)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~foodshot.core.config.config` (which
    loads from ``FOODSHOT_SERVER_HOST`` and ``FOODSHOT_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:8000``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "foodshot.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
