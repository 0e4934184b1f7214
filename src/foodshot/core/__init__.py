"""Core functionality for food photograph re-creation.

This module provides the core components of Food Photography Pro:

- **FormData / FORM_FIELDS**: Style form definition and immutable form state
- **ImageTray**: Uploaded images, batch ingestion and selection
- **build_prompt**: Deterministic prompt compilation from a form
- **GenerationClient**: One-shot calls to the remote Gemini image model
- **FoodshotConfig / config**: Configuration via Pydantic Settings

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with FOODSHOT_ in .env files

2. **Form and Prompt Layer** (form.py, prompt_builder.py):
   - Static field descriptors, form state, styling ideas
   - Pure prompt template

3. **Image Layer** (inline_image.py, uploads.py):
   - Inline data string parsing and encoding
   - Concurrent batch ingestion with an atomic commit

4. **Remote Layer** (generation_client.py, errors.py):
   - google-genai request/response handling
   - Error types shared by the UI and the API

Usage Example
-------------
    import asyncio

    from foodshot.core import FormData, GenerationClient, ImageTray, build_prompt

    tray = ImageTray()
    asyncio.run(tray.ingest(["pasta.jpg"]))
    tray.select(tray.images[0].data)

    prompt = build_prompt(FormData.defaults())
    image = asyncio.run(GenerationClient().generate(prompt, tray.selected))
"""

from foodshot.core.config import FoodshotConfig, config
from foodshot.core.errors import (
    ConfigurationError,
    FoodshotError,
    GenerationError,
    InputImageError,
    NoImageGeneratedError,
)
from foodshot.core.form import (
    FIELD_IDS,
    FORM_FIELDS,
    PREDEFINED_INSPIRATIONS,
    FieldKind,
    FormData,
    FormFieldDescriptor,
)
from foodshot.core.generation_client import GenerationClient
from foodshot.core.prompt_builder import build_prompt, frame_instruction
from foodshot.core.uploads import ImageTray, UploadedImage

__all__ = [
    "ConfigurationError",
    "FIELD_IDS",
    "FORM_FIELDS",
    "FieldKind",
    "FoodshotConfig",
    "FoodshotError",
    "FormData",
    "FormFieldDescriptor",
    "GenerationClient",
    "GenerationError",
    "ImageTray",
    "InputImageError",
    "NoImageGeneratedError",
    "PREDEFINED_INSPIRATIONS",
    "UploadedImage",
    "build_prompt",
    "config",
    "frame_instruction",
]
