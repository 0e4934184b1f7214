"""Food Photography Pro - Re-create food photographs with AI styling."""

__version__ = "0.1.0"

from foodshot.core.config import FoodshotConfig, config
from foodshot.core.form import FormData
from foodshot.core.generation_client import GenerationClient
from foodshot.core.prompt_builder import build_prompt

__all__ = [
    "FoodshotConfig",
    "FormData",
    "GenerationClient",
    "build_prompt",
    "config",
]
