"""Exception classes raised by the Food Photography Pro core.

Every error carries a human-readable message (shown to the user as-is) and a
machine-readable ``code`` used by the REST API.
"""

from typing import Any


class FoodshotError(Exception):
    """Base exception for all Food Photography Pro errors."""

    code = "UNKNOWN_ERROR"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the API error format."""
        return {"code": self.code, "message": str(self)}


class ConfigurationError(FoodshotError):
    """Raised when a required setting or credential is missing."""

    code = "CONFIGURATION_ERROR"


class InputImageError(FoodshotError):
    """Raised when an image cannot be read or its inline encoding is malformed."""

    code = "INPUT_IMAGE_ERROR"


class GenerationError(FoodshotError):
    """Raised when the remote generation call fails."""

    code = "GENERATION_ERROR"


class NoImageGeneratedError(GenerationError):
    """Raised when the remote call succeeds but returns no image part."""

    code = "NO_IMAGE_GENERATED"
