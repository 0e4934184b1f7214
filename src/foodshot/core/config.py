"""Configuration management for Food Photography Pro.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the FOODSHOT_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (FOODSHOT_* prefix)
2. .env file in the project root
3. Default values defined in FoodshotConfig

Example .env file:
    FOODSHOT_MODEL_ID=gemini-2.5-flash-image
    FOODSHOT_GRADIO_SERVER_PORT=7860
    FOODSHOT_LOG_LEVEL=DEBUG

API Credential
--------------
The Gemini API key is deliberately NOT a settings field. The generation client
reads it from the process environment at call time, using the variable named by
``api_key_env`` (``API_KEY`` unless overridden). A missing key is reported as a
configuration error for that request only; the application keeps running.

Usage Example
-------------
    from foodshot.core.config import config

    print(config.model_id)
    print(config.download_filename)
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FoodshotConfig(BaseSettings):
    """Main configuration for Food Photography Pro.

    Attributes
    ----------
    Remote Model Settings:
        model_id : str
            Gemini model used to re-create photographs
        api_key_env : str
            Name of the environment variable holding the API key

    Output Settings:
        download_filename : str
            Fixed filename offered when downloading a generated image

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    API Settings:
        server_host : str
            Bind address for the REST API
        server_port : int
            Port for the REST API

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level applied by the entry points

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = FoodshotConfig(model_id="gemini-2.5-flash-image-preview")

    Use the global configuration instance:

        >>> from foodshot.core.config import config
        >>> print(config.download_filename)
        'ai-food-photo.jpg'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FOODSHOT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote model settings
    model_id: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for image re-creation",
    )
    api_key_env: str = Field(
        default="API_KEY",
        description="Environment variable read for the API key at call time",
    )

    # Output settings
    download_filename: str = Field(
        default="ai-food-photo.jpg",
        description="Filename offered for downloading the generated image",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    # API settings
    server_host: str = Field(
        default="0.0.0.0",
        description="REST API bind address",
    )
    server_port: int = Field(
        default=8000,
        description="REST API port",
        ge=1024,
        le=65535,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )


# Global configuration instance
# Loads values from environment variables (FOODSHOT_* prefix) and .env file.
config = FoodshotConfig()
