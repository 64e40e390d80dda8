"""
Configuration management for the Gemini integration package.

This module handles environment variable configuration for the Gemini chat
model using Pydantic settings.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bizinsight.utils.logger import logger

DEFAULT_MODEL_NAME = "gemini-3-flash-preview"


class GeminiSettings(BaseSettings):
    """Configuration for Gemini integration using Pydantic settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        env_prefix="GEMINI_",
        populate_by_name=True,
    )

    # A missing key is reported as a failed call, not a startup error
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "api_key"),
        description="Gemini API key for authentication",
    )
    model_name: str = Field(
        default=DEFAULT_MODEL_NAME, description="Gemini model name to use"
    )
    temperature: float = Field(
        default=0.7, ge=0.0, le=2.0, description="Default sampling temperature"
    )
    timeout: int = Field(default=600, description="Request timeout in seconds")
    braintrust_project_name: str | None = Field(
        default=None,
        description="Braintrust project for tracing Gemini calls (disabled if unset)",
    )


_gemini_settings: GeminiSettings | None = None


def get_gemini_settings() -> GeminiSettings:
    """
    Get the global Gemini settings instance.

    Returns:
        GeminiSettings: The global settings instance
    """
    global _gemini_settings
    if _gemini_settings is None:
        _gemini_settings = GeminiSettings()
        logger.info("Settings loaded", model_name=_gemini_settings.model_name)
    return _gemini_settings


def set_gemini_settings(settings: GeminiSettings | None) -> None:
    """
    Set the global Gemini settings instance.

    Args:
        settings: The settings to set, or None to reload from the environment
    """
    global _gemini_settings
    _gemini_settings = settings
