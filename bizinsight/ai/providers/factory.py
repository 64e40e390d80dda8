"""Factory for creating chat provider instances."""

import os
from enum import Enum

from bizinsight.ai.base import ChatProvider
from bizinsight.utils.logger import logger


class AIProviderType(str, Enum):
    """Available chat provider types."""

    GEMINI = "gemini"


def create_ai_provider(provider_type: AIProviderType | str | None = None) -> ChatProvider:
    """Create a chat provider instance.

    Args:
        provider_type: Type of provider to create. If None, uses the AI_PROVIDER
                      env var or defaults to Gemini.

    Returns:
        ChatProvider: Instance of the specified provider

    Raises:
        ValueError: If provider type is not supported
    """
    if provider_type is None:
        provider_type = os.getenv("AI_PROVIDER", AIProviderType.GEMINI.value)

    if isinstance(provider_type, str):
        provider_type = AIProviderType(provider_type.lower())

    logger.info("Creating AI provider", provider=provider_type.value)

    if provider_type == AIProviderType.GEMINI:
        from bizinsight.ai.gemini import get_gemini_client

        return get_gemini_client()
    raise ValueError(f"Unsupported AI provider: {provider_type}")


_ai_provider: ChatProvider | None = None


def get_ai_provider() -> ChatProvider:
    """Get the process-wide chat provider, creating it on first use.

    Returns:
        ChatProvider: Provider instance
    """
    global _ai_provider
    if _ai_provider is None:
        _ai_provider = create_ai_provider()
    return _ai_provider


def set_ai_provider(provider: ChatProvider | None) -> None:
    """Set the global chat provider instance.

    Useful for testing or manually overriding the provider.

    Args:
        provider: The provider instance to set, or None to reset
    """
    global _ai_provider
    _ai_provider = provider
