"""Chat provider implementations."""

from bizinsight.ai.providers.factory import (
    AIProviderType,
    create_ai_provider,
    get_ai_provider,
    set_ai_provider,
)

__all__ = [
    "AIProviderType",
    "create_ai_provider",
    "get_ai_provider",
    "set_ai_provider",
]
