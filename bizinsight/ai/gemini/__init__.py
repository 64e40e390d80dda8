"""Gemini AI integration package."""

from bizinsight.ai.gemini.config import GeminiSettings


def get_gemini_client(settings: GeminiSettings | None = None):
    """
    Get a configured Gemini provider instance.

    Args:
        settings: Optional settings override

    Returns:
        GeminiProvider: The configured Gemini provider
    """
    from bizinsight.ai.providers.gemini import GeminiProvider

    return GeminiProvider(settings=settings)


__all__ = [
    "GeminiSettings",
    "get_gemini_client",
]
