"""Custom exceptions for the Gemini integration package."""


class GeminiError(Exception):
    """Base exception for all Gemini-related errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GeminiAPIError(GeminiError):
    """Raised when Gemini API returns an error."""

    pass


class GeminiAuthenticationError(GeminiError):
    """Raised when authentication with Gemini API fails."""

    pass


class GeminiRateLimitError(GeminiError):
    """Raised when Gemini API rate limit or quota is exceeded."""

    pass


class GeminiServerError(GeminiError):
    """Raised when Gemini API returns a server error."""

    pass


class GeminiBadRequestError(GeminiError):
    """Raised when a bad request is made to Gemini API."""

    pass


def error_for_status(message: str, status_code: int | None) -> GeminiError:
    """Pick the exception class matching an HTTP status code."""
    if status_code in (401, 403):
        return GeminiAuthenticationError(message, status_code)
    if status_code == 429:
        return GeminiRateLimitError(message, status_code)
    if status_code is not None and 400 <= status_code < 500:
        return GeminiBadRequestError(message, status_code)
    if status_code is not None and status_code >= 500:
        return GeminiServerError(message, status_code)
    return GeminiAPIError(message, status_code)
