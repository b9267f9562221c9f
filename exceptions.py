"""
Custom exception hierarchy for the StreamTitle backend.

All application errors inherit from StreamTitleError so routes and the
global exception handler can catch and serialize them uniformly.

Exception Hierarchy:
    StreamTitleError (base)
    ├── ValidationError
    └── ExternalServiceError
        ├── LLMError
        └── SearchProviderError

Usage:
    from exceptions import ValidationError, SearchProviderError

    raise ValidationError("Topic is required.")
    raise SearchProviderError("Unexpected payload", provider="steam")
"""

from typing import Optional, Dict, Any


class StreamTitleError(Exception):
    """
    Base exception for all StreamTitle application errors.

    Attributes:
        message: Human-readable error message
        detail: Optional dict with additional error context
        status_code: Suggested HTTP status code (for API errors)
    """

    def __init__(
        self,
        message: str,
        *,
        detail: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for JSON serialization."""
        result = {
            "error": self.message,
            "type": self.__class__.__name__,
        }
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(StreamTitleError):
    """
    Raised when request input is missing or malformed.

    Examples:
        raise ValidationError("Game name is required")
        raise ValidationError("Topic is required.", detail={"field": "topic"})
    """

    def __init__(self, message: str, *, detail: Optional[Dict[str, Any]] = None):
        super().__init__(message, detail=detail, status_code=400)


class ExternalServiceError(StreamTitleError):
    """
    Base exception for external service failures (LLM, game-data APIs).
    """

    def __init__(
        self,
        message: str,
        *,
        detail: Optional[Dict[str, Any]] = None,
        service_name: Optional[str] = None,
    ):
        if service_name and detail is None:
            detail = {"service": service_name}
        elif service_name and detail:
            detail["service"] = service_name

        super().__init__(message, detail=detail, status_code=502)


class LLMError(ExternalServiceError):
    """
    Raised when the LLM service (OpenRouter, Gemini) fails or returns
    something unusable.

    Examples:
        raise LLMError("Gemini returned no candidates")
        raise LLMError("No LLM API key configured")
    """

    def __init__(self, message: str, *, detail: Optional[Dict[str, Any]] = None):
        super().__init__(message, detail=detail, service_name="llm")


class SearchProviderError(ExternalServiceError):
    """
    Raised when a game-data provider (Steam, Modrinth, CurseForge) returns a
    payload that cannot be interpreted.

    Examples:
        raise SearchProviderError("Response is not a JSON object", provider="modrinth")
    """

    def __init__(
        self,
        message: str,
        *,
        detail: Optional[Dict[str, Any]] = None,
        provider: Optional[str] = None,
    ):
        if provider and detail is None:
            detail = {"provider": provider}
        elif provider and detail:
            detail["provider"] = provider

        super().__init__(message, detail=detail, service_name="search_provider")
        self.provider = provider
