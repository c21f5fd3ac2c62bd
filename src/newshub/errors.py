"""Error types raised while loading news."""

from __future__ import annotations

DEFAULT_ERROR_MESSAGE = "Failed to load news. Please try again."


class NewsHubError(Exception):
    """Base class for failures that end a fetch cycle.

    Args:
        message: Human-readable message shown to the user.
    """

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.user_message = message or DEFAULT_ERROR_MESSAGE


class RateLimitedError(NewsHubError):
    """The API answered with HTTP 429."""

    def __init__(self) -> None:
        super().__init__("Rate limit exceeded. Please try again in a few moments.")


class HttpError(NewsHubError):
    """The API answered with a non-2xx status other than 429."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class NetworkError(NewsHubError):
    """The request could not be sent or the body could not be parsed."""


class ConfigurationError(NewsHubError):
    """The API token is missing or still set to the placeholder."""


class InvalidTransitionError(RuntimeError):
    """Raised when the load phase machine is driven out of order."""
