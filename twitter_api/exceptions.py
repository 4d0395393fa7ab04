"""
Exceptions
Error types raised by the Twitter API client.
"""
from typing import Optional


class TwitterAPIError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TwitterAPIError):
    """The client cannot be set up with the given settings."""


class InvalidArgumentError(TwitterAPIError, ValueError):
    """A request was built from arguments the client does not accept."""


class TransportError(TwitterAPIError):
    """The HTTP request could not be completed."""


class APIError(TwitterAPIError):
    """The API answered with an error payload."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self):
        if self.code is None:
            return self.message
        return f"{self.message} (code {self.code})"
