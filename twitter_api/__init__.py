"""
twitter_api - OAuth 1.0a client for the Twitter REST API.
Signs GET/POST requests and decodes their JSON responses.
"""

__version__ = "0.1.0"

from .auth import Credentials, load_credentials
from .client import DEFAULT_API_URL, NO_CONTENT, TwitterAPI
from .exceptions import (
    APIError,
    ConfigurationError,
    InvalidArgumentError,
    TransportError,
    TwitterAPIError,
)

__all__ = [
    "TwitterAPI",
    "Credentials",
    "load_credentials",
    "DEFAULT_API_URL",
    "NO_CONTENT",
    "TwitterAPIError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "APIError",
]
