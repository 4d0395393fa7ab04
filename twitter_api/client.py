"""
Twitter API Client
Signs REST API v1.1 requests with OAuth 1.0a and decodes the JSON response.
"""
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

import requests

from .auth import Credentials, load_credentials
from .config import Config
from .exceptions import APIError, ConfigurationError, InvalidArgumentError, TransportError
from .logger import logger
from .oauth import build_authorization_header, build_oauth, build_query_string, prepare_parameters

DEFAULT_API_URL = "https://api.twitter.com/1.1/"

REQUEST_METHOD_GET = "GET"
REQUEST_METHOD_POST = "POST"

# Returned by perform_request when the response body is empty.
NO_CONTENT = False


class TwitterAPI:
    """OAuth 1.0a client for the Twitter REST API.

    Owns one requests.Session, reused for every call and closed by close(),
    by leaving a with-block, or when the client is garbage-collected.
    """

    TIMEOUT = 10
    CONTENT_TYPE = "application/x-www-form-urlencoded"

    def __init__(self, access_token: str, access_token_secret: str, consumer_key: str,
                 consumer_secret: str, api_url: str = DEFAULT_API_URL, escape_mentions: bool = True):
        """
        Initialize the client.

        Args:
            access_token: OAuth access token
            access_token_secret: OAuth access token secret
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret
            api_url: Base URL every endpoint path is appended to
            escape_mentions: Escape a "status" parameter that starts with "@"

        Raises:
            ConfigurationError: if api_url cannot be served by the HTTP transport
        """
        self.credentials = Credentials(
            consumer_key=consumer_key,
            consumer_secret=consumer_secret,
            access_token=access_token,
            access_token_secret=access_token_secret or "",
        )
        self.api_url = api_url
        self.escape_mentions = escape_mentions
        self._session = None

        parts = urlsplit(api_url)
        if not parts.scheme or not parts.netloc:
            raise ConfigurationError(f"API URL must be absolute, got {api_url!r}")

        session = requests.Session()
        try:
            session.get_adapter(api_url)
        except requests.exceptions.InvalidSchema as exc:
            session.close()
            raise ConfigurationError(f"No HTTP transport available for {api_url!r}") from exc
        self._session = session

    @classmethod
    def from_env(cls, **kwargs) -> "TwitterAPI":
        """Create a client from TWITTER_* environment variables (or .env)."""
        credentials = load_credentials()
        kwargs.setdefault("api_url", Config.TWITTER_API_URL)
        client = cls(
            access_token=credentials.access_token,
            access_token_secret=credentials.access_token_secret,
            consumer_key=credentials.consumer_key,
            consumer_secret=credentials.consumer_secret,
            **kwargs,
        )
        client.set_verify_peer(Config.TWITTER_VERIFY_PEER)
        return client

    def set_verify_peer(self, verify_peer: bool):
        """Enable or disable TLS certificate verification."""
        if self._session is None:
            raise TransportError("Client is closed")
        self._session.verify = bool(verify_peer)

    def perform_request(self, uri: str, method: str, parameters: Optional[Mapping] = None) -> Any:
        """
        Perform a signed request against the API.

        Args:
            uri: Endpoint path relative to api_url, without ".json"
            method: "GET" or "POST"
            parameters: Data for the API call (key-value pairs)

        Returns:
            Decoded JSON, or NO_CONTENT (False) for an empty body

        Raises:
            InvalidArgumentError: bad method or parameter value
            TransportError: the request could not be completed
            APIError: the response carries an "errors" list or is not JSON
        """
        if method not in (REQUEST_METHOD_GET, REQUEST_METHOD_POST):
            raise InvalidArgumentError("Request method must be either POST or GET")
        if self._session is None:
            raise TransportError("Client is closed")

        url = f"{self.api_url}{uri}.json"
        prepared = prepare_parameters(parameters, self.escape_mentions)

        body = None
        if method == REQUEST_METHOD_GET:
            url += build_query_string(prepared)
        elif prepared:
            body = prepared

        oauth = build_oauth(self.credentials, url, method, body_params=body)
        headers = {
            "Authorization": build_authorization_header(oauth),
            "Content-Type": self.CONTENT_TYPE,
        }

        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, headers=headers, data=body, timeout=self.TIMEOUT)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(f"HTTP: {exc}") from exc

        return self._decode(response)

    def _decode(self, response: requests.Response) -> Any:
        if not response.content.strip():
            return NO_CONTENT

        try:
            data = response.json()
        except ValueError:
            logger.warning("Non-JSON response (HTTP %s) from %s", response.status_code, response.url)
            raise APIError("Invalid JSON response", response.status_code)

        if isinstance(data, dict) and isinstance(data.get("errors"), list):
            error = data["errors"][0] if data["errors"] else {}
            if not isinstance(error, dict):
                error = {"message": str(error)}
            message = error.get("message") or response.reason or "Unknown error"
            code = error.get("code", response.status_code)
            logger.warning("API error %s: %s", code, message)
            raise APIError(message, code)

        return data

    def close(self):
        """Release the HTTP session. Safe to call more than once."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __del__(self):
        # __init__ may have failed before the session attribute was set
        if getattr(self, "_session", None) is not None:
            self.close()
