"""
OAuth 1.0a request signing (RFC 5849, HMAC-SHA1).

Every request gets a fresh set of oauth_* parameters. They are signed together
with the query string (and the form body of a POST) and sent in the
Authorization header.
"""
import base64
import hashlib
import hmac
import time
import uuid
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, quote, urlsplit

from .auth import Credentials
from .exceptions import InvalidArgumentError

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

# The API treats a status starting with "@" as a mention attempt.
MENTION_ESCAPE = "\0"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def percent_encode(value) -> str:
    """Percent-encode per RFC 3986, leaving only unreserved characters as-is."""
    return quote(str(value), safe="-._~")


def _stringify(name: str, value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidArgumentError(
        f"Parameter {name!r} must be a string, number or bool, got {type(value).__name__}"
    )


def prepare_parameters(parameters: Optional[Mapping], escape_mentions: bool = True) -> Dict[str, str]:
    """
    Convert request parameters to strings and escape a leading mention.

    Args:
        parameters: Parameters for the API call (key-value pairs)
        escape_mentions: Prefix a "status" starting with "@" with a NUL marker

    Returns:
        New dict with the same keys and string values
    """
    prepared = {str(name): _stringify(name, value) for name, value in (parameters or {}).items()}

    status = prepared.get("status")
    if escape_mentions and status is not None and status.startswith("@"):
        prepared["status"] = MENTION_ESCAPE + status

    return prepared


def build_query_string(parameters: Mapping[str, str]) -> str:
    """Build '?key=value&...' with RFC 3986 encoding; empty mapping gives ''."""
    if not parameters:
        return ""
    return "?" + "&".join(
        f"{percent_encode(name)}={percent_encode(value)}" for name, value in parameters.items()
    )


def normalize_url(url: str) -> str:
    """Base string URI: lowercase scheme and host, non-default port, no query or fragment."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return f"{scheme}://{host}{parts.path or '/'}"


def build_base_string(url: str, method: str, oauth_params: Mapping[str, str],
                      body_params: Optional[Mapping[str, str]] = None) -> str:
    """
    Generate the signature base string.

    Args:
        url: Full request URL, query string included
        method: HTTP method
        oauth_params: oauth_* parameters, without the signature
        body_params: Form-encoded body parameters of a POST

    Returns:
        METHOD&encoded-url&encoded-parameters
    """
    params = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
    if body_params:
        params.update(body_params)
    params.update(oauth_params)

    pairs = "&".join(
        f"{percent_encode(name)}={percent_encode(value)}" for name, value in sorted(params.items())
    )
    return "&".join([method.upper(), percent_encode(normalize_url(url)), percent_encode(pairs)])


def signing_key(consumer_secret: str, token_secret: Optional[str] = "") -> str:
    """Composite HMAC key; the separator stays even when the token secret is empty."""
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"


def sign(base_string: str, key: str) -> str:
    digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def build_oauth(credentials: Credentials, url: str, method: str,
                body_params: Optional[Mapping[str, str]] = None,
                nonce: Optional[str] = None, timestamp: Optional[int] = None) -> Dict[str, str]:
    """
    Build and sign the oauth_* parameters for one request.

    Args:
        credentials: Consumer and access token pair
        url: Full request URL, query string included
        method: HTTP method
        body_params: Form-encoded body parameters of a POST
        nonce: Fixed nonce, random when omitted
        timestamp: Fixed timestamp, current time when omitted

    Returns:
        oauth_* parameters in header order, oauth_signature last
    """
    oauth = {
        "oauth_consumer_key": credentials.consumer_key,
        "oauth_nonce": nonce or uuid.uuid4().hex,
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": str(int(time.time()) if timestamp is None else timestamp),
        "oauth_token": credentials.access_token,
        "oauth_version": OAUTH_VERSION,
    }

    base_string = build_base_string(url, method, oauth, body_params)
    key = signing_key(credentials.consumer_secret, credentials.access_token_secret)
    oauth["oauth_signature"] = sign(base_string, key)
    return oauth


def build_authorization_header(oauth_params: Mapping[str, str]) -> str:
    """Value of the Authorization header: OAuth key="value", ..."""
    return "OAuth " + ", ".join(
        f'{percent_encode(name)}="{percent_encode(value)}"' for name, value in oauth_params.items()
    )
