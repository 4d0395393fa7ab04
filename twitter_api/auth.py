"""
Authentication Module
OAuth 1.0a credentials for the Twitter API.
"""

from typing import NamedTuple, Optional

from .config import Config
from .exceptions import ConfigurationError


class Credentials(NamedTuple):
    """Consumer and access-token pair used to sign every request."""
    consumer_key: str
    consumer_secret: str
    access_token: str
    access_token_secret: str = ""


def load_credentials(consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                     access_token: Optional[str] = None,
                     access_token_secret: Optional[str] = None) -> Credentials:
    """
    Build credentials, falling back to the environment for missing values.

    Args:
        consumer_key: Consumer key (or from env TWITTER_CONSUMER_KEY)
        consumer_secret: Consumer secret (or from env TWITTER_CONSUMER_SECRET)
        access_token: Access token (or from env TWITTER_ACCESS_TOKEN)
        access_token_secret: Access token secret (or from env TWITTER_ACCESS_SECRET)

    Returns:
        Credentials

    Raises:
        ConfigurationError: if any of the four values is still missing
    """
    credentials = Credentials(
        consumer_key=consumer_key or Config.TWITTER_CONSUMER_KEY,
        consumer_secret=consumer_secret or Config.TWITTER_CONSUMER_SECRET,
        access_token=access_token or Config.TWITTER_ACCESS_TOKEN,
        access_token_secret=access_token_secret or Config.TWITTER_ACCESS_SECRET,
    )

    missing = [name for name, value in credentials._asdict().items() if not value]
    if missing:
        raise ConfigurationError(f"Missing required authentication credentials: {', '.join(missing)}")
    return credentials
