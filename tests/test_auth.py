"""Tests for credential loading and environment-backed construction."""

import pytest

from twitter_api.auth import Credentials, load_credentials
from twitter_api.client import TwitterAPI
from twitter_api.config import Config
from twitter_api.exceptions import ConfigurationError


@pytest.fixture
def env_credentials(monkeypatch):
    monkeypatch.setattr(Config, "TWITTER_CONSUMER_KEY", "env_key")
    monkeypatch.setattr(Config, "TWITTER_CONSUMER_SECRET", "env_secret")
    monkeypatch.setattr(Config, "TWITTER_ACCESS_TOKEN", "env_token")
    monkeypatch.setattr(Config, "TWITTER_ACCESS_SECRET", "env_token_secret")


def test_credentials_are_immutable():
    """Test credentials cannot be changed after creation."""
    credentials = Credentials("k", "s", "t", "ts")
    with pytest.raises(AttributeError):
        credentials.consumer_key = "other"


def test_load_credentials_from_config(env_credentials):
    """Test missing arguments fall back to the environment."""
    credentials = load_credentials(consumer_key="arg_key")
    assert credentials == Credentials("arg_key", "env_secret", "env_token", "env_token_secret")


def test_load_credentials_missing(monkeypatch, env_credentials):
    """Test missing credentials raise ConfigurationError."""
    monkeypatch.setattr(Config, "TWITTER_ACCESS_SECRET", None)
    with pytest.raises(ConfigurationError) as excinfo:
        load_credentials()
    assert "access_token_secret" in str(excinfo.value)


def test_from_env(monkeypatch, env_credentials):
    """Test a client built from configuration."""
    monkeypatch.setattr(Config, "TWITTER_API_URL", "https://example.com/api/")
    monkeypatch.setattr(Config, "TWITTER_VERIFY_PEER", False)
    with TwitterAPI.from_env() as api:
        assert api.api_url == "https://example.com/api/"
        assert api.credentials.consumer_key == "env_key"
        assert api._session.verify is False
