"""Tests for the command-line front end."""

import argparse

import pytest

from twitter_api import cli
from twitter_api.client import NO_CONTENT, TwitterAPI
from twitter_api.exceptions import APIError


class StubAPI:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []
        self.verify = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def set_verify_peer(self, verify_peer):
        self.verify = verify_peer

    def perform_request(self, uri, method, parameters=None):
        self.calls.append((uri, method, parameters))
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def stub(monkeypatch):
    api = StubAPI(result={"id": 1})
    options = {}

    def fake_from_env(**kwargs):
        options.update(kwargs)
        return api

    monkeypatch.setattr(TwitterAPI, "from_env", staticmethod(fake_from_env))
    api.options = options
    return api


def test_parse_parameter():
    """Test key=value splitting keeps later = signs in the value."""
    assert cli.parse_parameter("q=a=b") == ("q", "a=b")
    assert cli.parse_parameter("status=") == ("status", "")
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_parameter("novalue")


def test_main_prints_json(stub, capsys):
    """Test a successful request prints the decoded JSON."""
    assert cli.main(["get", "statuses/show", "id=20"]) == 0
    assert stub.calls == [("statuses/show", "GET", {"id": "20"})]
    assert '"id": 1' in capsys.readouterr().out
    assert stub.options == {"escape_mentions": True}


def test_main_options(stub):
    """Test CLI flags reach the client."""
    cli.main(["POST", "statuses/update", "status=@jack", "--insecure", "--keep-mentions",
              "--api-url", "https://example.com/"])
    assert stub.verify is False
    assert stub.options == {"escape_mentions": False, "api_url": "https://example.com/"}


def test_main_no_content(stub, capsys):
    """Test an empty response is reported as such."""
    stub.result = NO_CONTENT
    assert cli.main(["POST", "friendships/destroy", "user_id=1"]) == 0
    assert "No content" in capsys.readouterr().out


def test_main_error(stub, capsys):
    """Test API errors exit with status 1."""
    stub.error = APIError("Rate limit exceeded", 88)
    assert cli.main(["GET", "statuses/home_timeline"]) == 1
    assert "Rate limit exceeded (code 88)" in capsys.readouterr().err


def test_main_rejects_other_methods():
    """Test argparse refuses methods other than GET and POST."""
    with pytest.raises(SystemExit):
        cli.main(["DELETE", "statuses/destroy/1"])
