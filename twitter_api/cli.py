#!/usr/bin/env python3
"""
Command-line access to the API.

Credentials come from TWITTER_* environment variables or a .env file.

Usage:
    python3 -m twitter_api.cli GET statuses/user_timeline screen_name=twitterapi count=2
    python3 -m twitter_api.cli POST statuses/update "status=Hello world"
"""
import argparse
import json
import logging
import sys

from .client import NO_CONTENT, TwitterAPI
from .config import Config
from .exceptions import TwitterAPIError
from .logger import logger


def parse_parameter(text: str):
    """Split a key=value argument."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a signed request to the Twitter API")
    parser.add_argument("method", type=str.upper, choices=["GET", "POST"], help="HTTP method")
    parser.add_argument("uri", help="Endpoint path without .json, e.g. statuses/update")
    parser.add_argument("params", nargs="*", type=parse_parameter, metavar="key=value",
                        help="Request parameters")
    parser.add_argument("--api-url", default=None, help="Base API URL (default: TWITTER_API_URL)")
    parser.add_argument("--insecure", action="store_true", help="Skip TLS certificate verification")
    parser.add_argument("--keep-mentions", action="store_true",
                        help="Send a status starting with @ unescaped")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))

    options = {"escape_mentions": not args.keep_mentions}
    if args.api_url:
        options["api_url"] = args.api_url

    try:
        with TwitterAPI.from_env(**options) as api:
            if args.insecure:
                api.set_verify_peer(False)
            result = api.perform_request(args.uri, args.method, dict(args.params))
    except TwitterAPIError as e:
        logger.error(f"Request failed: {e}")
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    if result is NO_CONTENT:
        print("✓ No content")
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
