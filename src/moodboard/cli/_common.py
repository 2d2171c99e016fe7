"""Shared helpers for CLI command handlers."""

import json
import logging
import sys

from moodboard.client import MoodboardClient
from moodboard.config import load_config
from moodboard.errors import MoodboardError


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def make_client(args) -> MoodboardClient:
    """Build a client from --api and the environment."""
    return MoodboardClient.from_config(load_config(getattr(args, "api", None)))


def call_or_die(json_mode: bool, func, *args, **kwargs):
    """Run a client call. Exit 1 with the error message if it fails."""
    try:
        return func(*args, **kwargs)
    except MoodboardError as e:
        error(str(e), json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
