"""Shared fixtures for CLI tests."""

from types import SimpleNamespace

import pytest


@pytest.fixture
def cli_client(client, monkeypatch):
    """Route CLI handlers to the in-memory backend."""
    monkeypatch.setattr("moodboard.cli._common.MoodboardClient", SimpleNamespace(from_config=lambda config: client))
    return client
