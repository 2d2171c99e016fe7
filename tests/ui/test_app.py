"""Tests for the application shell."""

import pytest

from moodboard.client import MoodboardClient
from moodboard.config import Config
from moodboard.ui.app import MoodboardApp
from moodboard.ui.boards import BoardListScreen
from moodboard.ui.status import StatusBar
from tests.ui.conftest import wait_for


@pytest.mark.asyncio
async def test_starts_on_board_list(client):
    app = MoodboardApp(Config(api_base=client.api_base), client=client)
    async with app.run_test() as pilot:
        await wait_for(pilot, lambda: isinstance(app.screen, BoardListScreen))
        assert app.sub_title == client.api_base


@pytest.mark.asyncio
async def test_malformed_api_base_reports_instead_of_crashing():
    config = Config(api_base="localhost:8080/api")
    app = MoodboardApp(config, client=MoodboardClient.from_config(config))
    async with app.run_test() as pilot:
        await wait_for(pilot, lambda: isinstance(app.screen, BoardListScreen))
        status = app.screen.query_one(StatusBar)
        await wait_for(pilot, lambda: status.is_error)
        assert status.last_message.startswith("Loading boards failed: Request to localhost:8080/api/moodboards")
    assert app.return_code in (None, 0)
