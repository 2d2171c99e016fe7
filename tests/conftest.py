"""Shared fixtures."""

import pytest

from moodboard.model.board import Board, Item
from tests.fakes import FakeClient


def make_board(board_id="1", title="Spring palette", items=None, **kwargs) -> Board:
    """Board with items built from (text, color) pairs."""
    built = [
        Item(id=f"{board_id}-{i}", text=text, color=color, order_index=i)
        for i, (text, color) in enumerate(items or [])
    ]
    kwargs.setdefault("created_at", "2025-03-05T14:30:00")
    kwargs.setdefault("updated_at", "2025-03-05T14:30:00")
    return Board(id=board_id, title=title, items=built, **kwargs)


@pytest.fixture
def board():
    return make_board(
        description="Warm tones, see www.example.com",
        items=[("peach", "#ffcc99"), ("sand", None), ("coral", "#ff7f50")],
        due_date="2030-01-01",
    )


@pytest.fixture
def client(board):
    return FakeClient([board])
