"""Tests for 'moodboard board' commands."""

import json
from argparse import Namespace

import pytest

from moodboard.cli.board import board_add, board_get, board_list, board_rm, board_set
from moodboard.errors import ApiError, BackendUnavailable


def test_board_list(cli_client, capsys):
    args = Namespace(json=False)
    assert board_list(args) == 0

    out = capsys.readouterr().out
    assert "Spring palette" in out
    assert "3 items" in out
    assert "Mar 5, 2025, 14:30" in out


def test_board_list_json(cli_client, capsys):
    assert board_list(Namespace(json=True)) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [{"id": "1", "title": "Spring palette", "items": 3, "updatedAt": "2025-03-05T14:30:00"}]


def test_board_list_empty(cli_client, capsys):
    cli_client.boards.clear()
    assert board_list(Namespace(json=False)) == 0
    assert "no boards" in capsys.readouterr().out


def test_board_list_unreachable(cli_client, capsys):
    cli_client.fail_reads = BackendUnavailable("http://backend.test/api")
    with pytest.raises(SystemExit, match="1"):
        board_list(Namespace(json=False))
    err = capsys.readouterr().err
    assert err.startswith("error: Cannot reach the backend at http://backend.test/api")


def test_board_get(cli_client, capsys):
    assert board_get(Namespace(json=False, id="1")) == 0

    out = capsys.readouterr().out
    assert "# Spring palette" in out
    assert "Warm tones" in out
    assert "due: 2030-01-01" in out
    assert "  1. peach  [#ffcc99]" in out
    assert "  2. sand\n" in out


def test_board_get_json(cli_client, capsys):
    assert board_get(Namespace(json=True, id="1")) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Spring palette"
    assert [i["text"] for i in data["items"]] == ["peach", "sand", "coral"]
    assert data["dueDate"] == "2030-01-01"
    assert data["updatedAt"] == "2025-03-05T14:30:00"
    assert data["items"][0]["orderIndex"] == 0
    assert "due_date" not in data


def test_board_get_error_json(cli_client, capsys):
    cli_client.fail_reads = ApiError(404, "Moodboard not found")
    with pytest.raises(SystemExit, match="1"):
        board_get(Namespace(json=True, id="99"))
    assert json.loads(capsys.readouterr().err) == {"error": "Moodboard not found"}


def test_board_add(cli_client, capsys):
    args = Namespace(json=False, title=" New ", description="d", due=None, item=["a", " ", "b"])
    assert board_add(args) == 0

    assert "Created board" in capsys.readouterr().out
    name, (payload,) = cli_client.calls[-1]
    assert name == "create_board"
    assert payload == {
        "title": "New",
        "description": "d",
        "dueDate": None,
        "items": [{"text": "a", "orderIndex": 0}, {"text": "b", "orderIndex": 1}],
    }


def test_board_add_empty_title_sends_nothing(cli_client, capsys):
    args = Namespace(json=False, title="   ", description="", due=None, item=None)
    with pytest.raises(SystemExit, match="1"):
        board_add(args)
    assert "Title is required" in capsys.readouterr().err
    assert cli_client.mutations() == []


def test_board_set_keeps_unset_fields(cli_client, capsys):
    args = Namespace(json=True, id="1", title="Autumn", description=None, due=None, item=None)
    assert board_set(args) == 0

    assert json.loads(capsys.readouterr().out) == {"id": "1", "title": "Autumn"}
    name, (board_id, payload) = cli_client.calls[-1]
    assert name == "replace_board"
    assert board_id == "1"
    assert payload["description"] == "Warm tones, see www.example.com"
    assert payload["dueDate"] == "2030-01-01"
    assert payload["items"] == [
        {"text": "peach", "color": "#ffcc99", "orderIndex": 0},
        {"text": "sand", "orderIndex": 1},
        {"text": "coral", "color": "#ff7f50", "orderIndex": 2},
    ]


def test_board_set_replaces_items_and_clears_due(cli_client):
    args = Namespace(json=False, id="1", title=None, description=None, due="", item=["only"])
    assert board_set(args) == 0

    board = cli_client.boards["1"]
    assert [i.text for i in board.items] == ["only"]
    assert board.due_date is None


@pytest.mark.parametrize(
    "handler, extra",
    [(board_add, {"title": "T"}), (board_set, {"id": "1", "title": None})],
)
def test_bad_due_date_sends_nothing(cli_client, capsys, handler, extra):
    args = Namespace(json=False, description=None, due="next week", item=None, **extra)
    with pytest.raises(SystemExit, match="1"):
        handler(args)
    assert "Due date must be YYYY-MM-DD" in capsys.readouterr().err
    assert cli_client.mutations() == []


def test_board_set_backend_error(cli_client, capsys):
    cli_client.fail = ApiError(500, "boom")
    args = Namespace(json=False, id="1", title="x", description=None, due=None, item=None)
    with pytest.raises(SystemExit, match="1"):
        board_set(args)
    assert "error: boom" in capsys.readouterr().err


def test_board_rm(cli_client, capsys):
    assert board_rm(Namespace(json=False, id="1")) == 0
    assert "Deleted board 1" in capsys.readouterr().out
    assert "1" not in cli_client.boards
