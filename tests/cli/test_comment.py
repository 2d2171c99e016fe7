"""Tests for 'moodboard comment' commands."""

import json
from argparse import Namespace

import pytest

from moodboard.cli.comment import comment_add, comment_list, comment_rm


def test_comment_add_and_list(cli_client, capsys):
    assert comment_add(Namespace(json=False, board="1", content="see www.a.com", author="")) == 0
    assert "Added comment" in capsys.readouterr().out

    assert comment_list(Namespace(json=False, board="1")) == 0
    out = capsys.readouterr().out
    assert "Anonymous" in out
    assert "see www.a.com" in out


def test_comment_list_json(cli_client, capsys):
    cli_client.add_comment("1", "hello", "Kim")
    assert comment_list(Namespace(json=True, board="1")) == 0

    data = json.loads(capsys.readouterr().out)
    assert data[0]["author"] == "Kim"
    assert data[0]["content"] == "hello"


def test_comment_list_empty(cli_client, capsys):
    assert comment_list(Namespace(json=False, board="1")) == 0
    assert "no comments" in capsys.readouterr().out


def test_comment_add_empty_rejected(cli_client, capsys):
    with pytest.raises(SystemExit, match="1"):
        comment_add(Namespace(json=False, board="1", content="  ", author="Kim"))
    assert "Comment content is required" in capsys.readouterr().err
    assert cli_client.mutations() == []


def test_comment_rm(cli_client, capsys):
    comment = cli_client.add_comment("1", "bye", "")
    assert comment_rm(Namespace(json=False, board="1", id=comment.id)) == 0
    assert f"Deleted comment {comment.id}" in capsys.readouterr().out
    assert cli_client.comments["1"] == []
