"""Tests for CLI argument parsing."""

from moodboard.cli import build_parser
from moodboard.cli.board import board_add, board_list
from moodboard.cli.comment import comment_add


def test_api_before_noun_survives():
    args = build_parser().parse_args(["--api", "http://x/api", "board", "list"])
    assert args.api == "http://x/api"
    assert args.func is board_list


def test_no_noun_means_tui():
    args = build_parser().parse_args([])
    assert args.noun is None
    assert not hasattr(args, "api")


def test_board_without_verb_lists():
    args = build_parser().parse_args(["board"])
    assert args.func is board_list


def test_board_add_items_repeat():
    args = build_parser().parse_args(["board", "add", "Title", "--item", "a", "--item", "b", "--json"])
    assert args.func is board_add
    assert args.item == ["a", "b"]
    assert args.json is True


def test_comment_add_author():
    args = build_parser().parse_args(["comment", "add", "1", "nice", "--author", "Kim"])
    assert args.func is comment_add
    assert (args.board, args.content, args.author) == ("1", "nice", "Kim")
