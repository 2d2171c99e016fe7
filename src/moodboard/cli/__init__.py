"""CLI argument parser and dispatch for moodboard."""

import argparse

from moodboard.cli.attachment import attachment_list, attachment_rm, attachment_upload
from moodboard.cli.board import board_add, board_get, board_list, board_rm, board_set
from moodboard.cli.comment import comment_add, comment_list, comment_rm
from moodboard.cli.web import web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--api", default=argparse.SUPPRESS, help="Backend API base URL (default: $MOODBOARD_API_BASE)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    parser = argparse.ArgumentParser(
        prog="moodboard",
        description="Terminal client for a moodboard server. Run without a command to open the TUI.",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_list_p = board_verbs.add_parser("list", help="List boards", parents=[common])
    board_list_p.set_defaults(func=board_list)

    board_get_p = board_verbs.add_parser("get", help="Show a board", parents=[common])
    board_get_p.add_argument("id", help="Board ID")
    board_get_p.set_defaults(func=board_get)

    board_add_p = board_verbs.add_parser("add", help="Create a board", parents=[common])
    board_add_p.add_argument("title", help="Board title")
    board_add_p.add_argument("--description", default="", help="Board description")
    board_add_p.add_argument("--item", action="append", help="Item text (repeatable, in order)")
    board_add_p.add_argument("--due", help="Due date (YYYY-MM-DD)")
    board_add_p.set_defaults(func=board_add)

    board_set_p = board_verbs.add_parser("set", help="Replace a board's fields", parents=[common])
    board_set_p.add_argument("id", help="Board ID")
    board_set_p.add_argument("--title", help="New title")
    board_set_p.add_argument("--description", help="New description")
    board_set_p.add_argument("--item", action="append", help="Replace all items (repeatable, in order)")
    board_set_p.add_argument("--due", help="Due date (YYYY-MM-DD, empty to clear)")
    board_set_p.set_defaults(func=board_set)

    board_rm_p = board_verbs.add_parser("rm", help="Delete a board", parents=[common])
    board_rm_p.add_argument("id", help="Board ID")
    board_rm_p.set_defaults(func=board_rm)

    # board with no verb = list
    board_p.set_defaults(func=board_list)

    # --- comment ---
    comment_p = nouns.add_parser("comment", help="Comment operations", parents=[common])
    comment_verbs = comment_p.add_subparsers(dest="verb")

    comment_list_p = comment_verbs.add_parser("list", help="List comments", parents=[common])
    comment_list_p.add_argument("board", help="Board ID")
    comment_list_p.set_defaults(func=comment_list)

    comment_add_p = comment_verbs.add_parser("add", help="Add a comment", parents=[common])
    comment_add_p.add_argument("board", help="Board ID")
    comment_add_p.add_argument("content", help="Comment text")
    comment_add_p.add_argument("--author", default="", help="Author name (default: Anonymous)")
    comment_add_p.set_defaults(func=comment_add)

    comment_rm_p = comment_verbs.add_parser("rm", help="Delete a comment", parents=[common])
    comment_rm_p.add_argument("board", help="Board ID")
    comment_rm_p.add_argument("id", help="Comment ID")
    comment_rm_p.set_defaults(func=comment_rm)

    # --- attachment ---
    att_p = nouns.add_parser("attachment", help="Attachment operations", parents=[common])
    att_verbs = att_p.add_subparsers(dest="verb")

    att_list_p = att_verbs.add_parser("list", help="List attachments", parents=[common])
    att_list_p.add_argument("board", help="Board ID")
    att_list_p.set_defaults(func=attachment_list)

    att_upload_p = att_verbs.add_parser("upload", help="Upload a file", parents=[common])
    att_upload_p.add_argument("board", help="Board ID")
    att_upload_p.add_argument("path", help="Local file path")
    att_upload_p.set_defaults(func=attachment_upload)

    att_rm_p = att_verbs.add_parser("rm", help="Delete an attachment", parents=[common])
    att_rm_p.add_argument("board", help="Board ID")
    att_rm_p.add_argument("id", help="Attachment ID")
    att_rm_p.set_defaults(func=attachment_rm)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the TUI in a browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.set_defaults(func=web)

    return parser
