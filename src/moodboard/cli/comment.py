"""Handlers for 'moodboard comment' commands."""

from moodboard.cli._common import call_or_die, make_client, output_json, output_result
from moodboard.format import format_date


def comment_list(args) -> int:
    """List comments on a board."""
    client = make_client(args)
    comments = call_or_die(args.json, client.list_comments, args.board)

    if args.json:
        output_json([c.to_dict() for c in comments])
    else:
        if not comments:
            print("no comments")
        for c in comments:
            print(f"{c.id}  {c.author}  {format_date(c.created_at)}")
            print(f"  {c.content}")
    return 0


def comment_add(args) -> int:
    """Post a comment."""
    client = make_client(args)
    comment = call_or_die(args.json, client.add_comment, args.board, args.content, args.author or "")
    comment_id = comment.id if comment else ""
    output_result({"id": comment_id, "board": args.board}, f"Added comment {comment_id}".rstrip(), args.json)
    return 0


def comment_rm(args) -> int:
    """Delete a comment."""
    client = make_client(args)
    call_or_die(args.json, client.delete_comment, args.board, args.id)
    output_result({"id": args.id, "deleted": True}, f"Deleted comment {args.id}", args.json)
    return 0
