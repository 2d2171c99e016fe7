"""Handlers for 'moodboard board' commands."""

from moodboard.cli._common import call_or_die, make_client, output_json, output_result
from moodboard.format import format_date
from moodboard.model.board import board_payload, items_from_texts


def board_list(args) -> int:
    """List boards with item counts."""
    client = make_client(args)
    boards = call_or_die(args.json, client.list_boards)

    if args.json:
        output_json(
            [{"id": b.id, "title": b.title, "items": len(b.items), "updatedAt": b.updated_at} for b in boards]
        )
    else:
        if not boards:
            print("no boards")
        for b in boards:
            noun = "item" if len(b.items) == 1 else "items"
            print(f"{b.id}  {b.title:<24} {len(b.items)} {noun}  {format_date(b.updated_at)}")

    return 0


def board_get(args) -> int:
    """Show a board with its items."""
    client = make_client(args)
    board = call_or_die(args.json, client.get_board, args.id)

    if args.json:
        output_json(board.to_dict())
        return 0

    print(f"# {board.title}")
    if board.description:
        print()
        print(board.description)
    print()
    print(f"due: {board.due_date or '-'}")
    print(f"created: {format_date(board.created_at)}")
    print(f"updated: {format_date(board.updated_at)}")
    if board.items:
        print()
        for i, item in enumerate(board.items, 1):
            color = f"  [{item.color}]" if item.color else ""
            print(f"{i:>3}. {item.text}{color}")
    return 0


def board_add(args) -> int:
    """Create a board."""
    client = make_client(args)
    payload = call_or_die(
        args.json, board_payload, args.title, args.description, args.due, items_from_texts(args.item or [])
    )
    board = call_or_die(args.json, client.create_board, payload)

    board_id = board.id if board else ""
    output_result({"id": board_id, "title": payload["title"]}, f"Created board {board_id}".rstrip(), args.json)
    return 0


def board_set(args) -> int:
    """Replace a board's fields. Unset options keep their current values."""
    client = make_client(args)
    current = call_or_die(args.json, client.get_board, args.id)

    changes = {}
    if args.title is not None:
        changes["title"] = args.title
    if args.description is not None:
        changes["description"] = args.description
    if args.due is not None:
        changes["due_date"] = args.due
    if args.item is not None:
        changes["items"] = items_from_texts(args.item or [])

    payload = call_or_die(args.json, current.payload, **changes)
    call_or_die(args.json, client.replace_board, args.id, payload)

    output_result({"id": args.id, "title": payload["title"]}, f"Updated board {args.id}", args.json)
    return 0


def board_rm(args) -> int:
    """Delete a board."""
    client = make_client(args)
    call_or_die(args.json, client.delete_board, args.id)
    output_result({"id": args.id, "deleted": True}, f"Deleted board {args.id}", args.json)
    return 0
