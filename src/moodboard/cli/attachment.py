"""Handlers for 'moodboard attachment' commands."""

from moodboard.cli._common import call_or_die, make_client, output_json, output_result
from moodboard.format import format_date, format_file_size


def attachment_list(args) -> int:
    """List files attached to a board."""
    client = make_client(args)
    attachments = call_or_die(args.json, client.list_attachments, args.board)

    if args.json:
        output_json([a.to_dict() for a in attachments])
    else:
        if not attachments:
            print("no attachments")
        for a in attachments:
            print(f"{a.id}  {a.file_name:<24} {format_file_size(a.file_size):>9}  {format_date(a.uploaded_at)}")
            if a.file_url:
                print(f"  {a.file_url}")
    return 0


def attachment_upload(args) -> int:
    """Upload a local file."""
    client = make_client(args)
    attachment = call_or_die(args.json, client.upload_attachment, args.board, args.path)
    attachment_id = attachment.id if attachment else ""
    output_result(
        {"id": attachment_id, "board": args.board}, f"Uploaded {args.path} {attachment_id}".rstrip(), args.json
    )
    return 0


def attachment_rm(args) -> int:
    """Delete an attachment."""
    client = make_client(args)
    call_or_die(args.json, client.delete_attachment, args.board, args.id)
    output_result({"id": args.id, "deleted": True}, f"Deleted attachment {args.id}", args.json)
    return 0
