"""Attachment list and upload form for the board detail screen."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, Static

from moodboard.format import format_file_size
from moodboard.linkify import link_style
from moodboard.model.board import Attachment
from moodboard.ui.confirm import ConfirmButton


def attachment_label(attachment: Attachment) -> Text:
    """File name linked to its URL, followed by its size."""
    name = Text(attachment.file_name)
    if attachment.file_url:
        name.stylize(link_style(attachment.file_url))
    return Text.assemble(name, f"  {format_file_size(attachment.file_size)}")


class AttachmentRow(Horizontal):
    DEFAULT_CSS = """
    AttachmentRow {
        height: 1;
    }
    AttachmentRow .attachment-label {
        width: 1fr;
    }
    """

    def __init__(self, attachment: Attachment) -> None:
        super().__init__(classes="attachment")
        self.attachment = attachment

    def compose(self) -> ComposeResult:
        yield Static(attachment_label(self.attachment), classes="attachment-label")
        yield ConfirmButton(classes="mutating")


class AttachmentsPanel(Vertical):
    """Files attached to a board plus an upload form taking a local path."""

    class UploadRequested(Message):
        def __init__(self, path: str) -> None:
            super().__init__()
            self.path = path

    class DeleteRequested(Message):
        def __init__(self, attachment_id: str) -> None:
            super().__init__()
            self.attachment_id = attachment_id

    DEFAULT_CSS = """
    AttachmentsPanel {
        height: auto;
    }
    AttachmentsPanel #attachment-list {
        height: auto;
    }
    AttachmentsPanel .attachment-form {
        height: auto;
    }
    AttachmentsPanel #attachment-path {
        width: 1fr;
    }
    """

    def __init__(self, attachments: Iterable[Attachment] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self._attachments = list(attachments)

    def compose(self) -> ComposeResult:
        yield Static(self._heading(), id="attachments-heading", classes="section-heading")
        yield Vertical(*self._rows(), id="attachment-list")
        with Horizontal(classes="attachment-form"):
            yield Input(placeholder="Path to a local file", id="attachment-path")
            yield Button("Upload", id="attachment-upload", classes="mutating")

    def _heading(self) -> str:
        return f"Attachments ({len(self._attachments)})"

    def _rows(self) -> list[AttachmentRow]:
        return [AttachmentRow(a) for a in self._attachments]

    async def set_attachments(self, attachments: Iterable[Attachment]) -> None:
        self._attachments = list(attachments)
        self.query_one("#attachments-heading", Static).update(self._heading())
        attachment_list = self.query_one("#attachment-list", Vertical)
        await attachment_list.remove_children()
        await attachment_list.mount_all(self._rows())

    def clear_form(self) -> None:
        self.query_one("#attachment-path", Input).value = ""

    def _request_upload(self) -> None:
        self.post_message(self.UploadRequested(self.query_one("#attachment-path", Input).value.strip()))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "attachment-upload":
            event.stop()
            self._request_upload()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "attachment-path":
            event.stop()
            self._request_upload()

    def on_confirm_button_confirmed(self, event: ConfirmButton.Confirmed) -> None:
        event.stop()
        for node in event.control.ancestors:
            if isinstance(node, AttachmentRow):
                self.post_message(self.DeleteRequested(node.attachment.id))
                return
