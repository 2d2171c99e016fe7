"""Board detail screen: items, comments and attachments of one board."""

from __future__ import annotations

import asyncio
import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Static

from moodboard.client import MoodboardClient
from moodboard.errors import MoodboardError, ValidationError
from moodboard.format import format_date
from moodboard.model.board import Board
from moodboard.ui.actions import RequestMixin
from moodboard.ui.attachments import AttachmentsPanel
from moodboard.ui.comments import CommentsPanel
from moodboard.ui.constants import ICON_BACK
from moodboard.ui.due import DueDateWidget
from moodboard.ui.edit import EditableText, LineEditor, MarkdownEditor, MarkdownViewer, TextViewer
from moodboard.ui.items import ItemsEditor
from moodboard.ui.markdown import moodboard_parser_factory
from moodboard.ui.static import IconButton
from moodboard.ui.status import StatusBar

logger = logging.getLogger(__name__)


class BoardDetailScreen(RequestMixin, Screen[None]):
    """Everything about one board.

    Title, description, due date and items are each saved as a full
    replace of the board followed by a reload, so the screen always shows
    what the backend stored.
    """

    DEFAULT_CSS = """
    BoardDetailScreen #detail-title-bar {
        height: auto;
        background: $primary;
        padding: 0 1;
    }
    BoardDetailScreen #detail-title {
        width: 1fr;
        text-style: bold;
    }
    BoardDetailScreen #detail-body {
        padding: 1 2;
    }
    BoardDetailScreen .section-heading {
        margin-top: 1;
        text-style: bold underline;
    }
    BoardDetailScreen #detail-meta {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ("escape", "close", "Back"),
        ("ctrl+r", "reload", "Reload"),
    ]

    busy = reactive(False)

    def __init__(self, client: MoodboardClient, board_id: str) -> None:
        super().__init__()
        self.client = client
        self.board_id = board_id
        self.board: Board | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="detail-title-bar"):
            yield IconButton(ICON_BACK, "back")
            yield EditableText(
                "", TextViewer(), LineEditor(required=True), placeholder="Loading...", id="detail-title"
            )
        with VerticalScroll(id="detail-body"):
            yield Static("Description", classes="section-heading")
            yield EditableText(
                "",
                MarkdownViewer(parser_factory=moodboard_parser_factory),
                MarkdownEditor(),
                placeholder="*No description. Click to add one.*",
                id="detail-description",
            )
            yield Static("Due date", classes="section-heading")
            yield DueDateWidget(id="detail-due")
            yield Static("Items", classes="section-heading")
            yield ItemsEditor(id="detail-items")
            yield CommentsPanel(id="detail-comments")
            yield AttachmentsPanel(id="detail-attachments")
            yield Static("", id="detail-meta")
        yield StatusBar()
        yield Footer()

    async def on_mount(self) -> None:
        await self.load_board()
        await self.load_comments()
        await self.load_attachments()

    # --- loading ---

    async def load_board(self) -> bool:
        ok, board = await self.fetch("Loading board", self.client.get_board, self.board_id)
        if not ok:
            return False
        self.board = board
        await self._show_board(board)
        return True

    async def _show_board(self, board: Board) -> None:
        self.query_one("#detail-title", EditableText).reset(board.title)
        self.query_one("#detail-description", EditableText).reset(board.description or "")
        self.query_one("#detail-due", DueDateWidget).set_due(board.due_date)
        await self.query_one("#detail-items", ItemsEditor).set_items(board.items)
        self.query_one("#detail-meta", Static).update(
            f"Created {format_date(board.created_at)} · Updated {format_date(board.updated_at)}"
        )

    async def load_comments(self) -> None:
        try:
            comments = await asyncio.to_thread(self.client.list_comments, self.board_id)
        except MoodboardError:
            logger.warning("loading comments for %s failed", self.board_id, exc_info=True)
            return
        await self.query_one(CommentsPanel).set_comments(comments)

    async def load_attachments(self) -> None:
        try:
            attachments = await asyncio.to_thread(self.client.list_attachments, self.board_id)
        except MoodboardError:
            logger.warning("loading attachments for %s failed", self.board_id, exc_info=True)
            return
        await self.query_one(AttachmentsPanel).set_attachments(attachments)

    # --- board replace ---

    async def _replace(self, label: str, **changes) -> bool:
        """Send the board with ``changes`` applied as one replace, then reload."""
        if self.board is None:
            return False
        try:
            payload = self.board.payload(**changes)
        except ValidationError as e:
            self.set_status(str(e), error=True)
            return False
        if not await self.mutate(label, self.client.replace_board, self.board_id, payload):
            return False
        await self.load_board()
        return True

    async def on_editable_text_changed(self, event: EditableText.Changed) -> None:
        editable_id = event.editable.id
        if editable_id == "detail-title":
            event.stop()
            if await self._replace("Title update", title=event.new_value):
                self.set_status("Title updated.")
            elif self.board is not None:
                event.editable.reset(self.board.title)
        elif editable_id == "detail-description":
            event.stop()
            if await self._replace("Description update", description=event.new_value):
                self.set_status("Description updated.")
            elif self.board is not None:
                event.editable.reset(self.board.description or "")

    async def on_due_date_widget_submitted(self, event: DueDateWidget.Submitted) -> None:
        event.stop()
        if await self._replace("Due date update", due_date=event.value or None):
            self.set_status("Due date updated." if event.value else "Due date cleared.")

    async def on_items_editor_commit(self, event: ItemsEditor.Commit) -> None:
        event.stop()
        if self.board is None:
            return
        try:
            payload = self.board.payload(items=event.items)
        except ValidationError as e:
            self.set_status(str(e), error=True)
            return
        # On failure the editor keeps its buffer so the save can be retried.
        if not await self.mutate("Items update", self.client.replace_board, self.board_id, payload):
            return
        event.editor.finish()
        await self.load_board()
        self.set_status("Items updated.")

    # --- comments ---

    async def on_comments_panel_add_requested(self, event: CommentsPanel.AddRequested) -> None:
        event.stop()
        if not event.content.strip():
            self.set_status("Write a comment first.", error=True)
            return
        if await self.mutate("Posting comment", self.client.add_comment, self.board_id, event.content, event.author):
            self.query_one(CommentsPanel).clear_form()
            await self.load_comments()
            self.set_status("Comment posted.")

    async def on_comments_panel_delete_requested(self, event: CommentsPanel.DeleteRequested) -> None:
        event.stop()
        if await self.mutate("Deleting comment", self.client.delete_comment, self.board_id, event.comment_id):
            await self.load_comments()
            self.set_status("Comment deleted.")

    # --- attachments ---

    async def on_attachments_panel_upload_requested(self, event: AttachmentsPanel.UploadRequested) -> None:
        event.stop()
        if not event.path:
            self.set_status("Choose a file to upload.", error=True)
            return
        if await self.mutate("Upload", self.client.upload_attachment, self.board_id, event.path):
            self.query_one(AttachmentsPanel).clear_form()
            await self.load_attachments()
            self.set_status("File uploaded.")

    async def on_attachments_panel_delete_requested(self, event: AttachmentsPanel.DeleteRequested) -> None:
        event.stop()
        if await self.mutate(
            "Deleting attachment", self.client.delete_attachment, self.board_id, event.attachment_id
        ):
            await self.load_attachments()
            self.set_status("Attachment deleted.")

    # --- navigation ---

    def on_icon_button_pressed(self, event: IconButton.Pressed) -> None:
        if event.action == "back":
            event.stop()
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)

    async def action_reload(self) -> None:
        if await self.load_board():
            self.set_status("Reloaded.")
        await self.load_comments()
        await self.load_attachments()
