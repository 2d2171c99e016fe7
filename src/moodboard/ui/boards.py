"""Board list screen with the create/edit form."""

from __future__ import annotations

from collections.abc import Iterable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, Static, TextArea

from moodboard.client import MoodboardClient
from moodboard.errors import ValidationError
from moodboard.format import format_date
from moodboard.model.board import Board, board_payload, items_from_texts
from moodboard.ui.actions import RequestMixin
from moodboard.ui.confirm import ConfirmButton
from moodboard.ui.constants import ICON_EDIT, ICON_OPEN
from moodboard.ui.detail import BoardDetailScreen
from moodboard.ui.static import IconButton
from moodboard.ui.status import StatusBar


class BoardRow(Horizontal):
    """Summary line for one board with open/edit/delete controls."""

    DEFAULT_CSS = """
    BoardRow {
        height: 1;
    }
    BoardRow:hover {
        background: $boost;
    }
    BoardRow .board-title {
        width: 1fr;
    }
    BoardRow .board-count {
        width: 10;
        color: $text-muted;
    }
    BoardRow .board-updated {
        width: 22;
        color: $text-muted;
    }
    """

    def __init__(self, board: Board) -> None:
        super().__init__(classes="board-row")
        self.board = board

    def compose(self) -> ComposeResult:
        count = len(self.board.items)
        yield Static(self.board.title, classes="board-title")
        yield Static(f"{count} {'item' if count == 1 else 'items'}", classes="board-count")
        yield Static(format_date(self.board.updated_at), classes="board-updated")
        yield IconButton(ICON_OPEN, "open")
        yield IconButton(ICON_EDIT, "edit")
        yield ConfirmButton(classes="mutating")


class BoardListScreen(RequestMixin, Screen[None]):
    """All boards, plus a form that creates a board or replaces one loaded into it."""

    DEFAULT_CSS = """
    BoardListScreen #board-list {
        height: 1fr;
        border: round $primary;
    }
    BoardListScreen #board-form {
        height: auto;
        padding: 0 1;
    }
    BoardListScreen #form-items {
        height: 6;
    }
    BoardListScreen #form-buttons {
        height: auto;
    }
    BoardListScreen #boards-empty {
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("ctrl+r", "refresh", "Refresh"),
        ("ctrl+n", "new", "New board"),
    ]

    busy = reactive(False)

    def __init__(self, client: MoodboardClient) -> None:
        super().__init__()
        self.client = client
        self.boards: list[Board] = []
        self.editing: Board | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="board-list")
        with Vertical(id="board-form"):
            yield Label("New board", id="form-heading")
            yield Input(placeholder="Title", id="form-title")
            yield Input(placeholder="Description", id="form-description")
            yield TextArea(id="form-items")
            with Horizontal(id="form-buttons"):
                yield Button("Create", id="form-save", variant="primary", classes="mutating")
                yield Button("Clear", id="form-clear")
                yield Button("Refresh", id="form-refresh")
        yield StatusBar()
        yield Footer()

    async def on_mount(self) -> None:
        self.query_one("#form-items", TextArea).border_title = "Items, one per line"
        await self.load_boards()

    async def load_boards(self) -> None:
        self.set_status("Loading boards...")
        ok, boards = await self.fetch("Loading boards", self.client.list_boards)
        if not ok:
            return
        await self._show_boards(boards)
        self.set_status("")

    async def _show_boards(self, boards: Iterable[Board]) -> None:
        self.boards = list(boards)
        board_list = self.query_one("#board-list", VerticalScroll)
        await board_list.remove_children()
        if not self.boards:
            await board_list.mount(Static("No boards yet. Create one below.", id="boards-empty"))
            return
        await board_list.mount_all([BoardRow(b) for b in self.boards])

    # --- form ---

    def _fill_form(self, board: Board | None) -> None:
        self.editing = board
        self.query_one("#form-heading", Label).update(f"Editing {board.title}" if board else "New board")
        self.query_one("#form-title", Input).value = board.title if board else ""
        self.query_one("#form-description", Input).value = (board.description or "") if board else ""
        self.query_one("#form-items", TextArea).text = "\n".join(i.text for i in board.items) if board else ""
        self.query_one("#form-save", Button).label = "Save" if board else "Create"

    def form_payload(self) -> dict:
        """Body for the form's create or replace. Raises ValidationError on an empty title."""
        items = items_from_texts(self.query_one("#form-items", TextArea).text.split("\n"))
        return board_payload(
            self.query_one("#form-title", Input).value,
            self.query_one("#form-description", Input).value,
            self.editing.due_date if self.editing else None,
            items,
        )

    async def submit_form(self) -> None:
        try:
            payload = self.form_payload()
        except ValidationError as e:
            self.set_status(str(e), error=True)
            return

        if self.editing is None:
            if not await self.mutate("Create", self.client.create_board, payload):
                return
            message = "Board created."
        else:
            if not await self.mutate("Update", self.client.replace_board, self.editing.id, payload):
                return
            message = "Board updated."
        self._fill_form(None)
        await self.load_boards()
        self.set_status(message)

    async def load_into_form(self, board_id: str) -> None:
        ok, board = await self.fetch("Loading board", self.client.get_board, board_id)
        if ok:
            self._fill_form(board)
            self.set_status(f"Loaded {board.title}.")

    async def delete_board(self, board: Board) -> None:
        if not await self.mutate("Delete", self.client.delete_board, board.id):
            return
        if self.editing is not None and self.editing.id == board.id:
            self._fill_form(None)
        await self.load_boards()
        self.set_status("Board deleted.")

    # --- events ---

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "form-save":
            await self.submit_form()
        elif button_id == "form-clear":
            self._fill_form(None)
        elif button_id == "form-refresh":
            await self.load_boards()

    def _row_for(self, widget) -> BoardRow | None:
        for node in widget.ancestors_with_self:
            if isinstance(node, BoardRow):
                return node
        return None

    async def on_icon_button_pressed(self, event: IconButton.Pressed) -> None:
        row = self._row_for(event.button)
        if row is None:
            return
        event.stop()
        if event.action == "open":
            self.open_board(row.board.id)
        elif event.action == "edit":
            await self.load_into_form(row.board.id)

    async def on_confirm_button_confirmed(self, event: ConfirmButton.Confirmed) -> None:
        row = self._row_for(event.control)
        if row is not None:
            event.stop()
            await self.delete_board(row.board)

    def open_board(self, board_id: str) -> None:
        self.app.push_screen(BoardDetailScreen(self.client, board_id), self._on_detail_closed)

    async def _on_detail_closed(self, _result: None) -> None:
        await self.load_boards()

    def action_new(self) -> None:
        self._fill_form(None)
        self.query_one("#form-title", Input).focus()

    async def action_refresh(self) -> None:
        await self.load_boards()
