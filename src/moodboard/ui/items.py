"""Item list display and the staged item editor."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, ContentSwitcher, Input, Static

from moodboard.linkify import linkify, to_text
from moodboard.model.board import Item
from moodboard.model.items import EditBuffer
from moodboard.ui.color import ColorButton, swatch
from moodboard.ui.constants import ICON_DELETE, ICON_MOVE_DOWN, ICON_MOVE_UP
from moodboard.ui.edit import EditableText, LineEditor, LinkifiedViewer
from moodboard.ui.static import IconButton


def item_line(item: Item) -> Text:
    """Swatch followed by the item's text with URLs linked."""
    return Text.assemble(swatch(item.color), " ", to_text(linkify(item.text)))


class ItemsView(Vertical):
    """Read-only list of a board's items."""

    DEFAULT_CSS = """
    ItemsView {
        height: auto;
    }
    ItemsView .item-line {
        width: 100%;
        height: auto;
    }
    ItemsView #items-empty {
        color: $text-muted;
    }
    """

    def __init__(self, items: Iterable[Item] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self._items = list(items)

    def compose(self) -> ComposeResult:
        yield from self._lines()

    def _lines(self) -> list[Static]:
        if not self._items:
            return [Static("No items yet.", id="items-empty")]
        return [Static(item_line(item), classes="item-line") for item in self._items]

    async def set_items(self, items: Iterable[Item]) -> None:
        self._items = list(items)
        await self.remove_children()
        await self.mount_all(self._lines())


class ItemRow(Horizontal):
    """One buffered item with its color, text and move/delete controls."""

    DEFAULT_CSS = """
    ItemRow {
        width: 100%;
        height: auto;
    }
    ItemRow EditableText {
        width: 1fr;
    }
    """

    def __init__(self, item: Item, index: int, count: int) -> None:
        super().__init__(classes="item-row")
        self.item = item
        self.index = index
        self.count = count

    def compose(self) -> ComposeResult:
        yield ColorButton(self.item.color, classes="item-color")
        yield EditableText(self.item.text, LinkifiedViewer(), LineEditor(required=True), classes="item-text")
        yield IconButton(ICON_MOVE_UP, "up", disabled=self.index == 0)
        yield IconButton(ICON_MOVE_DOWN, "down", disabled=self.index == self.count - 1)
        yield IconButton(ICON_DELETE, "remove")


class ItemsEditor(Container):
    """Shows a board's items and runs an edit session over them.

    Editing works on an EditBuffer copied from the loaded items. Save posts
    Commit with the buffered items and leaves the buffer in place; the
    receiver calls ``finish`` once the backend has accepted them, so a
    failed save can be retried. Cancel drops the buffer without a request.
    """

    class Commit(Message):
        """The user asked to save the buffered items."""

        def __init__(self, editor: ItemsEditor, items: list[Item]) -> None:
            super().__init__()
            self.editor = editor
            self.items = items

        @property
        def control(self) -> ItemsEditor:
            return self.editor

    DEFAULT_CSS = """
    ItemsEditor {
        width: 100%;
        height: auto;
    }
    ItemsEditor > ContentSwitcher {
        height: auto;
    }
    ItemsEditor #items-edit {
        height: auto;
    }
    ItemsEditor #item-rows {
        height: auto;
    }
    ItemsEditor .items-bar {
        height: auto;
    }
    ItemsEditor #new-item-text {
        width: 1fr;
    }
    ItemsEditor #new-item-color {
        padding: 1 0;
    }
    """

    def __init__(self, items: Iterable[Item] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self._items = list(items)
        self.buffer: EditBuffer | None = None

    @property
    def editing(self) -> bool:
        return self.buffer is not None

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial="items-show"):
            with Vertical(id="items-show"):
                yield ItemsView(self._items, id="items-view")
                with Horizontal(classes="items-bar"):
                    yield Button("Edit items", id="items-start", classes="mutating")
            with Vertical(id="items-edit"):
                yield Vertical(id="item-rows")
                with Horizontal(classes="items-bar"):
                    yield Input(placeholder="New item text", id="new-item-text")
                    yield ColorButton(id="new-item-color")
                    yield Button("Add", id="new-item-add")
                with Horizontal(classes="items-bar"):
                    yield Button("Save items", id="items-save", variant="primary", classes="mutating")
                    yield Button("Cancel", id="items-cancel")

    async def set_items(self, items: Iterable[Item]) -> None:
        """Show freshly loaded items. An open edit session is left alone."""
        self._items = list(items)
        await self.query_one("#items-view", ItemsView).set_items(self._items)

    async def start(self) -> None:
        """Open an edit session on a copy of the current items."""
        if self.editing:
            return
        self.buffer = EditBuffer(self._items)
        await self._render_rows()
        self.query_one(ContentSwitcher).current = "items-edit"

    def finish(self) -> None:
        """End the session, discarding the buffer. Used for both save and cancel."""
        self.buffer = None
        self.query_one(ContentSwitcher).current = "items-show"

    async def add(self, text: str, color: str | None = None) -> Item | None:
        if self.buffer is None:
            return None
        item = self.buffer.add(text, color)
        if item is not None:
            await self._render_rows()
        return item

    async def _render_rows(self) -> None:
        rows = self.query_one("#item-rows", Vertical)
        await rows.remove_children()
        count = len(self.buffer)
        await rows.mount_all([ItemRow(item, i, count) for i, item in enumerate(self.buffer)])

    def _row_for(self, widget) -> ItemRow | None:
        for node in widget.ancestors_with_self:
            if isinstance(node, ItemRow):
                return node
        return None

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "items-start":
            event.stop()
            await self.start()
        elif button_id == "new-item-add":
            event.stop()
            await self._add_from_form()
        elif button_id == "items-save":
            event.stop()
            if self.buffer is not None:
                self.post_message(self.Commit(self, self.buffer.items))
        elif button_id == "items-cancel":
            event.stop()
            self.finish()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "new-item-text":
            event.stop()
            await self._add_from_form()

    async def _add_from_form(self) -> None:
        text_input = self.query_one("#new-item-text", Input)
        color_button = self.query_one("#new-item-color", ColorButton)
        if await self.add(text_input.value, color_button.color) is not None:
            text_input.value = ""
            color_button.color = None

    async def on_icon_button_pressed(self, event: IconButton.Pressed) -> None:
        row = self._row_for(event.button)
        if row is None or self.buffer is None:
            return
        event.stop()
        if event.action == "up":
            self.buffer.move_up(row.index)
        elif event.action == "down":
            self.buffer.move_down(row.index)
        elif event.action == "remove":
            self.buffer.remove(row.item.id)
        await self._render_rows()

    def on_editable_text_changed(self, event: EditableText.Changed) -> None:
        row = self._row_for(event.editable)
        if row is None or self.buffer is None:
            return
        event.stop()
        self.buffer.set_text(row.item.id, event.new_value)

    def on_color_button_color_selected(self, event: ColorButton.ColorSelected) -> None:
        row = self._row_for(event.button)
        if row is None or self.buffer is None:
            return
        event.stop()
        self.buffer.set_color(row.item.id, event.color)
