"""Tests for the board detail screen."""

import pytest
from textual.app import App
from textual.widgets import Button, Static

from moodboard.errors import ApiError, BackendUnavailable
from moodboard.ui.attachments import AttachmentRow, AttachmentsPanel
from moodboard.ui.comments import CommentRow, CommentsPanel
from moodboard.ui.detail import BoardDetailScreen
from moodboard.ui.due import DueDateWidget
from moodboard.ui.edit import EditableText
from moodboard.ui.items import ItemsEditor
from moodboard.ui.status import StatusBar
from tests.ui.conftest import wait_for


class DetailApp(App):
    """App that opens the detail screen for board 1."""

    def __init__(self, client):
        super().__init__()
        self.client = client

    def on_mount(self) -> None:
        self.push_screen(BoardDetailScreen(self.client, "1"))


async def _loaded(app, pilot) -> BoardDetailScreen:
    await wait_for(pilot, lambda: isinstance(app.screen, BoardDetailScreen) and app.screen.board is not None)
    screen = app.screen
    await wait_for(pilot, lambda: ("list_attachments", ("1",)) in app.client.calls)
    await pilot.pause()
    return screen


def _status(screen) -> StatusBar:
    return screen.query_one(StatusBar)


@pytest.mark.asyncio
async def test_loads_board(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        assert screen.query_one("#detail-title", EditableText).value == "Spring palette"
        assert "Warm tones" in screen.query_one("#detail-description", EditableText).value
        assert len(screen.query(".item-line")) == 3
        assert "Created Mar 5, 2025, 14:30" in str(screen.query_one("#detail-meta", Static).content)


@pytest.mark.asyncio
async def test_board_load_failure_shows_error(client):
    client.fail_reads = BackendUnavailable("http://backend.test/api")
    app = DetailApp(client)
    async with app.run_test() as pilot:
        await wait_for(pilot, lambda: isinstance(app.screen, BoardDetailScreen))
        screen = app.screen
        await wait_for(pilot, lambda: _status(screen).is_error)
        assert "http://backend.test/api" in _status(screen).last_message
        assert screen.board is None


@pytest.mark.asyncio
async def test_comment_failure_does_not_block_board(client):
    def broken(board_id):
        raise ApiError(500, "comments down")

    client.list_comments = broken
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        assert screen.query_one("#detail-title", EditableText).value == "Spring palette"
        assert not _status(screen).is_error


@pytest.mark.asyncio
async def test_items_commit_replaces_and_reloads(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        editor = screen.query_one(ItemsEditor)
        await editor.start()
        editor.buffer.move_up(2)
        editor.buffer.add("olive", "#808000")
        editor.query_one("#items-save", Button).press()

        await wait_for(pilot, lambda: not editor.editing)
        name, (board_id, payload) = next(c for c in client.calls if c[0] == "replace_board")
        assert board_id == "1"
        assert payload["title"] == "Spring palette"
        assert payload["dueDate"] == "2030-01-01"
        assert payload["items"] == [
            {"text": "peach", "color": "#ffcc99", "orderIndex": 0},
            {"text": "coral", "color": "#ff7f50", "orderIndex": 1},
            {"text": "sand", "orderIndex": 2},
            {"text": "olive", "color": "#808000", "orderIndex": 3},
        ]
        await wait_for(pilot, lambda: _status(screen).last_message == "Items updated.")
        assert [i.text for i in screen.board.items] == ["peach", "coral", "sand", "olive"]


@pytest.mark.asyncio
async def test_items_commit_failure_keeps_buffer(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        client.fail = ApiError(500, "database is down")
        editor = screen.query_one(ItemsEditor)
        await editor.start()
        editor.buffer.remove("1-0")
        editor.query_one("#items-save", Button).press()

        await wait_for(pilot, lambda: _status(screen).is_error)
        assert "database is down" in _status(screen).last_message
        assert editor.editing
        assert [i.text for i in editor.buffer] == ["sand", "coral"]
        assert screen.busy is False


@pytest.mark.asyncio
async def test_empty_title_rejected_before_request(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        title = screen.query_one("#detail-title", EditableText)
        title.value = "   "
        await wait_for(pilot, lambda: _status(screen).is_error)
        assert client.mutations() == []
        assert title.value == "Spring palette"


@pytest.mark.asyncio
async def test_title_change_saved(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        screen.query_one("#detail-title", EditableText).value = "Autumn"
        await wait_for(pilot, lambda: _status(screen).last_message == "Title updated.")
        assert client.boards["1"].title == "Autumn"
        assert [i.text for i in client.boards["1"].items] == ["peach", "sand", "coral"]


@pytest.mark.asyncio
async def test_invalid_due_date_rejected(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        screen.query_one(DueDateWidget).post_message(DueDateWidget.Submitted("next week"))
        await wait_for(pilot, lambda: _status(screen).is_error)
        assert _status(screen).last_message == "Due date must be YYYY-MM-DD."
        assert client.mutations() == []


@pytest.mark.asyncio
async def test_due_date_saved_and_cleared(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        due = screen.query_one(DueDateWidget)
        due.post_message(DueDateWidget.Submitted("2031-02-03"))
        await wait_for(pilot, lambda: client.boards["1"].due_date == "2031-02-03")

        due.post_message(DueDateWidget.Submitted(""))
        await wait_for(pilot, lambda: _status(screen).last_message == "Due date cleared.")
        assert client.boards["1"].due_date is None


@pytest.mark.asyncio
async def test_add_and_delete_comment(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        panel = screen.query_one(CommentsPanel)
        panel.post_message(CommentsPanel.AddRequested("see www.a.com", ""))
        await wait_for(pilot, lambda: len(screen.query(CommentRow)) == 1)
        assert client.comments["1"][0].author == "Anonymous"

        comment_id = client.comments["1"][0].id
        panel.post_message(CommentsPanel.DeleteRequested(comment_id))
        await wait_for(pilot, lambda: len(screen.query(CommentRow)) == 0)


@pytest.mark.asyncio
async def test_empty_comment_rejected(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        screen.query_one(CommentsPanel).post_message(CommentsPanel.AddRequested("   ", "Kim"))
        await wait_for(pilot, lambda: _status(screen).is_error)
        assert client.mutations() == []


@pytest.mark.asyncio
async def test_upload_and_delete_attachment(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        panel = screen.query_one(AttachmentsPanel)
        panel.post_message(AttachmentsPanel.UploadRequested("/tmp/ref.png"))
        await wait_for(pilot, lambda: len(screen.query(AttachmentRow)) == 1)

        attachment_id = client.attachments["1"][0].id
        panel.post_message(AttachmentsPanel.DeleteRequested(attachment_id))
        await wait_for(pilot, lambda: len(screen.query(AttachmentRow)) == 0)


@pytest.mark.asyncio
async def test_busy_disables_mutating_controls(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        screen = await _loaded(app, pilot)
        screen.busy = True
        await pilot.pause()
        assert screen.query_one("#items-save", Button).disabled
        assert screen.query_one("#comment-post", Button).disabled

        assert await screen.mutate("Delete", client.delete_board, "1") is False
        assert client.mutations() == []

        screen.busy = False
        await pilot.pause()
        assert not screen.query_one("#comment-post", Button).disabled


@pytest.mark.asyncio
async def test_escape_closes(client):
    app = DetailApp(client)
    async with app.run_test() as pilot:
        await _loaded(app, pilot)
        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, BoardDetailScreen)
