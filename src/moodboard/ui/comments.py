"""Comment list and form for the board detail screen."""

from __future__ import annotations

from collections.abc import Iterable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, Static

from moodboard.format import format_date
from moodboard.linkify import linkify, to_text
from moodboard.model.board import Comment
from moodboard.ui.confirm import ConfirmButton


class CommentRow(Vertical):
    """Author, date and linkified content of one comment."""

    DEFAULT_CSS = """
    CommentRow {
        height: auto;
        margin-bottom: 1;
    }
    CommentRow .comment-head {
        height: 1;
    }
    CommentRow .comment-meta {
        width: 1fr;
        color: $text-muted;
    }
    """

    def __init__(self, comment: Comment) -> None:
        super().__init__(classes="comment")
        self.comment = comment

    def compose(self) -> ComposeResult:
        with Horizontal(classes="comment-head"):
            yield Static(f"{self.comment.author} · {format_date(self.comment.created_at)}", classes="comment-meta")
            yield ConfirmButton(classes="mutating")
        yield Static(to_text(linkify(self.comment.content)), classes="comment-content")


class CommentsPanel(Vertical):
    """Comments on a board plus a form to add one."""

    class AddRequested(Message):
        def __init__(self, content: str, author: str) -> None:
            super().__init__()
            self.content = content
            self.author = author

    class DeleteRequested(Message):
        def __init__(self, comment_id: str) -> None:
            super().__init__()
            self.comment_id = comment_id

    DEFAULT_CSS = """
    CommentsPanel {
        height: auto;
    }
    CommentsPanel #comment-list {
        height: auto;
    }
    CommentsPanel .comment-form {
        height: auto;
    }
    CommentsPanel #comment-author {
        width: 24;
    }
    CommentsPanel #comment-content {
        width: 1fr;
    }
    """

    def __init__(self, comments: Iterable[Comment] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self._comments = list(comments)

    def compose(self) -> ComposeResult:
        yield Static(self._heading(), id="comments-heading", classes="section-heading")
        yield Vertical(*self._rows(), id="comment-list")
        with Horizontal(classes="comment-form"):
            yield Input(placeholder="Author (optional)", id="comment-author")
            yield Input(placeholder="Write a comment", id="comment-content")
            yield Button("Post", id="comment-post", classes="mutating")

    def _heading(self) -> str:
        return f"Comments ({len(self._comments)})"

    def _rows(self) -> list[CommentRow]:
        return [CommentRow(c) for c in self._comments]

    async def set_comments(self, comments: Iterable[Comment]) -> None:
        self._comments = list(comments)
        self.query_one("#comments-heading", Static).update(self._heading())
        comment_list = self.query_one("#comment-list", Vertical)
        await comment_list.remove_children()
        await comment_list.mount_all(self._rows())

    def clear_form(self) -> None:
        self.query_one("#comment-author", Input).value = ""
        self.query_one("#comment-content", Input).value = ""

    def _request_add(self) -> None:
        self.post_message(
            self.AddRequested(
                self.query_one("#comment-content", Input).value,
                self.query_one("#comment-author", Input).value,
            )
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "comment-post":
            event.stop()
            self._request_add()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "comment-content":
            event.stop()
            self._request_add()

    def on_confirm_button_confirmed(self, event: ConfirmButton.Confirmed) -> None:
        event.stop()
        for node in event.control.ancestors:
            if isinstance(node, CommentRow):
                self.post_message(self.DeleteRequested(node.comment.id))
                return
