"""Due date field with relative label."""

from __future__ import annotations

from datetime import date

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input, Static

from moodboard.format import date_diff, parse_due


class DueDateWidget(Horizontal):
    """ISO date input, a save button and a compact "5d" / "-3d" label.

    Posts Submitted with the trimmed input on save. Empty means no due
    date; validating the format is left to the receiver.
    """

    class Submitted(Message):
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    DEFAULT_CSS = """
    DueDateWidget {
        width: 100%;
        height: auto;
    }
    DueDateWidget Input {
        width: 16;
    }
    DueDateWidget #due-label {
        width: auto;
        padding: 1 1;
    }
    DueDateWidget #due-label.overdue {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, due: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._due = due

    def compose(self) -> ComposeResult:
        yield Input(self._due or "", placeholder="YYYY-MM-DD", id="due-input")
        yield Button("Set due", id="due-save", classes="mutating")
        yield Static("", id="due-label")

    def on_mount(self) -> None:
        self._update_label()

    def set_due(self, due: str | None) -> None:
        self._due = due
        self.query_one("#due-input", Input).value = due or ""
        self._update_label()

    def _update_label(self, today: date | None = None) -> None:
        label = self.query_one("#due-label", Static)
        due = parse_due(self._due)
        if due is None:
            label.update("")
            label.set_class(False, "overdue")
            return
        today = today or date.today()
        label.update(date_diff(due, today))
        label.set_class(due <= today, "overdue")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "due-save":
            return
        event.stop()
        self.post_message(self.Submitted(self.query_one("#due-input", Input).value.strip()))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value.strip()))
