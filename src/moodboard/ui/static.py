"""Small clickable Static variants."""

from textual.events import Click
from textual.message import Message
from textual.widgets import Static


class IconButton(Static):
    """A one-glyph button that posts Pressed with its action name."""

    class Pressed(Message):
        def __init__(self, button: "IconButton") -> None:
            super().__init__()
            self.button = button
            self.action = button.action

        @property
        def control(self) -> "IconButton":
            return self.button

    DEFAULT_CSS = """
    IconButton {
        width: 3;
        height: 1;
        content-align: center middle;
    }
    IconButton:hover {
        background: $primary-darken-2;
    }
    IconButton:disabled {
        color: $text-disabled;
    }
    """

    ALLOW_SELECT = False

    def __init__(self, icon: str, action: str, **kwargs) -> None:
        super().__init__(icon, **kwargs)
        self.action = action

    def on_click(self, event: Click) -> None:
        event.stop()
        if not self.disabled:
            self.post_message(self.Pressed(self))
