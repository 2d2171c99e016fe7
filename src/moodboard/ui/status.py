"""Status line for action results."""

from textual.widgets import Static


class StatusBar(Static):
    """One-line message area. Errors get the error style."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        width: 100%;
        height: 1;
        padding: 0 1;
        color: $primary;
    }
    StatusBar.-error {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.last_message = ""
        self.is_error = False

    def show(self, message: str, error: bool = False) -> None:
        self.last_message = message
        self.is_error = error
        self.update(message)
        self.set_class(error, "-error")
