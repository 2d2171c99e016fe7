"""Main Textual application for moodboard."""

from textual.app import App

from moodboard.client import MoodboardClient
from moodboard.config import Config
from moodboard.ui.boards import BoardListScreen


class MoodboardApp(App):
    """Terminal client for a moodboard backend."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "moodboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, config: Config, client: MoodboardClient | None = None):
        super().__init__()
        self.config = config
        self.client = client or MoodboardClient.from_config(config)
        self.sub_title = config.api_base

    def on_mount(self) -> None:
        self.push_screen(BoardListScreen(self.client))
