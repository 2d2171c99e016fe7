"""Compact inline confirmation widget."""

from textual.message import Message
from textual.widgets import Static

from moodboard.ui.constants import ICON_CANCEL, ICON_DELETE
from moodboard.ui.menu import ContextMenu, MenuItem


class ConfirmButton(Static):
    """An icon that asks before acting.

    Clicking opens a two-item menu (cancel, confirm). Posts Confirmed only
    when the confirm item is chosen.
    """

    class Confirmed(Message):
        """Emitted when the action is confirmed."""

        @property
        def control(self) -> "ConfirmButton":
            return self._sender

    DEFAULT_CSS = """
    ConfirmButton {
        width: 3;
        height: 1;
    }
    ConfirmButton:hover {
        background: $error;
    }
    ConfirmButton:disabled {
        color: $text-disabled;
    }
    """

    def __init__(self, icon: str = ICON_DELETE, **kwargs) -> None:
        super().__init__(icon, **kwargs)

    def on_click(self, event) -> None:
        event.stop()
        if self.disabled:
            return
        menu = ContextMenu(
            [
                MenuItem(f"{ICON_CANCEL} Cancel", item_id="cancel"),
                MenuItem(f"{ICON_DELETE} Delete", item_id="confirm"),
            ],
            event.screen_x,
            event.screen_y,
        )
        self.app.push_screen(menu, self._on_menu_closed)

    def _on_menu_closed(self, item: MenuItem | None) -> None:
        if item and item.item_id == "confirm":
            self.post_message(self.Confirmed())
