"""Color picker for board items."""

from __future__ import annotations

from rich.color import ColorParseError
from rich.style import Style
from rich.text import Text
from textual.message import Message
from textual.widgets import Static

from moodboard.ui.constants import ICON_NO_COLOR, ICON_PALETTE, ICON_SWATCH
from moodboard.ui.menu import ContextMenu, MenuItem

COLORS: dict[str, str] = {
    "red": "#ef4444",
    "orange": "#f97316",
    "amber": "#f59e0b",
    "yellow": "#eab308",
    "lime": "#84cc16",
    "green": "#22c55e",
    "teal": "#14b8a6",
    "cyan": "#06b6d4",
    "blue": "#3b82f6",
    "indigo": "#6366f1",
    "purple": "#a855f7",
    "pink": "#ec4899",
    "brown": "#92400e",
    "grey": "#6b7280",
    "black": "#000000",
    "white": "#ffffff",
}


def swatch_style(color: str | None) -> Style | None:
    """A rich style painting ``color``, or None if rich can't parse it."""
    if not color:
        return None
    try:
        return Style(color=color)
    except ColorParseError:
        return None


def swatch(color: str | None) -> Text:
    """A small block in the given color, or a placeholder glyph."""
    style = swatch_style(color)
    if style is None:
        return Text(ICON_NO_COLOR.ljust(len(ICON_SWATCH)))
    return Text(ICON_SWATCH, style=style)


class ColorSwatch(MenuItem):
    """A menu item showing its color next to the name."""

    def __init__(self, name: str, hex_val: str) -> None:
        super().__init__(f"{ICON_SWATCH} {name}", item_id=hex_val)
        self.update(Text.assemble(swatch(hex_val), f" {name}"))


def build_color_menu() -> list[MenuItem]:
    """A "no color" entry followed by every palette color."""
    items: list[MenuItem] = [MenuItem(f"{ICON_NO_COLOR} none", item_id="none")]
    for name, hex_val in COLORS.items():
        items.append(ColorSwatch(name, hex_val))
    return items


class ColorButton(Static):
    """Shows the current color and opens the picker on click."""

    class ColorSelected(Message):
        """Posted when a color is selected. ``color`` is None for no color."""

        def __init__(self, button: ColorButton, color: str | None) -> None:
            super().__init__()
            self.button = button
            self.color = color

        @property
        def control(self) -> ColorButton:
            return self.button

    DEFAULT_CSS = """
    ColorButton {
        width: 3;
        height: 1;
    }
    ColorButton:hover {
        background: $primary-darken-2;
    }
    """

    def __init__(self, color: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._color = color

    @property
    def color(self) -> str | None:
        return self._color

    @color.setter
    def color(self, value: str | None) -> None:
        self._color = value or None
        self._refresh_label()

    def on_mount(self) -> None:
        self._refresh_label()

    def _refresh_label(self) -> None:
        self.update(swatch(self._color) if self._color else ICON_PALETTE)

    def on_click(self, event) -> None:
        event.stop()
        if self.disabled:
            return
        menu = ContextMenu(build_color_menu(), event.screen_x, event.screen_y)
        self.app.push_screen(menu, self._on_menu_closed)

    def _on_menu_closed(self, item: MenuItem | None) -> None:
        if item is None:
            return
        self.color = None if item.item_id == "none" else item.item_id
        self.post_message(self.ColorSelected(self, self._color))
