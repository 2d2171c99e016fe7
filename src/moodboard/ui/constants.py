"""Icons used across the moodboard UI."""

ICON_BACK = "⬅"
ICON_DELETE = "\U0001f5d1"
ICON_CANCEL = "\U0001f519"
ICON_EDIT = "✏"
ICON_OPEN = "↗"
ICON_PALETTE = "\U0001f3a8"
ICON_MOVE_UP = "▲"
ICON_MOVE_DOWN = "▼"
ICON_NO_COLOR = "∅"
ICON_SWATCH = "██"
