"""Textual UI for moodboard."""

from moodboard.ui.app import MoodboardApp
from moodboard.ui.boards import BoardListScreen
from moodboard.ui.detail import BoardDetailScreen
from moodboard.ui.items import ItemsEditor

__all__ = [
    "BoardDetailScreen",
    "BoardListScreen",
    "ItemsEditor",
    "MoodboardApp",
]
