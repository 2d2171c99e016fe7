"""Board data types and the local item edit buffer."""

from moodboard.model.board import (
    Attachment,
    Board,
    Comment,
    Item,
    board_payload,
    items_from_texts,
    items_payload,
)
from moodboard.model.items import TEMP_ID_PREFIX, EditBuffer, is_temporary_id

__all__ = [
    "Attachment",
    "Board",
    "Comment",
    "EditBuffer",
    "Item",
    "TEMP_ID_PREFIX",
    "board_payload",
    "is_temporary_id",
    "items_from_texts",
    "items_payload",
]
