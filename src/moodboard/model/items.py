"""Local edit buffer for a board's ordered items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Any

from moodboard.model.board import Item, items_payload

TEMP_ID_PREFIX = "temp-"


def is_temporary_id(item_id: str) -> bool:
    """True for ids minted by an EditBuffer rather than the backend."""
    return item_id.startswith(TEMP_ID_PREFIX)


class EditBuffer:
    """An ordered list of items staged in memory until committed.

    The buffer holds copies of the items it was created from, so edits
    never touch the last-loaded board. Committing and cancelling are the
    caller's job: send ``payload()`` as a replace, or drop the buffer.
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: list[Item] = [replace(item) for item in items]
        self._next_temp = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    @property
    def items(self) -> list[Item]:
        """A snapshot of the buffer contents."""
        return list(self._items)

    def index_of(self, item_id: str) -> int | None:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return None

    def _new_temp_id(self) -> str:
        existing = {item.id for item in self._items}
        while True:
            self._next_temp += 1
            candidate = f"{TEMP_ID_PREFIX}{self._next_temp}"
            if candidate not in existing:
                return candidate

    def add(self, text: str, color: str | None = None) -> Item | None:
        """Append a new item. Blank text is ignored and returns None."""
        text = text.strip()
        if not text:
            return None
        item = Item(
            id=self._new_temp_id(),
            text=text,
            color=color or None,
            order_index=len(self._items),
        )
        self._items.append(item)
        return item

    def remove(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def move_up(self, index: int) -> None:
        if 0 < index < len(self._items):
            self._swap(index - 1, index)

    def move_down(self, index: int) -> None:
        if 0 <= index < len(self._items) - 1:
            self._swap(index, index + 1)

    def _swap(self, a: int, b: int) -> None:
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def set_text(self, item_id: str, text: str) -> None:
        """Replace an item's text. Blank text is ignored, as in ``add``."""
        text = text.strip()
        index = self.index_of(item_id)
        if index is not None and text:
            self._items[index].text = text

    def set_color(self, item_id: str, color: str | None) -> None:
        index = self.index_of(item_id)
        if index is not None:
            self._items[index].color = color or None

    def payload(self) -> list[dict[str, Any]]:
        """Items as they are sent on commit, ordered 0..n-1."""
        return items_payload(self._items)
