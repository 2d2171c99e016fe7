"""Data types for boards and their comments and attachments.

The backend speaks camelCase JSON; every type reads it through
``from_dict`` and ignores keys it does not know about.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from moodboard.errors import ValidationError
from moodboard.format import is_due_date


@dataclass
class Item:
    """A single text + color entry on a board."""

    id: str
    text: str = ""
    color: str | None = None
    order_index: int | None = None
    image_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(
            id=str(data.get("id", "")),
            text=data.get("text") or "",
            color=data.get("color") or None,
            order_index=data.get("orderIndex"),
            image_url=data.get("imageUrl") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "color": self.color,
            "orderIndex": self.order_index,
            "imageUrl": self.image_url,
        }


def _sort_items(items: list[Item]) -> list[Item]:
    """Order by order_index; items without one keep their received order at the end."""
    indexed = [i for i in items if i.order_index is not None]
    unindexed = [i for i in items if i.order_index is None]
    return sorted(indexed, key=lambda i: i.order_index) + unindexed


@dataclass
class Board:
    """A moodboard as returned by the backend."""

    id: str
    title: str = ""
    description: str | None = None
    items: list[Item] = field(default_factory=list)
    due_date: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Board:
        items = [Item.from_dict(i) for i in data.get("items") or []]
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title") or "",
            description=data.get("description"),
            items=_sort_items(items),
            due_date=data.get("dueDate") or None,
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Board in the backend's JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "items": [i.to_dict() for i in self.items],
        }

    def payload(self, **changes) -> dict[str, Any]:
        """Replace-all body for this board, with any field overridden.

        Accepts ``title``, ``description``, ``due_date`` and ``items``.
        """
        return board_payload(
            changes.get("title", self.title),
            changes.get("description", self.description),
            changes.get("due_date", self.due_date),
            changes.get("items", self.items),
        )


@dataclass
class Comment:
    """A comment attached to a board."""

    id: str
    moodboard_id: str = ""
    content: str = ""
    author: str = ""
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Comment:
        return cls(
            id=str(data.get("id", "")),
            moodboard_id=str(data.get("moodboardId") or ""),
            content=data.get("content") or "",
            author=data.get("author") or "",
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "moodboardId": self.moodboard_id,
            "content": self.content,
            "author": self.author,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Attachment:
    """An uploaded file attached to a board."""

    id: str
    moodboard_id: str = ""
    file_name: str = ""
    file_url: str = ""
    file_size: int = 0
    content_type: str | None = None
    uploaded_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attachment:
        return cls(
            id=str(data.get("id", "")),
            moodboard_id=str(data.get("moodboardId") or ""),
            file_name=data.get("fileName") or "",
            file_url=data.get("fileUrl") or "",
            file_size=int(data.get("fileSize") or 0),
            content_type=data.get("contentType"),
            uploaded_at=data.get("uploadedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "moodboardId": self.moodboard_id,
            "fileName": self.file_name,
            "fileUrl": self.file_url,
            "fileSize": self.file_size,
            "contentType": self.content_type,
            "uploadedAt": self.uploaded_at,
        }


def items_payload(items: Iterable[Item]) -> list[dict[str, Any]]:
    """Wire form of an item sequence.

    ``orderIndex`` is the 0-based position, empty colors are omitted and
    ids are dropped so the backend assigns fresh ones.
    """
    result = []
    for index, item in enumerate(items):
        entry: dict[str, Any] = {"text": item.text}
        if item.color:
            entry["color"] = item.color
        entry["orderIndex"] = index
        result.append(entry)
    return result


def board_payload(
    title: str,
    description: str | None,
    due_date: str | None,
    items: Iterable[Item],
) -> dict[str, Any]:
    """Build a create/replace body.

    Raises ValidationError on an empty title or a due date that is not
    ``YYYY-MM-DD``. An empty due date clears it.
    """
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title is required.")
    due_date = (due_date or "").strip()
    if due_date and not is_due_date(due_date):
        raise ValidationError("Due date must be YYYY-MM-DD.")
    return {
        "title": title,
        "description": (description or "").strip(),
        "dueDate": due_date or None,
        "items": items_payload(items),
    }


def items_from_texts(texts: Iterable[str]) -> list[Item]:
    """Items from raw lines of text: each trimmed, blanks dropped, in order."""
    items = []
    for text in texts:
        text = text.strip()
        if text:
            items.append(Item(id="", text=text, order_index=len(items)))
    return items
