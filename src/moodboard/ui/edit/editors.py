"""In-place field editors used by EditableText."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.message import Message
from textual.widgets import TextArea

if TYPE_CHECKING:
    from textual.events import Key


class FieldEditor(TextArea):
    """A TextArea that ends an in-place edit with Saved or Cancelled.

    Escape cancels. Enter saves single-line fields; blur saves any field.
    The saved text is trimmed, and single-line fields fold newlines into
    spaces. A ``required`` field that ends up blank is cancelled instead,
    so the previous value stays.
    """

    MULTILINE = False

    class Saved(Message):
        """The edit ended with a value to keep."""

        def __init__(self, editor: FieldEditor, value: str) -> None:
            super().__init__()
            self.editor = editor
            self.value = value

        @property
        def control(self) -> FieldEditor:
            return self.editor

    class Cancelled(Message):
        """The edit ended without a value."""

        def __init__(self, editor: FieldEditor) -> None:
            super().__init__()
            self.editor = editor

        @property
        def control(self) -> FieldEditor:
            return self.editor

    def __init__(self, *, required: bool = False, **kwargs) -> None:
        kwargs.setdefault("compact", True)
        super().__init__(**kwargs)
        self.required = required
        self._open = False

    def begin(self, value: str) -> None:
        """Load ``value`` and take focus with the cursor at the end."""
        self._open = True
        self.load_text(value)
        self.move_cursor(self.document.end)
        self.focus()

    def result(self) -> str | None:
        """The text to save, or None when the edit must not be kept."""
        text = self.text.strip() if self.MULTILINE else " ".join(self.text.split())
        if self.required and not text:
            return None
        return text

    def close(self, save: bool) -> None:
        if not self._open:
            return
        self._open = False
        value = self.result() if save else None
        if value is None:
            self.post_message(self.Cancelled(self))
        else:
            self.post_message(self.Saved(self, value))

    async def _on_key(self, event: Key) -> None:
        if event.key == "escape" or (event.key == "enter" and not self.MULTILINE):
            event.prevent_default()
            event.stop()
            self.close(save=event.key == "enter")
            return
        await super()._on_key(event)

    def on_blur(self) -> None:
        self.close(save=True)


class LineEditor(FieldEditor):
    """Single-line field: titles and item text."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("soft_wrap", True)
        super().__init__(**kwargs)


class MarkdownEditor(FieldEditor):
    """Multi-line markdown field. Enter is a newline; leaving the field saves."""

    MULTILINE = True

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("language", "markdown")
        super().__init__(**kwargs)
