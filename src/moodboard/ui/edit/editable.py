"""Click-to-edit container pairing a viewer with a FieldEditor."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import ContentSwitcher

from moodboard.ui.edit.editors import FieldEditor


class EditableText(Container):
    """A value shown by a viewer and edited in place.

    Clicking opens the editor. A save that changes the value posts Changed
    for the owner to persist; ``reset`` puts a value back quietly after a
    reload or a rejected save.
    """

    DEFAULT_CSS = """
    EditableText, EditableText > ContentSwitcher {
        width: 100%;
        height: auto;
    }
    EditableText #view, EditableText #edit {
        width: 100%;
        height: auto;
    }
    EditableText.-placeholder #view {
        color: $text-muted;
        text-style: italic;
    }
    """

    class Changed(Message):
        """A saved edit changed the value."""

        def __init__(self, editable: EditableText, old_value: str, new_value: str) -> None:
            super().__init__()
            self.editable = editable
            self.old_value = old_value
            self.new_value = new_value

        @property
        def control(self) -> EditableText:
            return self.editable

    editing: reactive[bool] = reactive(False, init=False)

    def __init__(self, value: str, viewer: Widget, editor: FieldEditor, *, placeholder: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._value = value.strip()
        self._viewer = viewer
        self._editor = editor
        self._placeholder = placeholder

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        old_value, self._value = self._value, new_value.strip()
        if self._value != old_value:
            self._show()
            self.post_message(self.Changed(self, old_value, self._value))

    def reset(self, value: str) -> None:
        """Show ``value`` without posting Changed."""
        self._value = value.strip()
        self._show()

    def _show(self) -> None:
        self._viewer.update(self._value or self._placeholder)
        self.set_class(not self._value, "-placeholder")

    def compose(self) -> ComposeResult:
        self._viewer.id = "view"
        self._editor.id = "edit"
        with ContentSwitcher(initial="view"):
            yield self._viewer
            yield self._editor

    def on_mount(self) -> None:
        self._show()

    def watch_editing(self, editing: bool) -> None:
        self.query_one(ContentSwitcher).current = "edit" if editing else "view"

    def start_edit(self) -> None:
        if not self.editing:
            self.editing = True
            self._editor.begin(self._value)

    def on_click(self, event) -> None:
        if not self.disabled and not self.editing:
            event.stop()
            self.start_edit()

    def on_field_editor_saved(self, event: FieldEditor.Saved) -> None:
        event.stop()
        self.editing = False
        self.value = event.value

    def on_field_editor_cancelled(self, event: FieldEditor.Cancelled) -> None:
        event.stop()
        self.editing = False
