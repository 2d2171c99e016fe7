"""Editable widget components."""

from moodboard.ui.edit.editable import EditableText
from moodboard.ui.edit.editors import FieldEditor, LineEditor, MarkdownEditor
from moodboard.ui.edit.viewers import LinkifiedViewer, MarkdownViewer, TextViewer

__all__ = [
    "EditableText",
    "FieldEditor",
    "LineEditor",
    "LinkifiedViewer",
    "MarkdownEditor",
    "MarkdownViewer",
    "TextViewer",
]
