"""Viewer widgets that display content and support update(value)."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Markdown, Static

from moodboard.linkify import linkify, to_text


class TextViewer(Static):
    """Plain text viewer."""


class LinkifiedViewer(Static):
    """Text viewer that turns URLs into clickable links."""

    def update(self, value: str) -> None:
        super().update(to_text(linkify(value)))


class MarkdownViewer(Container):
    """Markdown viewer container."""

    DEFAULT_CSS = """
    MarkdownViewer {
        height: auto;
    }
    """

    def __init__(self, value: str = "", parser_factory=None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._value = value
        self._parser_factory = parser_factory

    def compose(self) -> ComposeResult:
        if self._parser_factory:
            yield Markdown(self._value, parser_factory=self._parser_factory)
        else:
            yield Markdown(self._value)

    def update(self, value: str) -> None:
        """Update the displayed markdown."""
        self._value = value
        for markdown in self.query(Markdown):
            markdown.update(value)
