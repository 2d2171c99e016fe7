"""Split free text into plain and link segments."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rich.style import Style
from rich.text import Text

_URL_RE = re.compile(r"https?://\S+|www\.\S+", re.IGNORECASE)

LINK_STYLE = Style(color="#2563eb", underline=True)


def link_style(href: str) -> Style:
    """Style for a clickable link to href."""
    return LINK_STYLE + Style(link=href)


@dataclass(frozen=True)
class TextSegment:
    """Plain text, kept verbatim."""

    value: str


@dataclass(frozen=True)
class LinkSegment:
    """A URL found in the text. ``display`` is the text as written."""

    display: str
    href: str


Segment = TextSegment | LinkSegment


def _href_for(url: str) -> str:
    if url[:4].lower() == "www.":
        return f"https://{url}"
    return url


def linkify(text: str) -> list[Segment]:
    """Split text into text and link segments, in order.

    URLs start with ``http://``, ``https://`` or ``www.`` and run to the
    next whitespace. Trailing punctuation stays part of the URL. Text
    without URLs, including the empty string, comes back as a single
    text segment.
    """
    segments: list[Segment] = []
    last_end = 0

    for match in _URL_RE.finditer(text):
        start, end = match.start(), match.end()
        if start > last_end:
            segments.append(TextSegment(text[last_end:start]))
        url = match.group(0)
        segments.append(LinkSegment(display=url, href=_href_for(url)))
        last_end = end

    if not segments:
        return [TextSegment(text)]

    if last_end < len(text):
        segments.append(TextSegment(text[last_end:]))

    return segments


def to_text(segments: list[Segment], style: str | Style = "") -> Text:
    """Render segments as rich Text with clickable links."""
    result = Text(style=style)
    for segment in segments:
        if isinstance(segment, LinkSegment):
            result.append(segment.display, style=link_style(segment.href))
        else:
            result.append(segment.value)
    return result
