"""Markdown-it plugins for moodboard."""

from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.token import Token

from moodboard.linkify import LinkSegment, linkify


def bare_url_plugin(md: MarkdownIt) -> None:
    """Core rule turning bare URLs in text into links.

    Uses the same detection as item and comment text, so ``www.`` URLs
    link to https and text inside existing links is left alone.
    """

    def replace_bare_urls(state):
        for token in state.tokens:
            if token.type != "inline" or not token.children:
                continue
            new_children = []
            inside_link = 0
            for child in token.children:
                if child.type == "link_open":
                    inside_link += 1
                elif child.type == "link_close":
                    inside_link -= 1

                if child.type != "text" or inside_link > 0:
                    new_children.append(child)
                    continue

                new_children.extend(_split_urls(child.content, child.level))

            token.children = new_children

    md.core.ruler.push("bare_url", replace_bare_urls)


def _split_urls(text: str, level: int) -> list[Token]:
    """Split text into text and link tokens."""
    tokens = []
    for segment in linkify(text):
        if not isinstance(segment, LinkSegment):
            if segment.value:
                tokens.append(_text_token(segment.value, level))
            continue

        link_open = Token("link_open", "a", 1)
        link_open.attrs = {"href": segment.href}
        link_open.level = level
        tokens.append(link_open)

        tokens.append(_text_token(segment.display, level + 1))

        link_close = Token("link_close", "a", -1)
        link_close.level = level
        tokens.append(link_close)

    return tokens or [_text_token(text, level)]


def _text_token(content: str, level: int) -> Token:
    """Create a text token."""
    tok = Token("text", "", 0)
    tok.content = content
    tok.level = level
    return tok


def moodboard_parser_factory():
    """Markdown parser for board descriptions, with bare URLs linked."""
    md = MarkdownIt("gfm-like", options_update={"linkify": False})
    md.use(bare_url_plugin)
    return md
