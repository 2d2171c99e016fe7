"""Tests for the markdown bare-URL plugin."""

from moodboard.ui.markdown import moodboard_parser_factory


def _links(source: str) -> list[tuple[str, str]]:
    tokens = moodboard_parser_factory().parse(source)
    links = []
    for token in tokens:
        if token.type != "inline":
            continue
        children = token.children or []
        for i, child in enumerate(children):
            if child.type == "link_open":
                links.append((child.attrGet("href"), children[i + 1].content))
    return links


def test_bare_www_url_links_to_https():
    assert _links("see www.example.com today") == [("https://www.example.com", "www.example.com")]


def test_bare_http_url():
    assert _links("docs at http://a.com/x") == [("http://a.com/x", "http://a.com/x")]


def test_existing_links_untouched():
    assert _links("[site](http://a.com)") == [("http://a.com", "site")]


def test_plain_text_has_no_links():
    assert _links("# Heading\n\nnothing to see") == []


def test_render_keeps_surrounding_text():
    html = moodboard_parser_factory().render("go www.a.com now")
    assert '<a href="https://www.a.com">www.a.com</a>' in html
    assert html.startswith("<p>go ")
    assert "now</p>" in html
