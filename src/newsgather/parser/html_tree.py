"""Permissive HTML parsing.

This is the only place that deals with malformed markup. Everything
downstream works on the BeautifulSoup tree it returns.
"""

from bs4 import BeautifulSoup, Tag

from newsgather.exceptions import ParseFailure


def parse_html(markup: str) -> BeautifulSoup:
    """Parse markup into a tree of owned nodes.

    Args:
        markup: Raw page HTML, possibly malformed.

    Returns:
        BeautifulSoup document tree.

    Raises:
        ParseFailure: If the markup does not contain a single element.

    """
    soup = BeautifulSoup(markup or "", "html.parser")
    if soup.find(True) is None:
        raise ParseFailure("Markup does not contain any HTML element")
    return soup


def word_count(element: Tag) -> int:
    """Count whitespace separated words of the visible text under element."""
    return len(element.get_text(" ", strip=True).split())


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse internal whitespace runs to single spaces."""
    return " ".join(text.split())
