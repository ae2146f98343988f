# === FILE: site_harvest/parser/html_parser.py ===
"""Structural HTML extraction for SiteHarvest.

:func:`parse_html` walks the document once, in order, and pulls out three
things:

* title: first text node of the first ``<title>``, or ``""``.
* content: leading text of every ``<p>`` and ``<h1>`` to ``<h6>``, one per line.
* links: every ``href`` on ``<a>`` elements, raw, duplicates kept.

Link resolution and deduplication happen later in the crawler. Markup that the
parser rejects produces an empty :class:`ParsedPage` instead of an error, so
the page still shows up in the results.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from site_harvest.logger import get_logger

__all__: Sequence[str] = ("ParsedPage", "parse_html", "make_soup")

logger = get_logger("parser")

_TEXT_TAGS = frozenset({"p", "h1", "h2", "h3", "h4", "h5", "h6"})


@dataclass(slots=True)
class ParsedPage:
    """Title, body text and raw outbound links of one document."""

    title: str = ""
    content: str = ""
    links: list[str] = field(default_factory=list)


def make_soup(markup: str) -> Optional[BeautifulSoup]:
    """Parse *markup*, or return ``None`` (with a warning) if the parser gives up."""
    try:
        return BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse markup: %s", exc)
        return None


def _leading_text(tag: Tag) -> str:
    """Text of the element's first child, if that child is a text node."""
    first = next(iter(tag.children), None)
    if isinstance(first, NavigableString) and not isinstance(first, PreformattedString):
        return first.strip()
    return ""


def parse_html(markup: str) -> ParsedPage:
    soup = make_soup(markup)
    page = ParsedPage()
    if soup is None:
        return page

    title_found = False
    lines: list[str] = []
    for tag in soup.find_all(True):
        name = tag.name
        if name == "title" and not title_found:
            title_found = True
            page.title = _leading_text(tag)
        elif name == "a":
            href = tag.get("href")
            if href is not None:
                page.links.append(href if isinstance(href, str) else " ".join(href))
        elif name in _TEXT_TAGS:
            text = _leading_text(tag)
            if text:
                lines.append(text)

    page.content = "".join(f"{line}\n" for line in lines)
    return page
