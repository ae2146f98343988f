# File: site_harvest/parser/selector_parser.py
"""site_harvest.parser.selector_parser: CSS-selector field extraction."""

from __future__ import annotations

from typing import Dict, List, Mapping

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from site_harvest.logger import get_logger
from site_harvest.parser.html_parser import make_soup

logger = get_logger("parser")

FIELD_SEPARATOR = " | "


def select_texts(soup: BeautifulSoup, selector: str) -> List[str]:
    """Stripped, non-empty text of every node matching *selector*."""
    texts: List[str] = []
    for node in soup.select(selector):
        text = node.get_text().strip()
        if text:
            texts.append(text)
    return texts


def extract_fields(markup: str, selectors: Mapping[str, str]) -> Dict[str, str]:
    """Apply each named selector to *markup*.

    Args:
        markup: raw HTML.
        selectors: field name -> CSS selector.

    Returns:
        Field name -> matched texts joined with ``" | "``. Fields that matched
        nothing are not in the result.

    Example:
    ```python
    extract_fields("<h1>A</h1><h1>B</h1>", {"heads": "h1"})
    # {'heads': 'A | B'}
    ```
    """
    if not selectors:
        return {}
    soup = make_soup(markup)
    if soup is None:
        return {}

    fields: Dict[str, str] = {}
    for name, selector in selectors.items():
        try:
            texts = select_texts(soup, selector)
        except SelectorSyntaxError as exc:
            logger.warning("Bad selector for field %r (%s): %s", name, selector, exc)
            continue
        if texts:
            fields[name] = FIELD_SEPARATOR.join(texts)
    return fields


__all__ = ["FIELD_SEPARATOR", "extract_fields", "select_texts"]
