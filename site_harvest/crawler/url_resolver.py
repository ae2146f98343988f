# site_harvest/crawler/url_resolver.py
"""
Link resolution for SiteHarvest: relative links are joined to the page URL,
absolute links survive only when they stay on the page's host.
"""
from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import SplitResult, urljoin, urlsplit

__all__ = ("resolve_link", "same_host")


def _host_key(parts: SplitResult) -> Tuple[Optional[str], Optional[int]]:
    # hostname drops any "user:pass@" prefix; .port raises ValueError when malformed
    return parts.hostname, parts.port


def same_host(url_a: str, url_b: str) -> bool:
    """Compare host and port only; scheme and credentials are ignored."""
    try:
        return _host_key(urlsplit(url_a)) == _host_key(urlsplit(url_b))
    except ValueError:
        return False


def resolve_link(base_url: str, link: str) -> Optional[str]:
    """
    Turn *link* found on *base_url* into an absolute URL.

    Returns ``None`` for links to another host and for strings that cannot be
    parsed as URLs.
    """
    try:
        parsed = urlsplit(link)
    except ValueError:
        return None

    # mailto:, javascript: and friends have a scheme but no host, so they fail here too
    if parsed.scheme:
        return link if same_host(link, base_url) else None

    try:
        absolute = urljoin(base_url, link)
    except ValueError:
        return None
    # protocol-relative links ("//host/path") may still point elsewhere
    return absolute if same_host(absolute, base_url) else None
