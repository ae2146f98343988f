# site_harvest/report/json_report.py

"""
JSON persistence for SiteHarvest results.

Pages are written as an indented JSON array and can be read back into
:class:`~site_harvest.crawler.models.Page` objects.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from site_harvest.crawler.models import Page


def dump_pages(pages: Iterable[Page], *, pretty: bool = True) -> str:
    """Serialise *pages* to a JSON array string."""
    return json.dumps(
        [page.to_dict() for page in pages],
        ensure_ascii=False,
        indent=2 if pretty else None,
    )


def save_pages(pages: Iterable[Page], output_path: Path | str) -> Path:
    """
    Write *pages* to *output_path* as an indented JSON array.

    :param pages: crawl results
    :param output_path: target file, parent directories are created
    :return: Path of the written file

    Example:
    ```python
    from site_harvest.report.json_report import save_pages
    saved = save_pages(pages, 'out/output.json')
    print(f"Results saved to {saved}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_pages(pages) + "\n", encoding="utf-8")
    return output


def load_pages(input_path: Path | str) -> List[Page]:
    """Read a file written by :func:`save_pages`."""
    data = json.loads(Path(input_path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of pages, got {type(data).__name__}")
    return [Page.from_dict(item) for item in data]


__all__ = ["dump_pages", "save_pages", "load_pages"]
