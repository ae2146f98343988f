# File: site_harvest/report/__init__.py
"""site_harvest.report: persistence of crawl results."""

from site_harvest.report.json_report import dump_pages, load_pages, save_pages

__all__ = ["dump_pages", "load_pages", "save_pages"]
