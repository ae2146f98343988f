# site_harvest/parser/__init__.py
"""site_harvest.parser: structural and selector-based HTML extraction."""
