# === FILE: site_harvest/interactive_cli.py ===
"""
Interactive entry of CSS selectors (``name=selector`` per line).
"""
from __future__ import annotations

from typing import Callable, Dict

import click

PromptT = Callable[..., str]
EchoT = Callable[[str], None]


def prompt_selectors(prompt: PromptT = click.prompt, echo: EchoT = click.echo) -> Dict[str, str]:
    """Ask for selectors until an empty line is entered."""
    selectors: Dict[str, str] = {}

    echo("")
    echo("Interactive CSS Selector Configuration")
    echo("=====================================")
    echo("Enter CSS selectors (press Enter without input to finish)")
    echo("Format: name=selector (e.g., title=h1)")
    echo("")

    while True:
        line = prompt("CSS Selector", default="", show_default=False).strip()
        if not line:
            break

        name, sep, selector = line.partition("=")
        if not sep:
            echo("Invalid format. Please use: name=selector")
            continue
        name, selector = name.strip(), selector.strip()
        if not name or not selector:
            echo("Name and selector cannot be empty")
            continue

        selectors[name] = selector
        echo(f"Added: {name} = {selector}")

    return selectors


__all__ = ["prompt_selectors"]
