# === FILE: site_harvest/config.py ===
"""
Loading and validation of the SiteHarvest crawler configuration.
Pydantic describes the schema; YAML and JSON files are both accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from site_harvest.exceptions import ConfigError

__all__ = (
    "CrawlerConfig",
    "DEFAULT_SELECTORS",
    "load_config",
    "parse_selectors",
)

DEFAULT_SELECTORS: Dict[str, str] = {
    "headings": "h1, h2, h3",
    "paragraphs": "p",
    "links": "a",
}


class CrawlerConfig(BaseModel):
    """Settings for a single crawl run. Immutable once built."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(2, ge=0, description="Maximum number of link hops from the seed.")
    concurrency: int = Field(5, ge=1, description="Maximum simultaneous fetches.")
    user_agent: str = Field("SiteHarvest/1.0", min_length=1, description="User-Agent header.")
    timeout: float = Field(10.0, gt=0, description="Per-request timeout (seconds).")
    css_selectors: Dict[str, str] = Field(
        default_factory=dict, description="Field name -> CSS selector."
    )

    @field_validator("css_selectors", mode="before")
    def _none_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("css_selectors", mode="after")
    def _check_selectors(cls, v: Dict[str, str]) -> Dict[str, str]:
        cleaned: Dict[str, str] = {}
        for name, selector in v.items():
            name, selector = name.strip(), selector.strip()
            if not name or not selector:
                raise ValueError(f"empty name or selector in {name!r}={selector!r}")
            cleaned[name] = selector
        return cleaned

    def with_selectors(self, extra: Mapping[str, str]) -> CrawlerConfig:
        """Return a copy with *extra* merged over the current selectors."""
        merged = {**self.css_selectors, **extra}
        return CrawlerConfig(**{**self.model_dump(), "css_selectors": merged})


def parse_selectors(raw: str) -> Dict[str, str]:
    """Parse ``"name1=sel1,name2=sel2"`` into a mapping."""
    selectors: Dict[str, str] = {}
    if not raw:
        return selectors
    for pair in raw.split(","):
        name, sep, selector = pair.partition("=")
        if not sep:
            raise ValueError(f"invalid selector format: {pair} (expected name=selector)")
        name, selector = name.strip(), selector.strip()
        if not name or not selector:
            raise ValueError(f"empty name or selector in: {pair}")
        selectors[name] = selector
    return selectors


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path]) -> CrawlerConfig:
    """
    Read a YAML or JSON file and return a validated CrawlerConfig.
    Raises FileNotFoundError if the file is missing, ConfigError otherwise.
    """
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ConfigError(f"Unsupported config format: {suffix}")

    try:
        return CrawlerConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path_obj}:\n{exc}") from exc
