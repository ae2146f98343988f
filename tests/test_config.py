# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from site_harvest.config import CrawlerConfig, load_config, parse_selectors
from site_harvest.exceptions import ConfigError


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("max_depth: 3\ncss_selectors: {title: h1}", ".yaml", None),
        (json.dumps({"max_depth": 3, "css_selectors": {"title": "h1"}}), ".json", None),
        ("max_depth: -1", ".yaml", ConfigError),
        ("concurrency: 0", ".yml", ConfigError),
        ("unknown_key: 1", ".yaml", ConfigError),
        ("- just\n- a list", ".yaml", ConfigError),
        ("key: [unclosed", ".yaml", ConfigError),
        ("{not json", ".json", ConfigError),
        ("max_depth = 3", ".toml", ConfigError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.max_depth == 3
        assert cfg.css_selectors == {"title": "h1"}


def test_load_config_file_keys_match_saved_format(tmp_path):
    cfg_path = write_file(
        tmp_path,
        json.dumps(
            {
                "max_depth": 1,
                "concurrency": 7,
                "user_agent": "Bot/2.0",
                "timeout": 3,
                "css_selectors": {"headings": "h1, h2", "price": ".price"},
            }
        ),
        ".json",
    )
    cfg = load_config(cfg_path)
    assert (cfg.max_depth, cfg.concurrency, cfg.user_agent, cfg.timeout) == (1, 7, "Bot/2.0", 3.0)
    assert cfg.css_selectors["price"] == ".price"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_defaults():
    cfg = CrawlerConfig()
    assert cfg.max_depth == 2
    assert cfg.concurrency == 5
    assert cfg.user_agent == "SiteHarvest/1.0"
    assert cfg.timeout == 10.0
    assert cfg.css_selectors == {}


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.max_depth = 5


def test_null_selectors_become_empty():
    assert CrawlerConfig(css_selectors=None).css_selectors == {}


def test_blank_selector_rejected():
    with pytest.raises(ValidationError):
        CrawlerConfig(css_selectors={"title": "  "})


def test_with_selectors_merges_and_keeps_original():
    cfg = CrawlerConfig(max_depth=4, css_selectors={"a": "h1", "b": "p"})
    merged = cfg.with_selectors({"b": ".lead", "c": "li"})
    assert merged.css_selectors == {"a": "h1", "b": ".lead", "c": "li"}
    assert merged.max_depth == 4
    assert cfg.css_selectors == {"a": "h1", "b": "p"}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", {}),
        ("title=h1", {"title": "h1"}),
        (" title = h1 , body=.article p", {"title": "h1", "body": ".article p"}),
        ("link=a[href=x]", {"link": "a[href=x]"}),
    ],
)
def test_parse_selectors(raw, expected):
    assert parse_selectors(raw) == expected


@pytest.mark.parametrize("raw", ["title", "=h1", "title=", "a=h1,broken"])
def test_parse_selectors_invalid(raw):
    with pytest.raises(ValueError):
        parse_selectors(raw)
