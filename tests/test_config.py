# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from dead_link_hunter.config import HunterConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com\nmax_depth: 2", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com", "max_depth": 2}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("seed_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, HunterConfig)
        assert cfg.seed_url == "http://example.com"
        assert cfg.max_depth == 2


def test_defaults():
    cfg = HunterConfig(seed_url="https://example.com")
    assert cfg.max_depth == 5
    assert cfg.max_concurrency == 20
    assert cfg.timeout == 10.0
    assert cfg.engine == "dynamic"


def test_overrides_win_over_file(tmp_path):
    cfg_path = write_file(tmp_path, "seed_url: http://example.com\nengine: dynamic\ntimeout: 5", ".yaml")
    cfg = load_config(cfg_path, engine="static", timeout=None, max_concurrency=4)
    assert cfg.engine == "static"
    assert cfg.timeout == 5.0
    assert cfg.max_concurrency == 4


def test_load_without_file_uses_overrides_only():
    cfg = load_config(None, seed_url="http://example.com/start")
    assert cfg.seed_url == "http://example.com/start"
    with pytest.raises(ValidationError):
        load_config(None)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "field,value",
    [
        ("seed_url", "ftp://example.com"),
        ("seed_url", "example.com"),
        ("max_depth", -1),
        ("max_concurrency", 0),
        ("timeout", 0),
        ("engine", "lynx"),
        ("robots", True),
    ],
)
def test_invalid_values(field, value):
    data = {"seed_url": "http://example.com", field: value}
    with pytest.raises(ValidationError):
        HunterConfig(**data)


def test_config_is_frozen():
    cfg = HunterConfig(seed_url="http://example.com")
    with pytest.raises(ValidationError):
        cfg.max_depth = 1
