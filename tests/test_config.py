# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_scout.config import CheckerConfig, build_config, load_config, read_config_file


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("base_url: http://example.com\nconcurrency: 2", ".yaml", None),
        (json.dumps({"base_url": "example.com", "concurrency": 2}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("{broken json", ".json", ValueError),
        ("base_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CheckerConfig)
        assert cfg.base_url == "https://example.com/"
        assert cfg.concurrency == 2


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config_file(tmp_path / "nope.yaml")


def test_defaults():
    cfg = CheckerConfig(base_url="example.com")
    assert cfg.timeout == 15.0
    assert cfg.concurrency == 1
    assert cfg.broken_statuses == (404,)
    assert cfg.link_parser == "regex"


@pytest.mark.parametrize(
    "overrides",
    [
        {"base_url": "ftp://example.com"},
        {"base_url": ""},
        {"timeout": 0},
        {"concurrency": 0},
        {"broken_statuses": [404, 999]},
        {"link_parser": "xpath"},
        {"unknown": 1},
    ],
)
def test_invalid_values(overrides):
    data = {"base_url": "example.com", **overrides}
    with pytest.raises(ValidationError):
        CheckerConfig(**data)


def test_config_is_frozen():
    cfg = CheckerConfig(base_url="example.com")
    with pytest.raises(ValidationError):
        cfg.timeout = 1.0


def test_build_config_overrides_ignore_none():
    cfg = build_config({"base_url": "a.test", "timeout": 3}, base_url=None, timeout=7.5, concurrency=None)
    assert cfg.base_url == "https://a.test/"
    assert cfg.timeout == 7.5
    assert cfg.concurrency == 1


def test_broken_statuses_deduplicated():
    cfg = CheckerConfig(base_url="a.test", broken_statuses=[404, 410, 404])
    assert cfg.broken_statuses == (404, 410)
