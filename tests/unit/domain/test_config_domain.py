from __future__ import annotations

"""
Unit tests for configuration persistence.
"""

import json

from shelltree.domain.config import get_default_config, load_config, save_config


def test_load_missing_file_returns_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    cfg = get_default_config()
    cfg["threshold"] = 5
    cfg["print_tree"] = True

    save_config(cfg, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"] == "1.0.0"
    assert data["settings"]["threshold"] == 5

    loaded = load_config(str(path))
    assert loaded["threshold"] == 5
    assert loaded["print_tree"] is True


def test_save_drops_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    save_config({"threshold": 7, "bogus": 1}, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert "bogus" not in data["settings"]
    assert data["settings"]["disk_capacity"] == 70_000_000


def test_load_corrupted_file_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_ignores_unknown_settings(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"settings": {"threshold": 9, "extra": True}}), encoding="utf-8")

    loaded = load_config(str(path))
    assert loaded["threshold"] == 9
    assert "extra" not in loaded
