from __future__ import annotations

"""
Unit tests for configuration validation.

Verifies:
1. Default injection for missing keys.
2. Coercion of human-friendly values in lenient mode.
3. Exceptions in strict mode.
"""

import pytest

from shelltree.core.pipeline.validator import validate_config
from shelltree.domain.config import get_default_config


def test_empty_config_yields_defaults():
    cfg, warnings = validate_config({})

    assert cfg == get_default_config()
    assert warnings == []


def test_non_dict_config_falls_back():
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg == get_default_config()
    assert len(warnings) == 1


def test_non_dict_config_strict_raises():
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_lenient_coercion():
    cfg, warnings = validate_config({
        "threshold": "100_000",
        "print_tree": "yes",
        "show_files": 0,
        "input_path": "  data.txt  ",
    })

    assert cfg["threshold"] == 100000
    assert cfg["print_tree"] is True
    assert cfg["show_files"] is False
    assert cfg["input_path"] == "data.txt"
    assert len(warnings) == 3


def test_negative_size_falls_back():
    cfg, warnings = validate_config({"disk_capacity": -1})

    assert cfg["disk_capacity"] == get_default_config()["disk_capacity"]
    assert any("non-negative" in w for w in warnings)


def test_negative_size_strict_raises():
    with pytest.raises(ValueError):
        validate_config({"required_free": -10}, strict=True)


def test_bool_is_not_accepted_as_size():
    cfg, warnings = validate_config({"threshold": True})

    assert cfg["threshold"] == get_default_config()["threshold"]
    assert warnings


def test_wrong_type_strict_raises():
    with pytest.raises(TypeError):
        validate_config({"print_tree": [1]}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"threshold": "100"}, strict=True)


def test_unknown_keys_are_dropped_with_warning():
    cfg, warnings = validate_config({"colour": "blue"})

    assert "colour" not in cfg
    assert warnings == ["Unknown config keys ignored: colour."]
