"""
Tests for JSON settings and configuration clamping.
"""

import json

import pytest

from sudoku_visual.errors import InvalidConfiguration
from sudoku_visual.settings import (
    DEFAULT_SETTINGS,
    load_settings,
    normalize_cells_to_remove,
    normalize_delay_ms,
    save_settings,
)


def test_missing_file_gives_defaults(tmp_path):
    """No config.json means default settings."""
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_corrupt_file_gives_defaults(tmp_path):
    """Unparseable JSON falls back to defaults."""
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_saved_settings_are_loaded_and_merged(tmp_path):
    """Saved keys override defaults; missing keys keep defaults."""
    path = tmp_path / "config.json"
    save_settings({"cells_to_remove": 55}, path)

    settings = load_settings(path)

    assert settings["cells_to_remove"] == 55
    assert settings["delay_ms"] == DEFAULT_SETTINGS["delay_ms"]


def test_out_of_range_values_are_clamped_on_load(tmp_path):
    """Bad ranges are clamped, non-integers fall back to defaults."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "cells_to_remove": 500,
        "delay_ms": -40,
        "stop_timeout_ms": "soon",
    }), encoding="utf-8")

    settings = load_settings(path)

    assert settings["cells_to_remove"] == 81
    assert settings["delay_ms"] == 0
    assert settings["stop_timeout_ms"] == DEFAULT_SETTINGS["stop_timeout_ms"]


@pytest.mark.parametrize("value,expected", [(-1, 0), (0, 0), (40, 40), (81, 81), (82, 81), ("30", 30)])
def test_normalize_cells_to_remove(value, expected):
    assert normalize_cells_to_remove(value) == expected


@pytest.mark.parametrize("value,expected", [(-100, 0), (0, 0), (250, 250)])
def test_normalize_delay_ms(value, expected):
    assert normalize_delay_ms(value) == expected


@pytest.mark.parametrize("value", ["fast", None, True, [1]])
def test_non_integer_values_are_rejected(value):
    """InvalidConfiguration is also a ValueError."""
    with pytest.raises(InvalidConfiguration):
        normalize_delay_ms(value)
    with pytest.raises(ValueError):
        normalize_cells_to_remove(value)
