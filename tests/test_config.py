"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from contour_sketch.utils.config import DEFAULT_CONFIG, default_config_path, load_config


def test_defaults_without_file():
    config = load_config()
    assert config == DEFAULT_CONFIG
    config["conversion"]["offset"] = 1
    assert DEFAULT_CONFIG["conversion"]["offset"] == 30


def test_shipped_file_matches_defaults():
    assert load_config(str(default_config_path())) == DEFAULT_CONFIG


def test_partial_file_is_merged(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("conversion:\n  threshold: 500\noutput:\n  format: null\n")
    config = load_config(str(path))
    assert config["conversion"] == {"offset": 30, "threshold": 500}
    assert config["output"]["format"] is None
    assert config["output"]["quality"] == 75


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)) == DEFAULT_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_non_mapping_root(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_empty_section_keeps_defaults(tmp_path):
    path = tmp_path / "sparse.yaml"
    path.write_text("conversion:\nrendering:\n  stroke_width: 2\n")
    config = load_config(str(path))
    assert config["conversion"] == DEFAULT_CONFIG["conversion"]
    assert config["rendering"]["stroke_width"] == 2


def test_scalar_section(tmp_path):
    path = tmp_path / "scalar.yaml"
    path.write_text("output: PNG\n")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(str(path))


def test_unknown_keys_are_kept(tmp_path):
    path = tmp_path / "extra.yaml"
    path.write_text("notes: hello\n")
    assert load_config(str(path))["notes"] == "hello"
