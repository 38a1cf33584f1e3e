"""Tests for settings loading."""

import os

import pytest

from sqlgen.config import load_config


def _write(tmp_path, text):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_settings_load():
    config = load_config()
    assert config["generation"]["default_targets"][0] == "SQL Server"
    assert config["entitlement"]["cookie_value"] == "1"
    assert os.path.isabs(config["base_dirs"]["logs"])


def test_missing_sections_get_defaults(tmp_path):
    config = load_config(_write(tmp_path, "api:\n  port: 6000\n"))
    assert config["api"]["port"] == 6000
    assert config["base_dirs"] == {}
    assert config["generation"] == {"default_targets": [], "syntax_check": True}
    assert config["entitlement"] == {"cookie_name": "SQLGen_Pro", "cookie_value": "1"}


def test_partial_section_is_merged_and_cookie_value_is_text(tmp_path):
    config = load_config(_write(tmp_path, "generation:\n  syntax_check: false\nentitlement:\n  cookie_value: 7\n"))
    assert config["generation"]["syntax_check"] is False
    assert config["generation"]["default_targets"] == []
    assert config["entitlement"]["cookie_value"] == "7"


def test_env_override_is_honoured(tmp_path, monkeypatch):
    monkeypatch.setenv("SQLGEN_SETTINGS", str(_write(tmp_path, "generation:\n  default_targets: [MySQL]\n")))
    assert load_config()["generation"]["default_targets"] == ["MySQL"]


def test_invalid_default_targets_are_rejected(tmp_path):
    with pytest.raises(Exception, match="default_targets"):
        load_config(_write(tmp_path, "generation:\n  default_targets: MySQL\n"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
