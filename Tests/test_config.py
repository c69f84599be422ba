"""
Tests for TOML configuration loading, merging and overrides.
"""

import sys

import pytest

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from aclio_coach import config
from aclio_coach.config import (
    DEFAULT_CONFIG_FROM_TOML,
    DEFAULT_STORAGE_PATH,
    deep_merge_dicts,
    get_api_settings,
    get_cli_setting,
    get_config_path,
    get_storage_path,
    load_cli_config_and_ensure_existence,
    load_settings,
)


def test_config_path_honours_environment(isolated_config):
    assert get_config_path() == isolated_config


def test_defaults_without_user_file():
    settings = load_settings()
    assert settings == DEFAULT_CONFIG_FROM_TOML
    assert get_cli_setting("api", "history_limit") == 4
    assert get_cli_setting("general", "loading_delay") == 0.5


def test_missing_file_is_created_with_defaults(isolated_config):
    assert not isolated_config.exists()

    load_cli_config_and_ensure_existence()

    with open(isolated_config, "rb") as f:
        written = tomllib.load(f)
    assert written["api"]["base_url"] == DEFAULT_CONFIG_FROM_TOML["api"]["base_url"]


def test_user_file_is_merged_over_defaults(isolated_config):
    isolated_config.write_text('[api]\ntimeout = 5\n\n[logging]\nlog_level = "DEBUG"\n')

    settings = load_settings()

    assert settings["api"]["timeout"] == 5
    assert settings["api"]["base_url"] == DEFAULT_CONFIG_FROM_TOML["api"]["base_url"]
    assert settings["logging"]["log_level"] == "DEBUG"


def test_invalid_toml_falls_back_to_defaults(isolated_config):
    isolated_config.write_text("[api\nbase_url = ")
    assert load_settings() == DEFAULT_CONFIG_FROM_TOML


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ACLIO_API_BASE_URL", "http://localhost:3000/api/")
    monkeypatch.setenv("ACLIO_LOG_LEVEL", "WARNING")

    assert get_api_settings()["base_url"] == "http://localhost:3000/api"
    assert get_cli_setting("logging", "log_level") == "WARNING"


def test_settings_are_cached_until_reset(isolated_config):
    first = load_settings()
    isolated_config.write_text('[api]\nhistory_limit = 9\n')

    assert load_settings() is first
    assert load_settings(force_reload=True)["api"]["history_limit"] == 9


def test_api_settings_coerce_bad_values(isolated_config):
    isolated_config.write_text('[api]\ntimeout = "soon"\nhistory_limit = "3"\n')

    api = get_api_settings()

    assert api["timeout"] == 60.0
    assert api["history_limit"] == 3


def test_storage_path(isolated_config, isolated_temp_dir):
    assert get_storage_path() == DEFAULT_STORAGE_PATH

    custom = isolated_temp_dir / "mine.json"
    isolated_config.write_text(f'[general]\nstorage_path = "{custom.as_posix()}"\n')
    config.reset_settings_cache()

    assert get_storage_path() == custom


def test_get_cli_setting_defaults():
    assert get_cli_setting("nope", "missing", "fallback") == "fallback"
    assert get_cli_setting("api", "missing", 3) == 3


def test_deep_merge_does_not_mutate_inputs():
    base = {"a": {"b": 1, "c": 2}, "d": 1}
    update = {"a": {"b": 10}, "e": {"f": 1}}

    merged = deep_merge_dicts(base, update)

    assert merged == {"a": {"b": 10, "c": 2}, "d": 1, "e": {"f": 1}}
    assert base == {"a": {"b": 1, "c": 2}, "d": 1}
