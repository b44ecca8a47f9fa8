import logging
import os
from pathlib import Path

import pytest

from anycache.infrastructure.cache.file_cache import AnyCache
from anycache.infrastructure.config import settings
from anycache.infrastructure.config.settings import (
    get_cache_root,
    get_config,
    get_log_file,
    get_log_level,
    set_config,
    set_config_for_testing,
)

@pytest.fixture
def yaml_config(tmp_path: Path) -> Path:
    """Reloads configuration from a YAML file with nested keys."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "cache:\n  root: /from/yaml\nlogging:\n  level: warning\n  file: /tmp/anycache.log\n",
        encoding="utf-8",
    )
    settings.reset_configuration()
    settings.load_configuration(config_file=config_file)
    return config_file

def test_default_when_key_missing():
    assert get_config("cache.root") is None
    assert get_config("cache.root", "fallback") == "fallback"

def test_yaml_nested_keys(yaml_config: Path):
    assert get_config("cache.root") == "/from/yaml"
    assert get_log_level() == logging.WARNING
    assert get_log_file() == "/tmp/anycache.log"

def test_environment_beats_yaml(yaml_config: Path, monkeypatch):
    monkeypatch.setenv("ANYCACHE_CACHE_ROOT", "/from/env")
    assert get_config("cache.root") == "/from/env"

def test_test_config_beats_environment(monkeypatch):
    monkeypatch.setenv("ANYCACHE_CACHE_ROOT", "/from/env")
    set_config_for_testing({"cache.root": "/from/test"})
    assert get_config("cache.root") == "/from/test"

@pytest.mark.parametrize("raw, expected", [("true", True), ("False", False), ("3", 3), ("2.5", 2.5), ("text", "text")])
def test_environment_values_are_coerced(monkeypatch, raw: str, expected):
    monkeypatch.setenv("ANYCACHE_SOME_FLAG", raw)
    assert get_config("some.flag") == expected

def test_invalid_yaml_is_ignored(tmp_path: Path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("cache: [unclosed\n", encoding="utf-8")
    settings.reset_configuration()
    settings.load_configuration(config_file=config_file)
    assert get_config("cache.root") is None

def test_dotenv_file_is_loaded(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("ANYCACHE_LOGGING_LEVEL=ERROR\n", encoding="utf-8")
    settings.reset_configuration()
    settings.load_configuration(config_file=tmp_path / "missing.yaml", env_file=env_file)
    assert get_log_level() == logging.ERROR

def test_set_config_applies_to_later_lookups():
    set_config("logging.level", "DEBUG")
    assert get_log_level() == logging.DEBUG

def test_unknown_log_level_defaults_to_info():
    set_config_for_testing({"logging.level": "chatty"})
    assert get_log_level() == logging.INFO

def test_cache_root_expands_user():
    set_config_for_testing({"cache.root": "~/caches"})
    assert get_cache_root() == Path.home() / "caches"

def test_cache_root_unset():
    assert get_cache_root() is None

def test_dotenv_does_not_leak_into_environment(tmp_path: Path, monkeypatch):
    (tmp_path / ".env").write_text(
        f"OTHER_HOST_SETTING=1\nANYCACHE_CACHE_ROOT={tmp_path / 'from-dotenv'}\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_FILE", tmp_path / "missing.yaml")
    settings.reset_configuration()

    cache = AnyCache("profiles")

    assert cache.directory == tmp_path / "from-dotenv" / "profiles"
    assert "OTHER_HOST_SETTING" not in os.environ
    assert "ANYCACHE_CACHE_ROOT" not in os.environ

def test_real_environment_beats_dotenv(tmp_path: Path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("ANYCACHE_LOGGING_LEVEL=ERROR\n", encoding="utf-8")
    monkeypatch.setenv("ANYCACHE_LOGGING_LEVEL", "DEBUG")
    settings.reset_configuration()
    settings.load_configuration(config_file=tmp_path / "missing.yaml", env_file=env_file)
    assert get_log_level() == logging.DEBUG

@pytest.mark.parametrize("raw", ["0", "true", "1.5"])
def test_cache_root_is_read_as_text(monkeypatch, raw: str):
    monkeypatch.setenv("ANYCACHE_CACHE_ROOT", raw)
    assert get_cache_root() == Path(raw)
