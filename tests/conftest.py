import logging
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from anycache.infrastructure.config import settings

@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()

@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """Directory standing in for the platform cache dir."""
    return tmp_path / "cache-root"

@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path, monkeypatch):
    """Keeps the user's real config file, .env and ANYCACHE_* variables out of tests."""
    original_env = {k for k in os.environ if k.startswith(settings.ENV_PREFIX)}
    for key in original_env:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    settings.clear_test_config()
    settings.reset_configuration()
    settings.load_configuration(config_file=tmp_path / "missing-config.yaml")
    yield
    settings.clear_test_config()
    settings.reset_configuration()
    # Variables written by load_dotenv or set_config during the test
    for key in [k for k in os.environ if k.startswith(settings.ENV_PREFIX)]:
        if key not in original_env:
            del os.environ[key]

@pytest.fixture(autouse=True)
def restore_logging():
    """Undoes handler changes made by setup_logging (e.g. from CLI runs)."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
