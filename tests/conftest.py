"""Test configuration and fixtures.

Every test starts from a clean configuration: the NUMBER_DELIMIT_* variables
are removed from the environment and the cached settings are reloaded, so a
developer's shell cannot change the expected output.
"""

import sys
from pathlib import Path

import pytest

# --- Ensure project root on sys.path BEFORE importing number_delimit ---
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from number_delimit.config.settings import get_settings  # noqa: E402

CONFIG_ENV_VARS = (
    "NUMBER_DELIMIT_DELIMITER",
    "NUMBER_DELIMIT_SEPARATOR",
    "NUMBER_DELIMIT_PRECISION",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def configure_env(monkeypatch):
    """Set environment variables and reload the cached settings."""
    def _configure(**env: str):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        get_settings.cache_clear()
        return get_settings()
    return _configure
