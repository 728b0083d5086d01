"""
Pytest configuration and fixtures for the lab API tests.
"""

import pytest
from app.core.config import Settings
from app.core.cors import CORS_HEADERS


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables that would leak in from the shell."""
    for name in ("PORT", "HOST", "SERVER_MODE", "GIN_MODE", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_settings(clean_env):
    """Build settings from the environment only, ignoring any .env file."""
    def _make(**env):
        for name, value in env.items():
            clean_env.setenv(name, value)
        return Settings(_env_file=None)
    return _make


@pytest.fixture
def cors_headers():
    return CORS_HEADERS
