"""Shared fixtures for the API tests."""

import logging

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import create_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test without ambient PORT/HOST values or a stray .env file."""
    for name in ("PORT", "port", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.setLevel(level)


@pytest.fixture
def settings():
    return Settings(PORT=8123, _env_file=None)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
