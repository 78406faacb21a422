"""
Pytest configuration and fixtures shared by all tests.
"""

import logging

import pytest

from onehelpers.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Point logging at a temporary directory and drop cached settings so each
    test sees its own environment.
    """
    monkeypatch.setenv("ONEHELPERS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("ONEHELPERS_ENCODING", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    logger = logging.getLogger("onehelpers")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def write_bytes(tmp_path):
    """Return a helper that writes raw bytes to a file under tmp_path."""

    def _write(name, data):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
