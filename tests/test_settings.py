"""
==============================================================================
Settings Tests
==============================================================================
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from bookstore.config import Settings, get_settings


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        """Default store file is ./store.dat."""
        monkeypatch.delenv("BOOKSTORE_STORE_FILE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.store_path == Path("./store.dat")
        assert settings.log_level == logging.INFO

    def test_environment_prefix(self, monkeypatch: pytest.MonkeyPatch):
        """BOOKSTORE_ variables override defaults."""
        monkeypatch.setenv("BOOKSTORE_STORE_FILE", "/data/books.dat")
        monkeypatch.setenv("BOOKSTORE_DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.store_path == Path("/data/books.dat")
        assert settings.log_level == logging.DEBUG

    def test_store_file_stripped(self):
        """Whitespace around the path is dropped."""
        assert Settings(store_file="  books.dat \n").store_path == Path("books.dat")

    def test_blank_store_file_rejected(self):
        """A path of only whitespace is a configuration error."""
        with pytest.raises(ValidationError):
            Settings(store_file="   ")

    def test_get_settings_cached(self):
        """get_settings returns one shared instance."""
        assert get_settings() is get_settings()
