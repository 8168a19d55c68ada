"""Tests for src/config — settings loading and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from src.config.log_setup import configure_logging, resolve_level
from src.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DEBUG", "LOG_LEVEL", "TILES_PER_HAND", "SEED"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.tiles_per_hand == 7
        assert settings.seed is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TILES_PER_HAND", "5")
        monkeypatch.setenv("SEED", "42")
        monkeypatch.setenv("DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.tiles_per_hand == 5
        assert settings.seed == 42
        assert settings.debug is True

    @pytest.mark.parametrize("value", ["0", "15"])
    def test_tiles_per_hand_bounds(self, monkeypatch, value):
        monkeypatch.setenv("TILES_PER_HAND", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_resolve_level(self):
        assert resolve_level(Settings(_env_file=None, log_level="warning")) == logging.WARNING

    def test_debug_wins(self):
        settings = Settings(_env_file=None, debug=True, log_level="ERROR")
        assert resolve_level(settings) == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level(Settings(_env_file=None, log_level="LOUD"))

    def test_configure_logging_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            level = configure_logging(Settings(_env_file=None, log_level="ERROR"))
            assert level == logging.ERROR
            assert root.level == logging.ERROR
        finally:
            root.setLevel(previous)
