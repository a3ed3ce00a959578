"""Tests for settings loading."""

import logging

import pytest

from swara_transposer.config import (
    Settings,
    configure_logging,
    get_settings,
    load_config,
    reload_settings,
)


class TestSettings:
    def test_packaged_defaults(self):
        assert get_settings() == Settings(
            log_level="WARNING",
            warn_on_unknown_notes=True,
            preserve_punctuation=False,
        )

    def test_json_defaults(self):
        config = load_config()
        assert config["log_level"] == "WARNING"

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SWARA_TRANSPOSER_LOG_LEVEL", "debug")
        monkeypatch.setenv("SWARA_TRANSPOSER_WARN_UNKNOWN", "no")
        monkeypatch.setenv("SWARA_TRANSPOSER_PRESERVE_PUNCTUATION", "yes")
        settings = reload_settings()
        assert settings.log_level == "DEBUG"
        assert settings.warn_on_unknown_notes is False
        assert settings.preserve_punctuation is True

    def test_bad_flag(self, monkeypatch):
        monkeypatch.setenv("SWARA_TRANSPOSER_WARN_UNKNOWN", "maybe")
        with pytest.raises(ValueError, match="SWARA_TRANSPOSER_WARN_UNKNOWN"):
            reload_settings()

    def test_configure_logging(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        configure_logging(Settings(log_level="INFO"))
        assert calls["level"] == "INFO"
