"""Tests for settings and logging configuration."""

import logging

import pytest

from palabra.config import Settings, configure_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.bible_api_url == "https://bible-api.com"
        assert settings.english_translation == "kjv"
        assert settings.request_timeout == 15.0
        assert settings.word_cache_ttl == 3600.0
        assert settings.verse_cache_ttl == 86400.0
        assert settings.min_fallback_length == 3

    def test_from_env_empty(self):
        assert Settings.from_env({}) == Settings()

    def test_from_env_overrides(self):
        settings = Settings.from_env(
            {
                "PALABRA_REQUEST_TIMEOUT": "5",
                "PALABRA_MIN_FALLBACK_LENGTH": "4",
                "PALABRA_ENGLISH_TRANSLATION": "web",
            }
        )
        assert settings.request_timeout == 5.0
        assert isinstance(settings.request_timeout, float)
        assert settings.min_fallback_length == 4
        assert settings.english_translation == "web"

    def test_unrelated_variables_ignored(self):
        assert Settings.from_env({"REQUEST_TIMEOUT": "1"}).request_timeout == 15.0

    def test_invalid_value(self):
        with pytest.raises(ValueError, match="PALABRA_REQUEST_TIMEOUT"):
            Settings.from_env({"PALABRA_REQUEST_TIMEOUT": "soon"})


class TestConfigureLogging:
    def test_sets_package_level(self):
        configure_logging("debug")
        assert logging.getLogger("palabra").level == logging.DEBUG

        configure_logging("WARNING")
        assert logging.getLogger("palabra").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
