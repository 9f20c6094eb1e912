"""Configuration settings for Palabra."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "PALABRA_"


@dataclass
class Settings:
    """Application settings."""

    # Upstream services
    bible_api_url: str = "https://bible-api.com"
    english_translation: str = "kjv"
    translate_api_url: str = "https://api.mymemory.translated.net/get"
    request_timeout: float = 15.0
    user_agent: str = "Palabra/0.1 (+https://bible-api.com)"

    # Language pair
    source_language: str = "es"
    target_language: str = "en"

    # Caching (seconds)
    word_cache_ttl: float = 3600.0
    verse_cache_ttl: float = 86400.0

    # Word resolution
    min_fallback_length: int = 3

    # Alignment
    alignment_tie_epsilon: float = 0.1

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings, overriding defaults from PALABRA_* variables.

        Example: PALABRA_REQUEST_TIMEOUT=5 sets request_timeout to 5.0.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        for name, current in vars(settings).items():
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None:
                continue
            try:
                setattr(settings, name, type(current)(raw))
            except ValueError as e:
                raise ValueError(
                    f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}"
                ) from e
        return settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure root logging for the CLI and API server."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("palabra").setLevel(level)
    # httpx logs every request at INFO
    if logging.getLogger("palabra").getEffectiveLevel() > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
