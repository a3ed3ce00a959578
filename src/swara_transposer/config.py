"""Runtime settings: JSON defaults with environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIGS_DIR = Path(__file__).resolve().parent / "configs"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Process-wide transposer settings.

    Attributes:
        log_level: Level name used by ``configure_logging``.
        warn_on_unknown_notes: Log a warning for each token left untransposed.
        preserve_punctuation: Default punctuation policy for ``transpose_text``.
    """

    log_level: str = "WARNING"
    warn_on_unknown_notes: bool = True
    preserve_punctuation: bool = False


_SETTINGS_CACHE: Settings | None = None


def load_config(config_name: str = "transposer.json") -> dict:
    """Load a JSON config file from the package configs/ directory."""
    config_path = _CONFIGS_DIR / config_name
    with open(config_path) as f:
        return json.load(f)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _resolve_settings(config: dict) -> Settings:
    """Resolve settings from environment variables (preferred) or config file."""
    return Settings(
        log_level=os.environ.get(
            "SWARA_TRANSPOSER_LOG_LEVEL", config["log_level"]
        ).upper(),
        warn_on_unknown_notes=_env_flag(
            "SWARA_TRANSPOSER_WARN_UNKNOWN", config["warn_on_unknown_notes"]
        ),
        preserve_punctuation=_env_flag(
            "SWARA_TRANSPOSER_PRESERVE_PUNCTUATION", config["preserve_punctuation"]
        ),
    )


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _SETTINGS_CACHE  # noqa: PLW0603
    if _SETTINGS_CACHE is None:
        _SETTINGS_CACHE = _resolve_settings(load_config())
    return _SETTINGS_CACHE


def reload_settings() -> Settings:
    """Drop the cache and re-read config and environment."""
    global _SETTINGS_CACHE  # noqa: PLW0603
    _SETTINGS_CACHE = None
    return get_settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install a basic stderr handler at the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
