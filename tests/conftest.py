import pytest

from swara_transposer import config

_ENV_VARS = (
    "SWARA_TRANSPOSER_LOG_LEVEL",
    "SWARA_TRANSPOSER_WARN_UNKNOWN",
    "SWARA_TRANSPOSER_PRESERVE_PUNCTUATION",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against the packaged defaults."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.reload_settings()
    yield
    config._SETTINGS_CACHE = None
