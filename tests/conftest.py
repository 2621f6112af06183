"""Pytest configuration and shared fixtures."""

import pytest

from eventmsg.config import ENV_PREFIX, reset_settings
from eventmsg.observability import Metrics


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from default settings regardless of the caller's environment."""
    for name in ("LOG_LEVEL", "DEDUPLICATE_LISTENERS", "REJECT_EMPTY"):
        monkeypatch.delenv(ENV_PREFIX + name, raising=False)
    monkeypatch.setattr("eventmsg.config.load_dotenv", lambda *args, **kwargs: False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def metrics():
    return Metrics()
