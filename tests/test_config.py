import logging

import pytest
from pydantic import ValidationError

from eventmsg import Publisher
from eventmsg.config import Settings, get_settings, load_settings, reset_settings


def test_defaults():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.log_level == "INFO"
    assert settings.deduplicate_listeners is False
    assert settings.reject_empty is False


def test_load_from_mapping():
    settings = load_settings(
        {
            "EVENTMSG_LOG_LEVEL": "debug",
            "EVENTMSG_DEDUPLICATE_LISTENERS": "true",
            "EVENTMSG_REJECT_EMPTY": "1",
            "UNRELATED": "ignored",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == logging.DEBUG
    assert settings.deduplicate_listeners is True
    assert settings.reject_empty is True


def test_blank_values_use_defaults():
    assert load_settings({"EVENTMSG_LOG_LEVEL": "  "}).log_level == "INFO"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        load_settings({"EVENTMSG_LOG_LEVEL": "loud"})


def test_get_settings_reads_environment_and_caches(monkeypatch):
    monkeypatch.setenv("EVENTMSG_DEDUPLICATE_LISTENERS", "yes")
    first = get_settings()
    assert first.deduplicate_listeners is True
    monkeypatch.setenv("EVENTMSG_DEDUPLICATE_LISTENERS", "no")
    assert get_settings() is first
    reset_settings()
    assert get_settings().deduplicate_listeners is False


def test_publisher_uses_settings(monkeypatch):
    monkeypatch.setenv("EVENTMSG_DEDUPLICATE_LISTENERS", "true")
    pub = Publisher("p")
    seen = []
    pub.add_listener(seen.append)
    pub.add_listener(seen.append)
    pub.publish("x", "t")
    assert len(seen) == 1


def test_explicit_option_overrides_settings(monkeypatch):
    monkeypatch.setenv("EVENTMSG_DEDUPLICATE_LISTENERS", "true")
    pub = Publisher("p", deduplicate_listeners=False)
    seen = []
    pub.add_listener(seen.append)
    pub.add_listener(seen.append)
    pub.publish("x", "t")
    assert len(seen) == 2
