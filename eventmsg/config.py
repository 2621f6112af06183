"""Settings loaded from the environment (or .env)."""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "EVENTMSG_"


class Settings(BaseModel):
    """Runtime options for publishers and logging."""

    log_level: str = "INFO"
    deduplicate_listeners: bool = False
    reject_empty: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from EVENTMSG_* variables.
    When environ is None, .env is loaded first and os.environ is read.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return Settings.model_validate(values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
