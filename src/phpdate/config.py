"""Environment-driven settings.

Variables:
  PHPDATE_TZ         default zone for formatting: local | UTC | IANA name | +HH:MM
  PHPDATE_LOG_LEVEL  log level used by the command line (default WARNING)
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .core.errors import InvalidArgumentError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    tz_name: str = "local"
    log_level: str = "WARNING"


def env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()

def default_tz_name() -> str:
    """Zone name from PHPDATE_TZ alone; the log level plays no part in formatting."""
    return env_str("PHPDATE_TZ", "local")

def get_settings() -> Settings:
    """Settings from the current process environment."""
    level = env_str("PHPDATE_LOG_LEVEL", "WARNING").upper()
    if level not in LOG_LEVELS:
        raise InvalidArgumentError(f"PHPDATE_LOG_LEVEL must be one of {LOG_LEVELS}, got {level!r}")
    return Settings(tz_name=default_tz_name(), log_level=level)

def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load a .env file (never overriding variables already set), then read settings.

    Without `env_file` the nearest .env from the working directory upwards is used.
    """
    path = str(env_file) if env_file is not None else find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)
    return get_settings()
