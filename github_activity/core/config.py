import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "github-activity-cli"  # GitHub rejects requests without a User-Agent


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    limit: int = 10
    log_level: str = "WARNING"


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: '{raw}' is not a number.")
    if value <= 0:
        raise ValueError(f"Invalid value for {name}: must be greater than 0.")
    return value


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: '{raw}' is not an integer.")
    if value < 1:
        raise ValueError(f"Invalid value for {name}: must be at least 1.")
    return value


def _read_log_level(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid value for {name}: unknown log level '{level}'.")
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Reads the CLI configuration from the environment (and `.env`, if present).
    Cached: call `get_settings.cache_clear()` after changing the environment.
    """
    return Settings(
        api_url=(os.getenv("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/"),
        timeout=_read_float("GITHUB_ACTIVITY_TIMEOUT", 10.0),
        user_agent=os.getenv("GITHUB_ACTIVITY_USER_AGENT") or DEFAULT_USER_AGENT,
        limit=_read_int("GITHUB_ACTIVITY_LIMIT", 10),
        log_level=_read_log_level("LOG_LEVEL", "WARNING"),
    )
