from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./squadboard.db"
DEFAULT_PLAYER_DATABASE_PATH = "data/player-database.json"


@dataclass(frozen=True)
class Settings:
    football_data_api_key: str | None
    api_football_key: str | None
    topstrike_cookies: str | None
    database_url: str
    player_database_path: str
    football_data_cache_seconds: int
    api_football_cache_seconds: int
    http_timeout_seconds: float


def _env_str(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


def _env_number(name: str, default, cast=int):
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using default %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r, using default %s", name, raw, default)
        return default
    return value


def load_settings() -> Settings:
    """Read configuration from the environment.

    Called per request by the upstream clients so that keys can be rotated
    without a restart.
    """
    return Settings(
        football_data_api_key=_env_str("FOOTBALL_DATA_API_KEY"),
        api_football_key=_env_str("API_FOOTBALL_KEY"),
        topstrike_cookies=_env_str("TOPSTRIKE_COOKIES"),
        database_url=_env_str("DATABASE_URL") or DEFAULT_DATABASE_URL,
        player_database_path=_env_str("PLAYER_DATABASE_PATH") or DEFAULT_PLAYER_DATABASE_PATH,
        football_data_cache_seconds=_env_number("FOOTBALL_DATA_CACHE_SECONDS", 120),
        api_football_cache_seconds=_env_number("API_FOOTBALL_CACHE_SECONDS", 300),
        http_timeout_seconds=_env_number("HTTP_TIMEOUT_SECONDS", 12.0, float),
    )
