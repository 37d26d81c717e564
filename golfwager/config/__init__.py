"""Configuration helpers for golfwager defaults and limits."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any


__all__ = [
    "DEFAULT_SPLIT_POLICY",
    "DOTS_WAGER_PER_DOT",
    "MAX_HOLES",
    "MAX_PLAYERS",
    "SNAKE_PENALTY_SATS",
    "Settings",
    "coerce_boolish",
    "env_bool",
    "get_settings",
    "reset_settings_cache",
]


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _choice_env(name: str, default: str, choices: set[str]) -> str:
    value = (os.getenv(name) or "").strip().lower()
    if value in choices:
        return value
    return default


MAX_PLAYERS: int = _int_env("GOLFWAGER_MAX_PLAYERS", 16)
MAX_HOLES: int = _int_env("GOLFWAGER_MAX_HOLES", 36)

DOTS_WAGER_PER_DOT: int = _int_env("GOLFWAGER_DOTS_WAGER_PER_DOT", 100)
SNAKE_PENALTY_SATS: int = _int_env("GOLFWAGER_SNAKE_PENALTY_SATS", 500)
DEFAULT_SPLIT_POLICY: str = _choice_env(
    "GOLFWAGER_SPLIT_POLICY", "distribute", {"floor", "distribute"}
)


@dataclass(frozen=True)
class Settings:
    max_players: int = MAX_PLAYERS
    max_holes: int = MAX_HOLES
    require_api_key: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(
        max_players=_int_env("GOLFWAGER_MAX_PLAYERS", MAX_PLAYERS),
        max_holes=_int_env("GOLFWAGER_MAX_HOLES", MAX_HOLES),
        require_api_key=env_bool("REQUIRE_API_KEY", False),
    )


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def coerce_boolish(value: Any) -> bool | None:
    """Attempt to coerce *value* into a boolean."""

    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None
