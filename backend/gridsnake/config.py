"""
Runtime settings for the tick driver.

Values come from the environment (optionally a .env file) and fall back
to the defaults below. CLI flags in main.py override them.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = "INFO"
    start_level: int = 1
    max_ticks: int = 500
    player: str = "greedy"
    realtime: bool = False


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    """
    Read settings from SNAKE_* environment variables.

    Raises:
        ValueError: If a value is malformed or out of range
    """
    settings = Settings(
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
        start_level=_int_setting("SNAKE_START_LEVEL", 1),
        max_ticks=_int_setting("SNAKE_MAX_TICKS", 500),
        player=os.getenv("SNAKE_PLAYER", "greedy"),
        realtime=os.getenv("SNAKE_REALTIME", "false").strip().lower() in TRUTHY,
    )
    if settings.start_level < 1:
        raise ValueError(f"SNAKE_START_LEVEL must be >= 1, got {settings.start_level}")
    if settings.max_ticks < 0:
        raise ValueError(f"SNAKE_MAX_TICKS must be >= 0, got {settings.max_ticks}")
    return settings
