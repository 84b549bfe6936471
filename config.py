"""
Runtime settings for the snake runner.

Values come from the environment (a local .env file is loaded first):
    SNAKE_ROWS, SNAKE_COLS   grid size (default 20x20)
    SNAKE_TICK_MS            tick interval in milliseconds (default 100)
    SNAKE_DB_PATH            SQLite file for the top score and preferences
    SNAKE_SEED               optional integer seed for food placement
    LOG_LEVEL                logging level name (default INFO)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_COLS, DEFAULT_ROWS, TICK_INTERVAL_MS
from domain.errors import ConfigurationError

load_dotenv()


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    tick_ms: int = TICK_INTERVAL_MS
    db_path: Optional[str] = None
    seed: Optional[int] = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read Settings from the environment."""
    settings = Settings(
        rows=_int_env("SNAKE_ROWS", DEFAULT_ROWS),
        cols=_int_env("SNAKE_COLS", DEFAULT_COLS),
        tick_ms=_int_env("SNAKE_TICK_MS", TICK_INTERVAL_MS),
        db_path=os.getenv("SNAKE_DB_PATH") or None,
        seed=_int_env("SNAKE_SEED", None),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    if settings.rows < 1 or settings.cols < 1:
        raise ConfigurationError(f"Grid must be at least 1x1, got {settings.rows}x{settings.cols}")
    if settings.tick_ms < 1:
        raise ConfigurationError(f"SNAKE_TICK_MS must be positive, got {settings.tick_ms}")
    return settings
