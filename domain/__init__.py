"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, storage, rendering).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DEFAULT_ROWS, DEFAULT_COLS, TICK_INTERVAL_MS, DEATH_WALL, DEATH_SELF,
)
from .errors import SnakeError, ConfigurationError
from .grid import Grid
from .snake import Snake
from .game_state import GameState, GameSnapshot

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_ROWS', 'DEFAULT_COLS', 'TICK_INTERVAL_MS', 'DEATH_WALL', 'DEATH_SELF',
    'SnakeError', 'ConfigurationError',
    'Grid',
    'Snake',
    'GameState', 'GameSnapshot',
]
