"""
Game constants for the snake engine.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Movement directions, each carrying its (d_row, d_col) unit vector."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def vector(self) -> Tuple[int, int]:
        return _VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse a direction name, ignoring case and surrounding whitespace."""
        try:
            return cls(text.strip().upper())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown direction {text!r}. Expected one of: {', '.join(VALID_MOVES)}")


_VECTORS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = [d.value for d in Direction]

# Game settings
DEFAULT_ROWS = 20
DEFAULT_COLS = 20
TICK_INTERVAL_MS = 100
START_POSITION = (0, 0)
START_DIRECTION = RIGHT

# Death reasons recorded on the state when a tick ends the game
DEATH_WALL = "wall"
DEATH_SELF = "self"
