"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple

from .errors import ConfigurationError


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (row, col) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(tuple(p) for p in positions)
        if not self.positions:
            raise ConfigurationError("Snake needs at least one segment")
        if len(set(self.positions)) != len(self.positions):
            raise ConfigurationError(f"Snake segments overlap: {list(self.positions)}")
        if not self.is_contiguous():
            raise ConfigurationError(f"Snake segments are not contiguous: {list(self.positions)}")

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, position: Tuple[int, int]) -> bool:
        return position in self.positions

    def is_contiguous(self) -> bool:
        """True when every consecutive pair of segments is one orthogonal step apart."""
        segments: List[Tuple[int, int]] = list(self.positions)
        for (r1, c1), (r2, c2) in zip(segments, segments[1:]):
            if abs(r1 - r2) + abs(c1 - c2) != 1:
                return False
        return True

    def advance(self, new_head: Tuple[int, int], grow: bool) -> None:
        """Prepend new_head; drop the tail unless growing."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def __repr__(self):
        return f"<Snake length={len(self)} head={self.head}>"
