"""
Grid entity - fixed board dimensions for one session.
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigurationError


@dataclass(frozen=True)
class Grid:
    rows: int
    cols: int

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"Grid {name} must be a positive integer, got {value!r}")

    def contains(self, position: Tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

