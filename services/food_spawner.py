"""
Food placement.

Food lands on a uniformly random cell of the grid. Occupied cells are not
excluded, so food can appear underneath the snake; eating it then requires
the head to come back around to that cell.
"""

import logging
import random
from typing import Optional, Protocol, Tuple

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


class FoodSpawner:
    """Chooses food cells using an injected random source."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def choose_cell(self, rows: int, cols: int) -> Tuple[int, int]:
        row = self.rng.randint(0, rows - 1)
        col = self.rng.randint(0, cols - 1)
        return (row, col)

    def place(self, state: GameState) -> Tuple[int, int]:
        cell = self.choose_cell(state.rows, state.cols)
        state.place_food(cell)
        if state.snake.occupies(cell):
            logger.debug("Food placed under the snake at %s", cell)
        return cell
