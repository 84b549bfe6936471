"""
Session lifecycle for one player.

    PLAYING --tick (collision)--> GAME_OVER
    PLAYING --toggle_pause------> PAUSED
    PAUSED  --toggle_pause------> PLAYING
    GAME_OVER --restart---------> PLAYING   (fresh state, top score kept)

The session owns the GameState and the three collaborators that mutate it.
Storage of the top score is external: pass the stored value as top_score
and an on_top_score callback to receive every increase.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from domain.constants import DEFAULT_COLS, DEFAULT_ROWS, Direction
from domain.game_state import GameSnapshot, GameState
from domain.grid import Grid
from .food_spawner import FoodSpawner, RandomSource
from .input_controller import InputController
from .movement_engine import MovementEngine

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameSession:
    """
    Manages:
      - the grid and the live GameState
      - ticks, direction requests, pause toggles
      - restarts and the carried-over top score
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        rng: Optional[RandomSource] = None,
        top_score: int = 0,
        on_top_score: Optional[Callable[[int], None]] = None,
    ):
        self.grid = Grid(rows, cols)
        self.food_spawner = FoodSpawner(rng)
        self.engine = MovementEngine(self.food_spawner)
        self.controller = InputController()
        self.on_top_score = on_top_score
        self.games_played = 0
        self.state = self._new_state(top_score)

    def _new_state(self, top_score: int) -> GameState:
        food = self.food_spawner.choose_cell(self.grid.rows, self.grid.cols)
        return GameState.initial(self.grid, food, top_score=top_score)

    @property
    def status(self) -> SessionStatus:
        if self.state.is_game_over:
            return SessionStatus.GAME_OVER
        if self.state.is_paused:
            return SessionStatus.PAUSED
        return SessionStatus.PLAYING

    @property
    def top_score(self) -> int:
        return self.state.top_score

    def tick(self) -> GameSnapshot:
        """Advance one tick (no-op unless playing) and return the new snapshot."""
        was_over = self.state.is_game_over
        previous_top = self.state.top_score
        self.engine.step(self.state)

        if self.state.is_game_over and not was_over:
            self.games_played += 1
            if self.state.top_score > previous_top and self.on_top_score is not None:
                self.on_top_score(self.state.top_score)

        return self.state.snapshot()

    def request_direction(self, direction: Direction) -> bool:
        return self.controller.request_direction(self.state, direction)

    def toggle_pause(self) -> bool:
        return self.controller.toggle_pause(self.state)

    def restart(self) -> GameSnapshot:
        """Replace the state wholesale, keeping only the top score."""
        top_score = self.state.top_score
        self.state = self._new_state(top_score)
        logger.info("Session restarted (top score %d)", top_score)
        return self.state.snapshot()

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    def print_board(self) -> str:
        return self.state.print_board()
