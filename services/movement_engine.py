"""
Tick update for a single-snake game.

One call to MovementEngine.step advances the snake by exactly one cell:
  1) commit the queued direction
  2) compute the new head
  3) test it against the walls and against the body as it is *before* the
     move (the tail cell still counts as occupied)
  4) on collision end the game, otherwise prepend the head
  5) grow and respawn food if the head landed on it, else drop the tail
"""

import logging
from typing import Optional, Tuple

from domain.constants import DEATH_SELF, DEATH_WALL
from domain.game_state import GameState
from .food_spawner import FoodSpawner

logger = logging.getLogger(__name__)


class MovementEngine:

    def __init__(self, food_spawner: Optional[FoodSpawner] = None) -> None:
        self.food_spawner = food_spawner or FoodSpawner()

    @staticmethod
    def next_head(state: GameState) -> Tuple[int, int]:
        row, col = state.snake.head
        d_row, d_col = state.current_direction.vector
        return (row + d_row, col + d_col)

    @staticmethod
    def collision_reason(state: GameState, head: Tuple[int, int]) -> Optional[str]:
        """Return 'wall', 'self' or None for a proposed head against the pre-move body."""
        if not state.grid.contains(head):
            return DEATH_WALL
        if state.snake.occupies(head):
            return DEATH_SELF
        return None

    def step(self, state: GameState) -> GameState:
        """
        Advance the state by one tick in place and return it.

        A no-op while the game is paused or over, so an external clock can
        call this unconditionally.
        """
        if state.is_game_over or state.is_paused:
            return state

        direction = state.commit_direction()
        head = self.next_head(state)

        reason = self.collision_reason(state, head)
        if reason is not None:
            raised = state.end_game(reason)
            logger.info(
                "Game over after %d ticks: %s collision at %s, moving %s. Score %d, top score %d%s",
                state.tick_count, reason, head, direction.value,
                state.score, state.top_score, " (new best)" if raised else "",
            )
            return state

        ate = head == state.food
        state.snake.advance(head, grow=ate)
        state.tick_count += 1

        if ate:
            self.food_spawner.place(state)
            logger.debug("Ate food at %s, length now %d", head, len(state.snake))

        return state
