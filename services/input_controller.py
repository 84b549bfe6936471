"""
Direction and pause arbitration.

Requests are applied to the state the moment they arrive. A direction
request only queues the direction for the next tick, so a tick already in
progress is never affected.
"""

import logging

from domain.constants import Direction
from domain.game_state import GameState

logger = logging.getLogger(__name__)


class InputController:

    def request_direction(self, state: GameState, direction: Direction) -> bool:
        """
        Queue a direction for the next tick.

        Ignored after game over, and ignored when the snake has a body and
        the request is the exact reverse of the committed direction.

        Returns:
            True if the request was queued.
        """
        if state.is_game_over:
            return False
        direction = Direction(direction)
        if len(state.snake) > 1 and direction == state.current_direction.opposite:
            logger.debug("Discarded reversal %s while moving %s", direction.value, state.current_direction.value)
            return False
        state.queue_direction(direction)
        return True

    def toggle_pause(self, state: GameState) -> bool:
        """Flip the pause flag. Returns True if the flag changed."""
        if state.is_game_over:
            return False
        paused = state.flip_paused()
        logger.info("Game %s", "paused" if paused else "resumed")
        return True
