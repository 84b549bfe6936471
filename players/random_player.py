"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.constants import Direction
from domain.game_state import GameSnapshot
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and its own body.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        valid_moves = self.safe_moves(snapshot)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(list(Direction))

        return self.rng.choice(valid_moves)
