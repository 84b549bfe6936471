"""
Base player interface for headless play.
"""

from typing import Dict, List, Optional, Tuple

from domain.constants import Direction
from domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for move sources.

    A player looks at a snapshot before each tick and may return a direction
    to request. Returning None keeps the current heading.
    """

    name = "base"

    def get_move(self, snapshot: GameSnapshot) -> Optional[Direction]:
        """
        Return a direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            A Direction, or None to keep going straight.
        """
        raise NotImplementedError

    @staticmethod
    def candidate_cells(snapshot: GameSnapshot) -> Dict[Direction, Tuple[int, int]]:
        """Cell the head would enter for every direction."""
        row, col = snapshot.head
        return {
            direction: (row + direction.vector[0], col + direction.vector[1])
            for direction in Direction
        }

    @classmethod
    def safe_moves(cls, snapshot: GameSnapshot) -> List[Direction]:
        """
        Directions that keep the head on the board and off the body.

        The tail is excluded from the body check even though the engine
        counts it, so a player can still be killed chasing its own tail.
        """
        body = set(snapshot.snake[:-1]) if len(snapshot.snake) > 1 else set()
        moves: List[Direction] = []
        for direction, (row, col) in cls.candidate_cells(snapshot).items():
            if len(snapshot.snake) > 1 and direction == snapshot.direction.opposite:
                continue
            if row < 0 or row >= snapshot.rows or col < 0 or col >= snapshot.cols:
                continue
            if (row, col) in body:
                continue
            moves.append(direction)
        return moves
