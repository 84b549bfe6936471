"""
Greedy player implementation - heads straight for the food.
"""

from domain.constants import Direction
from domain.game_state import GameSnapshot
from .random_player import RandomPlayer


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe move that most reduces Manhattan distance to the food,
    preferring to keep the current heading on ties. Falls back to a random
    move when nothing is safe.
    """

    name = "greedy"

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        valid_moves = self.safe_moves(snapshot)
        if not valid_moves:
            return super().get_move(snapshot)

        food_row, food_col = snapshot.food
        cells = self.candidate_cells(snapshot)

        def distance(direction: Direction) -> int:
            row, col = cells[direction]
            return abs(row - food_row) + abs(col - food_col)

        def rank(direction: Direction):
            return (distance(direction), direction != snapshot.direction)

        return min(valid_moves, key=rank)
