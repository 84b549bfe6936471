"""
GameState entity - the single mutable unit every engine operation acts on.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import START_DIRECTION, START_POSITION, Direction
from .errors import ConfigurationError
from .grid import Grid
from .snake import Snake

Position = Tuple[int, int]


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of a GameState for renderers and move sources.

    Attributes:
        rows, cols: board dimensions
        snake: positions from head to tail
        food: position of the food cell
        is_game_over, is_paused: session flags
        score: food eaten this session (snake length - 1)
        top_score: best score carried across sessions
        tick_count: completed ticks this session
        direction: committed direction of the last tick
        death_reason: 'wall' or 'self' once the game is over
    """

    rows: int
    cols: int
    snake: Tuple[Position, ...]
    food: Position
    is_game_over: bool
    is_paused: bool
    score: int
    top_score: int
    tick_count: int
    direction: Direction
    death_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        return self.snake[0]


class GameState:
    """
    A live game session on a fixed grid.

    Only MovementEngine, FoodSpawner and InputController call the mutators
    below; renderers read snapshot().
    """

    def __init__(
        self,
        grid: Grid,
        snake: Snake,
        food: Position,
        current_direction: Direction = START_DIRECTION,
        pending_direction: Optional[Direction] = None,
        is_game_over: bool = False,
        is_paused: bool = False,
        top_score: int = 0,
        tick_count: int = 0,
    ):
        if top_score < 0:
            raise ConfigurationError(f"top_score must be non-negative, got {top_score}")
        for segment in snake.positions:
            if not grid.contains(segment):
                raise ConfigurationError(f"Snake segment {segment} is outside a {grid.rows}x{grid.cols} grid")
        if not grid.contains(food):
            raise ConfigurationError(f"Food {food} is outside a {grid.rows}x{grid.cols} grid")

        self.grid = grid
        self.snake = snake
        self.food: Position = tuple(food)
        self.current_direction = Direction(current_direction)
        self.pending_direction = Direction(pending_direction) if pending_direction else None
        self.is_game_over = is_game_over
        self.is_paused = is_paused
        self.top_score = top_score
        self.tick_count = tick_count
        self.death_reason: Optional[str] = None

    @classmethod
    def initial(cls, grid: Grid, food: Position, top_score: int = 0) -> "GameState":
        """Fresh session state: one segment at the origin heading right."""
        return cls(grid=grid, snake=Snake([START_POSITION]), food=food, top_score=top_score)

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    @property
    def score(self) -> int:
        return len(self.snake) - 1

    # --- mutators -------------------------------------------------------

    def queue_direction(self, direction: Direction) -> None:
        self.pending_direction = direction

    def commit_direction(self) -> Direction:
        if self.pending_direction is not None:
            self.current_direction = self.pending_direction
            self.pending_direction = None
        return self.current_direction

    def place_food(self, position: Position) -> None:
        self.food = tuple(position)

    def flip_paused(self) -> bool:
        self.is_paused = not self.is_paused
        return self.is_paused

    def end_game(self, reason: str) -> bool:
        """Mark the game over and fold the score into top_score. Returns True if top_score rose."""
        self.is_game_over = True
        self.death_reason = reason
        if self.score > self.top_score:
            self.top_score = self.score
            return True
        return False

    # --- queries --------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            rows=self.rows,
            cols=self.cols,
            snake=tuple(self.snake.positions),
            food=self.food,
            is_game_over=self.is_game_over,
            is_paused=self.is_paused,
            score=self.score,
            top_score=self.top_score,
            tick_count=self.tick_count,
            direction=self.current_direction,
            death_reason=self.death_reason,
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first; column labels run along the bottom.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        fr, fc = self.food
        board[fr][fc] = 'F'

        # Snake drawn after food so food hidden under the body stays hidden
        for idx, (r, c) in enumerate(self.snake.positions):
            board[r][c] = 'H' if idx == 0 else 'S'

        width = len(str(max(self.rows, self.cols) - 1))
        result = [f"{r:>{width}} {' '.join(cells)}" for r, cells in enumerate(board)]
        result.append(" " * width + " " + " ".join(str(c % 10) for c in range(self.cols)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState {self.rows}x{self.cols} tick={self.tick_count}, food={self.food}, "
            f"score={self.score}, top_score={self.top_score}, "
            f"game_over={self.is_game_over}, paused={self.is_paused}>"
        )
