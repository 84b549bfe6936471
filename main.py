"""
Headless snake runner.

Plays one or more sessions with an automated player on a fixed tick
interval, storing the top score between runs.

Usage:
    python main.py --player greedy --games 3 --rows 20 --cols 20
"""

import argparse
import json
import logging
import random
from typing import Any, Dict, List, Optional

from config import load_settings
from data_access import load_top_score, save_top_score
from database import init_database
from domain.game_state import GameSnapshot
from players import AVAILABLE_PLAYERS, get_player_class
from players.registry import DEFAULT_PLAYER
from services.game_session import GameSession
from services.tick_driver import TickDriver

logger = logging.getLogger(__name__)


def run_simulation(game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs headless snake sessions with a single automated player.

    Args:
        game_params: An object (like argparse.Namespace) containing game settings
                     (rows, cols, interval_ms, player, games, seed, max_ticks,
                     show_board, db_path).

    Returns:
        A dictionary summarizing the run (per-game scores, ticks and death
        reasons, plus the top score before and after).
    """
    db_path = getattr(game_params, 'db_path', None)
    seed = getattr(game_params, 'seed', None)
    show_board = getattr(game_params, 'show_board', False)

    init_database(db_path)
    starting_top = load_top_score(db_path)

    rng = random.Random(seed)
    player = get_player_class(game_params.player)(rng=random.Random(rng.getrandbits(32)))

    session = GameSession(
        rows=game_params.rows,
        cols=game_params.cols,
        rng=rng,
        top_score=starting_top,
        on_top_score=lambda score: save_top_score(score, db_path),
    )

    def show(snapshot: GameSnapshot) -> None:
        print(f"\nTick {snapshot.tick_count}  Score: {snapshot.score}  Top Score: {snapshot.top_score}")
        print(session.print_board())

    games: List[Dict[str, Any]] = []
    for game_number in range(game_params.games):
        if game_number > 0:
            session.restart()

        driver = TickDriver(
            session,
            interval_ms=game_params.interval_ms,
            before_tick=player.get_move,
            after_tick=show if show_board else None,
        )
        final = driver.run(max_ticks=getattr(game_params, 'max_ticks', None))

        games.append({
            "game": game_number + 1,
            "score": final.score,
            "ticks": final.tick_count,
            "game_over": final.is_game_over,
            "death_reason": final.death_reason,
        })
        print(f"Game {game_number + 1}: score {final.score} after {final.tick_count} ticks "
              f"({final.death_reason or 'stopped'})")

    return {
        "player": player.name,
        "rows": game_params.rows,
        "cols": game_params.cols,
        "games": games,
        "starting_top_score": starting_top,
        "top_score": session.top_score,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None):
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Run headless snake sessions with an automated player.")
    parser.add_argument("--rows", type=int, default=settings.rows, help="Number of grid rows")
    parser.add_argument("--cols", type=int, default=settings.cols, help="Number of grid columns")
    parser.add_argument("--interval-ms", dest="interval_ms", type=int, default=settings.tick_ms,
                        help="Milliseconds between ticks")
    parser.add_argument("--player", type=str, default=DEFAULT_PLAYER, choices=AVAILABLE_PLAYERS,
                        help="Automated player to steer the snake")
    parser.add_argument("--games", type=int, default=1, help="Number of sessions to play")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed for food and player")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=None,
                        help="Stop a session after this many ticks")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--db-path", dest="db_path", type=str, default=settings.db_path,
                        help="SQLite file holding the top score")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.games < 1:
        parser.error("--games must be at least 1")

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
