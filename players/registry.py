"""
Registry of headless players.

Maps player keys (e.g., 'random', 'greedy') to player classes.
To add a player, create a module with a Player subclass and add an entry
to PLAYER_CLASSES.
"""

from typing import Dict, List, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer

DEFAULT_PLAYER = "greedy"

PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        key: One of AVAILABLE_PLAYERS. If None or empty, returns the default.

    Raises:
        ValueError: If key is not recognized.
    """
    if not key or key.strip() == "":
        key = DEFAULT_PLAYER

    key = key.strip().lower()

    if key not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{key}'. Available players: {available}")

    return PLAYER_CLASSES[key]


def list_players() -> List[dict]:
    """Return key/description metadata for every registered player."""
    return [
        {"key": "random", "description": "Random safe move each tick"},
        {"key": "greedy", "description": "Safe move closest to the food"},
    ]
