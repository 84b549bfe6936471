"""
Game engine services: the tick update, food placement, input arbitration,
session lifecycle and the tick scheduler.
"""

from .food_spawner import FoodSpawner
from .movement_engine import MovementEngine
from .input_controller import InputController
from .game_session import GameSession, SessionStatus
from .tick_driver import TickDriver

__all__ = [
    'FoodSpawner',
    'MovementEngine',
    'InputController',
    'GameSession',
    'SessionStatus',
    'TickDriver',
]
