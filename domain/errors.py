"""
Exceptions raised by the game engine.

Only configuration problems are errors. Requests that arrive in the wrong
session state (ticking a paused game, steering after game over) are no-ops.
"""


class SnakeError(Exception):
    """Base class for engine errors."""


class ConfigurationError(SnakeError, ValueError):
    """Invalid construction parameters, such as a grid with no cells."""
