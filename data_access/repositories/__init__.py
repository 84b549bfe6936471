"""
Repository classes for database access.
"""

from .base import BaseRepository
from .preferences_repository import PreferencesRepository

__all__ = [
    'BaseRepository',
    'PreferencesRepository',
]
