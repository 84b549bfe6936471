"""
Data access layer for snake preferences.

This module provides the storage hooks for the top score and the
dark mode preference.
"""

from .preferences import (
    load_top_score,
    save_top_score,
    load_dark_mode,
    save_dark_mode,
    clear_preferences,
)

__all__ = [
    'load_top_score',
    'save_top_score',
    'load_dark_mode',
    'save_dark_mode',
    'clear_preferences',
]
