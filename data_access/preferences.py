"""
Top score and preference storage.

These functions are the persistence hooks the game session consumes: read
the top score once at startup and write it back whenever it increases.
They delegate to PreferencesRepository.
"""

import json
import logging
from typing import Optional

from .repositories import PreferencesRepository

logger = logging.getLogger(__name__)

TOP_SCORE_KEY = "topScore"
DARK_MODE_KEY = "darkMode"


def _repo(db_path: Optional[str]) -> PreferencesRepository:
    return PreferencesRepository(db_path)


def load_top_score(db_path: Optional[str] = None) -> int:
    """
    Return the stored top score, or 0 when none is stored.

    Unparsable or negative values are treated as 0.
    """
    raw = _repo(db_path).get(TOP_SCORE_KEY)
    if raw is None:
        return 0
    try:
        score = int(raw)
    except ValueError:
        logger.warning("Ignoring unparsable stored top score %r", raw)
        return 0
    return max(score, 0)


def save_top_score(score: int, db_path: Optional[str] = None) -> None:
    """Store score as the top score."""
    if score < 0:
        raise ValueError(f"Top score must be non-negative, got {score}")
    _repo(db_path).set(TOP_SCORE_KEY, str(int(score)))
    logger.info("Saved top score %d", score)


def load_dark_mode(db_path: Optional[str] = None) -> bool:
    """Return the stored dark mode preference (defaults to True)."""
    raw = _repo(db_path).get(DARK_MODE_KEY)
    if raw is None:
        return True
    try:
        return bool(json.loads(raw))
    except ValueError:
        return True


def save_dark_mode(enabled: bool, db_path: Optional[str] = None) -> None:
    _repo(db_path).set(DARK_MODE_KEY, json.dumps(bool(enabled)))


def clear_preferences(db_path: Optional[str] = None) -> int:
    return _repo(db_path).delete_all()
