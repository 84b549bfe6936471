"""
Tests for cli/reset_scores.py.
"""

import sys
import os
from unittest.mock import patch

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli.reset_scores import reset_scores
from data_access import load_top_score, save_dark_mode, save_top_score
from database import init_database


def test_reset_with_confirm_flag(tmp_path):
    db_path = str(tmp_path / "snake.db")
    init_database(db_path)
    save_top_score(12, db_path)
    save_dark_mode(False, db_path)

    assert reset_scores(confirm=True, db_path=db_path) is True
    assert load_top_score(db_path) == 0


def test_reset_prompt_accepts_reset(tmp_path):
    db_path = str(tmp_path / "snake.db")
    init_database(db_path)
    save_top_score(3, db_path)

    with patch("builtins.input", return_value="RESET"):
        assert reset_scores(db_path=db_path) is True
    assert load_top_score(db_path) == 0


def test_reset_prompt_cancel_keeps_data(tmp_path):
    db_path = str(tmp_path / "snake.db")
    init_database(db_path)
    save_top_score(3, db_path)

    with patch("builtins.input", return_value="no"):
        assert reset_scores(db_path=db_path) is False
    assert load_top_score(db_path) == 3
