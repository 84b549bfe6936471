"""
Tests for the data_access layer.

Most tests run against a throwaway SQLite file; the connection handling
tests mock get_connection to check commit/rollback behavior.
"""

import sys
import os
from unittest.mock import MagicMock, patch

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import get_database_path, init_database
from data_access import (
    load_top_score,
    save_top_score,
    load_dark_mode,
    save_dark_mode,
    clear_preferences,
)
from data_access.repositories import BaseRepository, PreferencesRepository


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "snake.db")
    init_database(path)
    return path


class TestDatabase:

    def test_path_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SNAKE_DB_PATH", str(tmp_path / "custom.db"))
        assert get_database_path() == str(tmp_path / "custom.db")

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("SNAKE_DB_PATH", raising=False)
        assert get_database_path().endswith("snake.db")

    def test_init_is_idempotent(self, db_path):
        init_database(db_path)
        init_database(db_path)
        assert PreferencesRepository(db_path).get_all() == {}

    def test_init_creates_parent_directory(self, tmp_path):
        path = str(tmp_path / "nested" / "dir" / "snake.db")
        init_database(path)
        assert os.path.exists(path)


class TestPreferencesRepository:

    def test_get_missing_key(self, db_path):
        assert PreferencesRepository(db_path).get("nothing") is None

    def test_set_then_get(self, db_path):
        repo = PreferencesRepository(db_path)
        repo.set("topScore", "12")
        assert repo.get("topScore") == "12"

    def test_set_overwrites(self, db_path):
        repo = PreferencesRepository(db_path)
        repo.set("topScore", "3")
        repo.set("topScore", "8")
        assert repo.get_all() == {"topScore": "8"}

    def test_delete_all(self, db_path):
        repo = PreferencesRepository(db_path)
        repo.set("a", "1")
        repo.set("b", "2")
        assert repo.delete_all() == 2
        assert repo.get_all() == {}


class TestConnectionHandling:

    @patch('data_access.repositories.base.get_connection')
    def test_commit_and_close_on_success(self, mock_get_conn):
        mock_conn = MagicMock()
        mock_get_conn.return_value = mock_conn

        with BaseRepository("x.db").connection() as (conn, cursor):
            cursor.execute("SELECT 1")

        mock_get_conn.assert_called_once_with("x.db")
        mock_conn.commit.assert_called_once()
        mock_conn.rollback.assert_not_called()
        mock_conn.close.assert_called_once()

    @patch('data_access.repositories.base.get_connection')
    def test_rollback_and_reraise_on_error(self, mock_get_conn):
        mock_conn = MagicMock()
        mock_get_conn.return_value = mock_conn

        with pytest.raises(RuntimeError):
            with BaseRepository().connection() as (conn, cursor):
                raise RuntimeError("boom")

        mock_conn.rollback.assert_called_once()
        mock_conn.commit.assert_not_called()
        mock_conn.close.assert_called_once()

    @patch('data_access.repositories.base.get_connection')
    def test_read_connection_never_commits(self, mock_get_conn):
        mock_conn = MagicMock()
        mock_get_conn.return_value = mock_conn

        with BaseRepository().read_connection():
            pass

        mock_conn.commit.assert_not_called()
        mock_conn.close.assert_called_once()


class TestTopScore:

    def test_defaults_to_zero(self, db_path):
        assert load_top_score(db_path) == 0

    def test_works_without_init_database(self, tmp_path):
        """The preferences table is created on first use."""
        path = str(tmp_path / "fresh" / "snake.db")

        assert load_top_score(path) == 0
        save_top_score(6, path)
        assert load_top_score(path) == 6

    def test_round_trip(self, db_path):
        save_top_score(17, db_path)
        assert load_top_score(db_path) == 17

    def test_unparsable_value_reads_as_zero(self, db_path):
        PreferencesRepository(db_path).set("topScore", "lots")
        assert load_top_score(db_path) == 0

    def test_negative_stored_value_reads_as_zero(self, db_path):
        PreferencesRepository(db_path).set("topScore", "-4")
        assert load_top_score(db_path) == 0

    def test_negative_score_rejected(self, db_path):
        with pytest.raises(ValueError):
            save_top_score(-1, db_path)

    def test_clear(self, db_path):
        save_top_score(5, db_path)
        assert clear_preferences(db_path) == 1
        assert load_top_score(db_path) == 0


class TestDarkMode:

    def test_defaults_to_true(self, db_path):
        assert load_dark_mode(db_path) is True

    def test_stored_as_json(self, db_path):
        save_dark_mode(False, db_path)
        assert PreferencesRepository(db_path).get("darkMode") == "false"
        assert load_dark_mode(db_path) is False

    def test_garbage_reads_as_default(self, db_path):
        PreferencesRepository(db_path).set("darkMode", "{not json")
        assert load_dark_mode(db_path) is True
