"""
Database configuration and schema management for the snake runner.

The only persisted data is an opaque key -> value preferences table
(top score, dark mode flag) stored in a local SQLite file.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """
    Determine the database path.

    Returns:
        SNAKE_DB_PATH if set, otherwise snake.db next to this module.
    """
    env_path = os.getenv('SNAKE_DB_PATH')
    if env_path:
        return env_path
    return str(Path(__file__).parent / 'snake.db')


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the database schema, logging the path used.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    path = db_path or get_database_path()
    logger.info("Initializing database at: %s", path)
    ensure_schema(path)


def ensure_schema(db_path: Optional[str] = None) -> None:
    """Create any missing tables. Called by repositories before first use."""
    path = db_path or get_database_path()

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    conn = get_connection(path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS preferences (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()
