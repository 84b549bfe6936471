"""
Repository for the key -> value preferences table.
"""

from typing import Dict, Optional

from database import ensure_schema

from .base import BaseRepository


class PreferencesRepository(BaseRepository):
    """Opaque key -> value store. The table is created on construction if missing."""

    def __init__(self, db_path: Optional[str] = None):
        super().__init__(db_path)
        ensure_schema(db_path)

    def get(self, key: str) -> Optional[str]:
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT value FROM preferences WHERE key = ?", (key,))
            row = cursor.fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO preferences (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, str(value)),
            )

    def get_all(self) -> Dict[str, str]:
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT key, value FROM preferences ORDER BY key")
            rows = cursor.fetchall()
        return {row["key"]: row["value"] for row in rows}

    def delete_all(self) -> int:
        """Remove every stored preference. Returns the number of rows deleted."""
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM preferences")
            return cursor.rowcount
