#!/usr/bin/env python3
"""
Reset stored preferences to a clean state.

Wipes the top score and every other stored preference while preserving
the schema.

Usage:
    python cli/reset_scores.py [--confirm]
"""

import argparse
import os
import sys

# Add parent directory to path to import database modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from data_access import clear_preferences, load_top_score  # noqa: E402
from database import get_database_path, init_database  # noqa: E402


def reset_scores(confirm: bool = False, db_path: str = None) -> bool:
    """
    Delete all stored preferences.

    Args:
        confirm: If True, skip confirmation prompt

    Returns:
        True if reset was successful, False otherwise
    """
    path = db_path or get_database_path()
    init_database(path)

    if not confirm:
        print("=" * 70)
        print("SCORE RESET WARNING")
        print("=" * 70)
        print(f"Database path: {path}")
        print(f"Current top score: {load_top_score(path)}")
        print("\nThis will DELETE the top score and all stored preferences.")
        print("=" * 70)

        response = input("\nType 'RESET' to confirm: ")

        if response != 'RESET':
            print("Reset cancelled")
            return False

    deleted = clear_preferences(path)
    print(f"Cleared preferences: {deleted} rows deleted")
    return True


def main():
    parser = argparse.ArgumentParser(description="Reset the stored top score and preferences")
    parser.add_argument("--confirm", action="store_true", help="Skip the confirmation prompt")
    parser.add_argument("--db-path", dest="db_path", default=None, help="SQLite file to reset")
    args = parser.parse_args()

    success = reset_scores(confirm=args.confirm, db_path=args.db_path)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
