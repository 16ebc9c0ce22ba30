"""Direct database writers for tests. The stores never write game results."""

import sqlite3
from collections.abc import Iterable
from pathlib import Path


def seed_results(db_path: Path, rows: Iterable[tuple[str | None, bool, float]]) -> None:
    """Insert (user_id, win, time_seconds) rows, creating users as needed."""
    conn = sqlite3.connect(str(db_path))
    try:
        for user_id, win, time_seconds in rows:
            if user_id is not None:
                conn.execute("INSERT OR IGNORE INTO users (user_id) VALUES (?)", (user_id,))
            conn.execute(
                "INSERT INTO game_results (user_id, win, time_seconds) VALUES (?, ?, ?)",
                (user_id, 1 if win else 0, time_seconds),
            )
        conn.commit()
    finally:
        conn.close()
