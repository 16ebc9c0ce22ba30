#!/usr/bin/env python3
"""Rebuild a SQLite database from schema.sql using Python's sqlite3 module."""
import sqlite3
import sys
import os
from pathlib import Path

CRITICAL_TABLES = ("users", "session_tokens", "game_results")


def init_db(db_path: str, schema_path: str) -> None:
    """Drop every table in `db_path` and recreate the schema.

    Exits with status 1 when the schema is missing or a critical table
    did not get created.
    """
    db_path = Path(db_path).resolve()
    schema_path = Path(schema_path).resolve()

    if not schema_path.exists():
        print(f"[INIT] ✗ Error: Schema file not found at {schema_path}", file=sys.stderr)
        sys.exit(1)

    conn = sqlite3.connect(str(db_path))
    try:
        cursor = conn.cursor()

        cursor.execute("SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'")
        for (table,) in cursor.fetchall():
            cursor.execute(f'DROP TABLE IF EXISTS "{table}"')
        conn.commit()

        conn.executescript(schema_path.read_text())
        conn.commit()

        cursor.execute("SELECT name FROM sqlite_master WHERE type='table'")
        created_tables = {t[0] for t in cursor.fetchall()}
        missing = [t for t in CRITICAL_TABLES if t not in created_tables]
        if missing:
            print(f"[INIT] ✗ Error: Missing critical tables {missing}", file=sys.stderr)
            sys.exit(1)
    except sqlite3.Error as e:
        print(f"[INIT] ✗ Error: Failed to initialize database: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        conn.close()

    # readable and writable by the container user
    os.chmod(str(db_path), 0o666)
    print("[INIT] ✓ Database initialized successfully")


if __name__ == "__main__":
    db_path = sys.argv[1] if len(sys.argv) > 1 else "./dev.db"
    schema_path = sys.argv[2] if len(sys.argv) > 2 else str(Path(__file__).resolve().parent.parent / "db" / "schema.sql")
    init_db(db_path, schema_path)
