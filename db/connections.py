from pathlib import Path
from typing import Dict, Optional
import aiosqlite

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


async def connect(db_path: str, pragmas: Optional[Dict[str, str]] = None) -> aiosqlite.Connection:
    """Open an aiosqlite connection with named row access and foreign keys on.

    Any extra PRAGMA settings in `pragmas` are applied after the defaults.
    The caller owns the returned connection and must close it.
    """
    conn = await aiosqlite.connect(db_path, timeout=30.0)
    conn.row_factory = aiosqlite.Row

    await conn.execute("PRAGMA foreign_keys = ON")
    if pragmas:
        for k, v in pragmas.items():
            await conn.execute(f"PRAGMA {k} = {v}")

    await conn.commit()
    return conn


async def init_db(db_path: str, schema_path: Optional[str] = None) -> None:
    """Apply the SQL schema (default `db/schema.sql`) to the database at `db_path`.

    Every statement in the schema is idempotent, so running this against an
    existing database only creates what is missing.
    """
    schema_file = Path(schema_path) if schema_path else SCHEMA_PATH

    if not schema_file.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_file}")

    conn = await connect(db_path)
    try:
        await conn.executescript(schema_file.read_text())
        await conn.commit()
    finally:
        await conn.close()


async def ensure_db(db_path: str, schema_path: Optional[str] = None) -> None:
    """Create the database file and its schema if the file doesn't exist yet."""
    db_file = Path(db_path)
    if db_file.exists():
        return
    if db_file.parent and not db_file.parent.exists():
        db_file.parent.mkdir(parents=True, exist_ok=True)

    await init_db(db_path, schema_path)
