# ABOUTME: SQLite connection setup for the musicdb track catalog.
# ABOUTME: Creates the database file on first use and stamps it with the schema version.

import sqlite3
from pathlib import Path

from musicdb.db.schema import SCHEMA, SCHEMA_VERSION

DEFAULT_DB_PATH = Path.home() / ".musicdb" / "tracks.db"


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the musicdb track database.

    A database whose ``user_version`` is behind SCHEMA_VERSION gets the
    schema applied. Rows come back as sqlite3.Row.

    Args:
        path: Path to the database file. Defaults to ~/.musicdb/tracks.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    version = conn.execute("PRAGMA user_version").fetchone()[0]
    if version < SCHEMA_VERSION:
        conn.executescript(SCHEMA)
        conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")

    return conn
