# ABOUTME: Public API for the musicdb track catalog database layer.
# ABOUTME: Exports connection management, catalog operations, and the record type.

from musicdb.db.catalog import TrackCatalog, TrackNotFoundError
from musicdb.db.connection import DEFAULT_DB_PATH, open_catalog
from musicdb.db.export import write_tracks_csv
from musicdb.db.mapping import TrackRecord

__all__ = [
    "DEFAULT_DB_PATH",
    "TrackCatalog",
    "TrackNotFoundError",
    "TrackRecord",
    "open_catalog",
    "write_tracks_csv",
]
