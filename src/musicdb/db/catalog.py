# ABOUTME: CRUD operations for the musicdb track catalog.
# ABOUTME: Local-first track lookup, seeding, storing lookup results, listing, and export rows.

import json
import sqlite3

from musicdb.db.mapping import TrackRecord, row_to_record
from musicdb.lookup.types import LookupResult

MAX_ARTIST_LIST = 50
MAX_EXPORT_ROWS = 5000

_NOW_SQL = "strftime('%Y-%m-%dT%H:%M:%f', 'now')"


class TrackNotFoundError(ValueError):
    """Raised when updating a track id that does not exist."""


def _clean(text: str | None) -> str:
    return (text or "").strip()


class TrackCatalog:
    """Wraps a sqlite3 connection and provides typed access to the tracks table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def find(self, title: str, artist: str | None = None) -> TrackRecord | None:
        """Return the most recently updated track matching title and artist.

        An empty artist matches any stored artist.
        """
        artist_clean = _clean(artist)
        cursor = self._conn.execute(
            "SELECT * FROM tracks "
            "WHERE title_norm = ? AND (artist_norm = ? OR ? = '') "
            "ORDER BY updated_at DESC, id DESC LIMIT 1",
            (_clean(title), artist_clean, artist_clean),
        )
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def get_by_id(self, track_id: int) -> TrackRecord | None:
        cursor = self._conn.execute("SELECT * FROM tracks WHERE id = ?", (track_id,))
        row = cursor.fetchone()
        return row_to_record(row) if row else None

    def add_seed(self, title: str, artist: str | None = None) -> int:
        """Insert a placeholder track for a query that has no local record yet.

        Returns:
            The row ID of the inserted track.
        """
        cursor = self._conn.execute(
            "INSERT INTO tracks (title_norm, artist_norm, confidence, provenance) "
            "VALUES (?, ?, 0, ?)",
            (_clean(title), _clean(artist), json.dumps({"status": "seed"})),
        )
        self._conn.commit()
        return cursor.lastrowid  # type: ignore[return-value]

    def apply_result(self, track_id: int, result: LookupResult) -> None:
        """Store an external lookup result on an existing track.

        Provenance keys from the result are merged over the stored ones.

        Raises:
            TrackNotFoundError: If the track_id does not exist.
        """
        existing = self.get_by_id(track_id)
        if existing is None:
            raise TrackNotFoundError(f"No track with id {track_id}")

        provenance = {**existing.provenance, **result.provenance.to_dict()}
        self._conn.execute(
            "UPDATE tracks SET work_code = ?, bpm = ?, key = ?, confidence = ?, "
            f"provenance = ?, updated_at = {_NOW_SQL} WHERE id = ?",
            (
                result.work_code,
                result.bpm,
                result.key,
                result.confidence,
                json.dumps(provenance),
                track_id,
            ),
        )
        self._conn.commit()

    def list_by_artist(self, artist: str, limit: int = 25) -> list[TrackRecord]:
        """Return an artist's tracks, newest first, at most MAX_ARTIST_LIST."""
        limit = max(1, min(limit, MAX_ARTIST_LIST))
        cursor = self._conn.execute(
            "SELECT * FROM tracks WHERE artist_norm = ? "
            "ORDER BY updated_at DESC, id DESC LIMIT ?",
            (_clean(artist), limit),
        )
        return [row_to_record(row) for row in cursor.fetchall()]

    def export_rows(self, limit: int = MAX_EXPORT_ROWS) -> list[TrackRecord]:
        """Return the most recently updated tracks for CSV export."""
        cursor = self._conn.execute(
            "SELECT * FROM tracks ORDER BY updated_at DESC, id DESC LIMIT ?",
            (limit,),
        )
        return [row_to_record(row) for row in cursor.fetchall()]
