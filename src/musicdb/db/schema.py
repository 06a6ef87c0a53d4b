# ABOUTME: SQL DDL for the musicdb track catalog.
# ABOUTME: One tracks table; codes must be canonical and confidence stays within 0-100.

# Stored in PRAGMA user_version once SCHEMA has been applied.
SCHEMA_VERSION = 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS tracks (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    title_norm   TEXT NOT NULL,
    artist_norm  TEXT NOT NULL DEFAULT '',
    work_code    TEXT CHECK (
        work_code IS NULL
        OR work_code GLOB '[0-9][0-9][0-9]-[0-9][0-9][0-9][0-9]-[0-9]'
    ),
    bpm          TEXT,
    key          TEXT,
    confidence   INTEGER NOT NULL DEFAULT 0 CHECK (confidence BETWEEN 0 AND 100),
    provenance   TEXT NOT NULL DEFAULT '{}',
    updated_at   TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))
);

-- find() and list_by_artist() filter on these and sort newest first
CREATE INDEX IF NOT EXISTS idx_tracks_title ON tracks(title_norm, updated_at);
CREATE INDEX IF NOT EXISTS idx_tracks_artist ON tracks(artist_norm, updated_at);
CREATE INDEX IF NOT EXISTS idx_tracks_updated ON tracks(updated_at);
"""
