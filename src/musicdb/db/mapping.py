# ABOUTME: Converts track catalog rows into TrackRecord dataclasses.
# ABOUTME: Handles JSON deserialization of the provenance column.

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TrackRecord:
    """A stored track, either seeded from a query or resolved by a lookup."""

    id: int
    title: str
    artist: str
    work_code: str | None
    bpm: str | None
    key: str | None
    confidence: int
    provenance: dict[str, Any] = field(default_factory=dict)
    updated_at: str = ""

    @property
    def is_seed(self) -> bool:
        """Whether the row was created without an external result yet."""
        return self.provenance.get("status") == "seed" and "source" not in self.provenance


def row_to_record(row: Any) -> TrackRecord:
    """Convert a tracks row (dict-like) to a TrackRecord."""
    provenance = row["provenance"]
    return TrackRecord(
        id=row["id"],
        title=row["title_norm"],
        artist=row["artist_norm"] or "",
        work_code=row["work_code"],
        bpm=row["bpm"],
        key=row["key"],
        confidence=row["confidence"] or 0,
        provenance=json.loads(provenance) if provenance else {},
        updated_at=row["updated_at"],
    )
