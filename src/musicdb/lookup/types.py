# ABOUTME: Core data structures for the external lookup pipeline.
# ABOUTME: Query is the pipeline input; LookupResult with Provenance is its output.

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class SourceId(str, Enum):
    """Identifiers of the external catalog sources, written downstream verbatim."""

    JWID = "J-WID"
    NEXTONE = "NexTone"


# Sources whose work codes are treated as authoritative when present.
AUTHORITATIVE_SOURCES = frozenset({SourceId.JWID})


@dataclass(frozen=True)
class Query:
    """A song identified by free-text title and optional artist."""

    title: str
    artist: str | None = None


@dataclass(frozen=True)
class Provenance:
    """Which source, URL, and time produced a lookup result."""

    source: SourceId
    url: str
    fetched_at: datetime

    def to_dict(self) -> dict[str, str]:
        return {
            "source": self.source.value,
            "url": self.url,
            "fetched_at": self.fetched_at.isoformat(),
        }


@dataclass(frozen=True)
class LookupResult:
    """The selected best match for a query.

    Carries the winning candidate's catalog data plus a confidence estimate
    in [0, 100] and the provenance of the single source it came from.
    """

    confidence: int
    provenance: Provenance
    work_code: str | None = None
    bpm: str | None = None
    key: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.confidence <= 100:
            msg = f"confidence must be between 0 and 100, got {self.confidence}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the shape the track catalog and JSON output consume."""
        return {
            "work_code": self.work_code,
            "bpm": self.bpm,
            "key": self.key,
            "confidence": self.confidence,
            "provenance": self.provenance.to_dict(),
        }
