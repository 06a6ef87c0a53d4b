# ABOUTME: Candidate records produced by source adapters and refined by the pipeline.
# ABOUTME: RawCandidate -> NormalizedCandidate -> ScoredCandidate, all per-query and ephemeral.

from dataclasses import dataclass

from musicdb.lookup.types import SourceId


@dataclass(frozen=True)
class RawCandidate:
    """A single source's proposed match for a query, as parsed from its document."""

    title: str
    url: str
    source: SourceId
    artist: str | None = None
    work_code_raw: str | None = None
    bpm: str | None = None
    key: str | None = None


@dataclass(frozen=True)
class NormalizedCandidate:
    """A RawCandidate plus its canonical work code, or None if it has no valid code."""

    raw: RawCandidate
    work_code: str | None


@dataclass(frozen=True)
class ScoredCandidate:
    """A NormalizedCandidate with its integer match score against the query."""

    candidate: NormalizedCandidate
    score: int

    def __post_init__(self) -> None:
        if self.score < 0:
            msg = f"score must be non-negative, got {self.score}"
            raise ValueError(msg)

    @property
    def raw(self) -> RawCandidate:
        """Convenience property: the underlying raw candidate."""
        return self.candidate.raw
