# ABOUTME: SourceAdapter protocol defining the contract for external catalog sources.
# ABOUTME: Any catalog (J-WID, NexTone, ...) turns a Query into RawCandidates by implementing this.

from typing import Protocol, runtime_checkable

from musicdb.lookup.candidate import RawCandidate
from musicdb.lookup.types import Query, SourceId


@runtime_checkable
class SourceAdapter(Protocol):
    """Protocol for catalog search sources.

    Implementations own their request building and document parsing. An
    unreachable source (SourceUnavailable) yields an empty list, as does a
    page with no recognizable hits; any other error propagates to the
    orchestrator, which absorbs it per source.
    """

    @property
    def source(self) -> SourceId: ...

    async def search(self, query: Query) -> list[RawCandidate]: ...
