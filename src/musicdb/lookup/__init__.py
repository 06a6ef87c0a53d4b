# ABOUTME: External lookup pipeline resolving work code, tempo, and key for a song query.
# ABOUTME: Exports the query/result types, the orchestrator, and its process-wide factory.

from musicdb.lookup.adapter import SourceAdapter
from musicdb.lookup.candidate import NormalizedCandidate, RawCandidate, ScoredCandidate
from musicdb.lookup.http import MusicdbHttpClient, SourceUnavailable
from musicdb.lookup.orchestrator import (
    LookupOrchestrator,
    LookupSettings,
    build_orchestrator,
    build_schedulers,
)
from musicdb.lookup.scheduler import RateLimitedScheduler, SourcePolicy
from musicdb.lookup.types import LookupResult, Provenance, Query, SourceId

__all__ = [
    "LookupOrchestrator",
    "LookupResult",
    "LookupSettings",
    "MusicdbHttpClient",
    "NormalizedCandidate",
    "Provenance",
    "Query",
    "RateLimitedScheduler",
    "RawCandidate",
    "ScoredCandidate",
    "SourceAdapter",
    "SourceId",
    "SourcePolicy",
    "SourceUnavailable",
    "build_orchestrator",
    "build_schedulers",
]
