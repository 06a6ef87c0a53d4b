# ABOUTME: End-to-end external lookup: concurrent fan-out, scoring, best-match selection.
# ABOUTME: Absorbs per-source failures and returns a LookupResult or None when nothing matched.

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from musicdb.lookup.adapter import SourceAdapter
from musicdb.lookup.candidate import RawCandidate, ScoredCandidate
from musicdb.lookup.http import DEFAULT_TIMEOUT, HtmlFetcher
from musicdb.lookup.jwid import JWID_BASE_URL, JwidAdapter
from musicdb.lookup.nextone import NEXTONE_BASE_URL, NextoneAdapter
from musicdb.lookup.normalizer import normalize_candidate
from musicdb.lookup.scheduler import RateLimitedScheduler, SourcePolicy
from musicdb.lookup.scoring import score_candidate
from musicdb.lookup.types import (
    AUTHORITATIVE_SOURCES,
    LookupResult,
    Provenance,
    Query,
    SourceId,
)

logger = logging.getLogger(__name__)

# Confidence base when the winner is an authoritative source with a recovered code.
_CONFIDENCE_AUTHORITATIVE = 95
_CONFIDENCE_DEFAULT = 80
# Empirical: scores above this mean at least title plus one other component matched.
_HIGH_SCORE_THRESHOLD = 70
_HIGH_SCORE_BONUS = 5


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def compute_confidence(best: ScoredCandidate) -> int:
    """Confidence in [0, 100] for the selected candidate.

    The base depends on whether the source is authoritative for work codes
    and a code was actually recovered; a strong score adds a fixed bonus.
    """
    authoritative = (
        best.raw.source in AUTHORITATIVE_SOURCES and best.candidate.work_code is not None
    )
    confidence = _CONFIDENCE_AUTHORITATIVE if authoritative else _CONFIDENCE_DEFAULT
    if best.score > _HIGH_SCORE_THRESHOLD:
        confidence += _HIGH_SCORE_BONUS
    return max(0, min(100, confidence))


def select_best(candidates: Sequence[ScoredCandidate]) -> ScoredCandidate | None:
    """Pick the highest-scoring candidate; on ties the earliest one wins."""
    best: ScoredCandidate | None = None
    for scored in candidates:
        if best is None or scored.score > best.score:
            best = scored
    return best


class LookupOrchestrator:
    """Runs a query against every registered adapter and selects one best match.

    Adapters are searched concurrently. Their registration order is the
    source priority used to break score ties. A failing adapter contributes
    no candidates and never prevents the others from contributing.
    """

    def __init__(
        self,
        adapters: Sequence[SourceAdapter],
        *,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._adapters = list(adapters)
        self._now = now

    @property
    def adapters(self) -> list[SourceAdapter]:
        return list(self._adapters)

    async def gather_candidates(self, query: Query) -> list[RawCandidate]:
        """Search all adapters concurrently and concatenate results in priority order."""
        outcomes = await asyncio.gather(
            *(adapter.search(query) for adapter in self._adapters),
            return_exceptions=True,
        )

        candidates: list[RawCandidate] = []
        for adapter, outcome in zip(self._adapters, outcomes):
            if isinstance(outcome, Exception):
                logger.warning(
                    "Source %s failed for title=%s: %r",
                    adapter.source.value,
                    query.title,
                    outcome,
                )
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            candidates.extend(outcome)
        return candidates

    async def lookup(self, query: Query) -> LookupResult | None:
        """Resolve a query to its best external match.

        Returns None when no source produced any candidate, including when
        every source failed.
        """
        candidates = await self.gather_candidates(query)
        if not candidates:
            logger.info("No external match for title=%s artist=%s", query.title, query.artist)
            return None

        scored = []
        for raw in candidates:
            normalized = normalize_candidate(raw)
            scored.append(
                ScoredCandidate(candidate=normalized, score=score_candidate(query, normalized))
            )

        best = select_best(scored)
        assert best is not None
        logger.debug(
            "Best of %d candidate(s): %s %r (score %d)",
            len(scored),
            best.raw.source.value,
            best.raw.title,
            best.score,
        )

        return LookupResult(
            work_code=best.candidate.work_code,
            bpm=best.raw.bpm,
            key=best.raw.key,
            confidence=compute_confidence(best),
            provenance=Provenance(
                source=best.raw.source,
                url=best.raw.url,
                fetched_at=self._now(),
            ),
        )


@dataclass(frozen=True)
class LookupSettings:
    """Process-wide configuration for the external lookup stack."""

    timeout: float = DEFAULT_TIMEOUT
    jwid_url: str = JWID_BASE_URL
    nextone_url: str = NEXTONE_BASE_URL
    policies: dict[SourceId, SourcePolicy] = field(
        default_factory=lambda: {
            SourceId.JWID: SourcePolicy(),
            SourceId.NEXTONE: SourcePolicy(),
        }
    )

    def policy_for(self, source: SourceId) -> SourcePolicy:
        return self.policies.get(source, SourcePolicy())


def build_schedulers(settings: LookupSettings) -> dict[SourceId, RateLimitedScheduler]:
    """Create one scheduler per source from the configured policies.

    The schedulers hold the rate-limit budget for their source, so a process
    builds them once and passes them to every orchestrator it creates.
    """
    return {
        source: RateLimitedScheduler(source.value, settings.policy_for(source))
        for source in (SourceId.JWID, SourceId.NEXTONE)
    }


def build_orchestrator(
    fetcher: HtmlFetcher,
    settings: LookupSettings | None = None,
    *,
    schedulers: Mapping[SourceId, RateLimitedScheduler] | None = None,
) -> LookupOrchestrator:
    """Create the orchestrator with J-WID registered ahead of NexTone.

    Pass ``schedulers`` from build_schedulers to share rate limits with
    earlier orchestrators; otherwise fresh schedulers are created.
    """
    settings = settings or LookupSettings()
    if schedulers is None:
        schedulers = build_schedulers(settings)
    return LookupOrchestrator(
        [
            JwidAdapter(fetcher, schedulers[SourceId.JWID], base_url=settings.jwid_url),
            NextoneAdapter(
                fetcher, schedulers[SourceId.NEXTONE], base_url=settings.nextone_url
            ),
        ]
    )
