# ABOUTME: Match scoring between a lookup query and a normalized candidate.
# ABOUTME: Three binary components (title, artist, work code) with fixed integer weights.

from musicdb.lookup.candidate import NormalizedCandidate
from musicdb.lookup.normalizer import normalize_text
from musicdb.lookup.types import Query

_WEIGHT_TITLE = 60
_WEIGHT_ARTIST = 25
# Awarded when the query has no artist, so absence is not scored as a mismatch.
_WEIGHT_NO_ARTIST = 10
_WEIGHT_WORK_CODE = 30

MAX_SCORE = _WEIGHT_TITLE + _WEIGHT_ARTIST + _WEIGHT_WORK_CODE


def _mutual_substring(a: str, b: str) -> bool:
    """True when either normalized string contains the other."""
    return a in b or b in a


def score_candidate(query: Query, candidate: NormalizedCandidate) -> int:
    """Score how well a candidate matches a query.

    Returns an integer in [0, MAX_SCORE]. Each component is all-or-nothing:
    title 60, artist 25 (or a flat 10 when the query has no artist), and
    30 when the candidate carries a canonical work code.
    """
    score = 0

    query_title = normalize_text(query.title)
    if _mutual_substring(query_title, normalize_text(candidate.raw.title)):
        score += _WEIGHT_TITLE

    query_artist = normalize_text(query.artist)
    if not query_artist:
        score += _WEIGHT_NO_ARTIST
    elif _mutual_substring(query_artist, normalize_text(candidate.raw.artist)):
        score += _WEIGHT_ARTIST

    if candidate.work_code is not None:
        score += _WEIGHT_WORK_CODE

    return score
