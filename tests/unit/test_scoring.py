# ABOUTME: Unit tests for query/candidate match scoring.
# ABOUTME: Validates the fixed title, artist, and work-code weights and their bounds.

import itertools

import pytest

from musicdb.lookup.candidate import NormalizedCandidate, RawCandidate
from musicdb.lookup.scoring import MAX_SCORE, score_candidate
from musicdb.lookup.types import Query, SourceId


def _candidate(
    title: str, artist: str | None = None, work_code: str | None = None
) -> NormalizedCandidate:
    raw = RawCandidate(
        title=title,
        artist=artist,
        url="https://example.com/hit",
        source=SourceId.JWID,
        work_code_raw=work_code,
    )
    return NormalizedCandidate(raw=raw, work_code=work_code)


class TestScoreCandidate:
    """Tests for score_candidate."""

    def test_full_match_scores_maximum(self) -> None:
        """Matching title and artist plus a code scores 115."""
        query = Query(title="Sample Song", artist="Artist X")
        score = score_candidate(query, _candidate("Sample Song", "Artist X", "123-4567-8"))
        assert score == 115
        assert MAX_SCORE == 115

    def test_title_only_match(self) -> None:
        query = Query(title="Sample Song", artist="Artist X")
        assert score_candidate(query, _candidate("Sample Song", "Someone Else")) == 60

    def test_title_substring_either_direction(self) -> None:
        """Title matches when either normalized string contains the other."""
        query = Query(title="Sample")
        assert score_candidate(query, _candidate("Sample Song (Live)")) == 70
        query = Query(title="Sample Song (Live)")
        assert score_candidate(query, _candidate("sample song")) == 70

    def test_title_mismatch_scores_zero_for_title(self) -> None:
        query = Query(title="Sample Song", artist="Artist X")
        assert score_candidate(query, _candidate("Different Tune", "Artist X")) == 25

    def test_case_and_whitespace_insensitive(self) -> None:
        query = Query(title="  SAMPLE   song ", artist="artist   x")
        assert score_candidate(query, _candidate("Sample Song", "ARTIST X")) == 85

    def test_code_adds_thirty(self) -> None:
        query = Query(title="Nothing Alike", artist="Nobody")
        assert score_candidate(query, _candidate("Other", "Someone", "123-4567-8")) == 30

    def test_nothing_matches_scores_zero(self) -> None:
        query = Query(title="Nothing Alike", artist="Nobody")
        assert score_candidate(query, _candidate("Other", "Someone")) == 0

    @pytest.mark.parametrize("candidate_artist", [None, "", "Artist X", "Completely Different"])
    def test_no_query_artist_is_flat_ten(self, candidate_artist: str | None) -> None:
        """Without a query artist the artist component is always 10."""
        query = Query(title="Unrelated")
        assert score_candidate(query, _candidate("Other", candidate_artist)) == 10

    def test_blank_query_artist_counts_as_absent(self) -> None:
        query = Query(title="Unrelated", artist="   ")
        assert score_candidate(query, _candidate("Other", "Artist X")) == 10

    def test_candidate_without_artist_matches_any_query_artist(self) -> None:
        """An empty candidate artist is a substring of every query artist."""
        query = Query(title="Unrelated", artist="Artist X")
        assert score_candidate(query, _candidate("Other", None)) == 25

    def test_score_is_sum_of_component_values(self) -> None:
        """Every score is title(0|60) + artist(0|10|25) + code(0|30)."""
        allowed = {t + a + c for t, a, c in itertools.product((0, 60), (0, 10, 25), (0, 30))}
        queries = [Query("Sample Song", "Artist X"), Query("Sample Song"), Query("Zzz", "Q")]
        candidates = [
            _candidate("Sample Song", "Artist X", "123-4567-8"),
            _candidate("Sample", "Artist"),
            _candidate("Unrelated", "Other", "000-0000-0"),
            _candidate("Unrelated", None),
        ]
        for query, candidate in itertools.product(queries, candidates):
            score = score_candidate(query, candidate)
            assert score in allowed
            assert 0 <= score <= MAX_SCORE
