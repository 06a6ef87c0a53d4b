# ABOUTME: Unit tests for the J-WID and NexTone HTML parsers.
# ABOUTME: Validates hit extraction, skipped hits, dropped codes, and link resolution.

from musicdb.lookup.jwid_parser import parse_jwid_results
from musicdb.lookup.nextone_parser import parse_nextone_results
from musicdb.lookup.types import SourceId
from tests.fixtures.catalog_pages import (
    JWID_RESULTS_HTML,
    JWID_URL,
    NEXTONE_RESULTS_HTML,
    NEXTONE_URL,
    NO_RESULTS_HTML,
    NOT_HTML,
)


class TestParseJwidResults:
    """Tests for parse_jwid_results."""

    def test_extracts_rows_with_titles(self) -> None:
        """Rows with a title become candidates; the blank-title row is skipped."""
        results = parse_jwid_results(JWID_RESULTS_HTML, JWID_URL)
        assert [r.title for r in results] == ["Sample Song", "Sample Song (Remix)"]

    def test_full_row_fields(self) -> None:
        first = parse_jwid_results(JWID_RESULTS_HTML, JWID_URL)[0]
        assert first.artist == "Artist X"
        assert first.work_code_raw == "1234567-8"
        assert first.bpm == "128"
        assert first.key == "A minor"
        assert first.source is SourceId.JWID

    def test_relative_detail_link_is_resolved(self) -> None:
        first = parse_jwid_results(JWID_RESULTS_HTML, JWID_URL)[0]
        assert first.url == "https://www2.jasrac.or.jp/eJwid/detail?code=12345678"

    def test_invalid_code_keeps_row_without_code(self) -> None:
        """An unparsable work code drops the field, not the hit."""
        second = parse_jwid_results(JWID_RESULTS_HTML, JWID_URL)[1]
        assert second.work_code_raw is None
        assert second.bpm is None
        assert second.key is None

    def test_missing_link_falls_back_to_request_url(self) -> None:
        second = parse_jwid_results(JWID_RESULTS_HTML, JWID_URL)[1]
        assert second.url == JWID_URL

    def test_no_results_page_returns_empty(self) -> None:
        assert parse_jwid_results(NO_RESULTS_HTML, JWID_URL) == []

    def test_unexpected_document_returns_empty(self) -> None:
        assert parse_jwid_results(NOT_HTML, JWID_URL) == []
        assert parse_jwid_results("", JWID_URL) == []


class TestParseNextoneResults:
    """Tests for parse_nextone_results."""

    def test_extracts_items_with_titles(self) -> None:
        results = parse_nextone_results(NEXTONE_RESULTS_HTML, NEXTONE_URL)
        assert [r.title for r in results] == ["Sample Song", "Other Song"]
        assert all(r.source is SourceId.NEXTONE for r in results)

    def test_item_without_code(self) -> None:
        first = parse_nextone_results(NEXTONE_RESULTS_HTML, NEXTONE_URL)[0]
        assert first.artist == "Artist X"
        assert first.work_code_raw is None
        assert first.url == "https://search.nex-tone.co.jp/work/N0001"

    def test_item_with_code_and_tempo(self) -> None:
        second = parse_nextone_results(NEXTONE_RESULTS_HTML, NEXTONE_URL)[1]
        assert second.work_code_raw == "9876-5432"
        assert second.bpm == "90"
        assert second.key == "C major"
        assert second.url == "https://search.nex-tone.co.jp/work/N0002"

    def test_no_results_page_returns_empty(self) -> None:
        assert parse_nextone_results(NO_RESULTS_HTML, NEXTONE_URL) == []
        assert parse_nextone_results(NOT_HTML, NEXTONE_URL) == []
