# ABOUTME: Parsing for J-WID search result pages.
# ABOUTME: Converts result-table rows into RawCandidate instances tagged with SourceId.JWID.

from musicdb.lookup.candidate import RawCandidate
from musicdb.lookup.normalizer import normalize_work_code
from musicdb.lookup.parsing import load_document, select_link, select_text
from musicdb.lookup.types import SourceId

_ROW_SELECTOR = "table.search-results tr.result"


def parse_jwid_results(html: str, base_url: str) -> list[RawCandidate]:
    """Parse a J-WID search page into raw candidates.

    Each ``tr.result`` row of the results table is one hit. Rows without a
    title are skipped. A work code that does not reduce to 8 digits is
    dropped from the candidate rather than dropping the row.
    """
    document = load_document(html)
    results: list[RawCandidate] = []

    for row in document.select(_ROW_SELECTOR):
        title = select_text(row, ".title")
        if not title:
            continue

        code_raw = select_text(row, ".workcode")
        if normalize_work_code(code_raw) is None:
            code_raw = None

        results.append(
            RawCandidate(
                title=title,
                artist=select_text(row, ".artist"),
                work_code_raw=code_raw,
                url=select_link(row, "a.detail", base_url),
                source=SourceId.JWID,
                bpm=select_text(row, ".bpm"),
                key=select_text(row, ".key"),
            )
        )

    return results
