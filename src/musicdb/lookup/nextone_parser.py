# ABOUTME: Parsing for NexTone search result pages.
# ABOUTME: Converts .result-item blocks into RawCandidate instances tagged with SourceId.NEXTONE.

from musicdb.lookup.candidate import RawCandidate
from musicdb.lookup.normalizer import normalize_work_code
from musicdb.lookup.parsing import load_document, select_link, select_text
from musicdb.lookup.types import SourceId

_ITEM_SELECTOR = ".result-item"


def parse_nextone_results(html: str, base_url: str) -> list[RawCandidate]:
    """Parse a NexTone search page into raw candidates.

    NexTone result items rarely carry a work code; when a ``.code`` element is
    present and valid it is kept. Items without a title are skipped.
    """
    document = load_document(html)
    results: list[RawCandidate] = []

    for item in document.select(_ITEM_SELECTOR):
        title = select_text(item, ".title")
        if not title:
            continue

        code_raw = select_text(item, ".code")
        if normalize_work_code(code_raw) is None:
            code_raw = None

        results.append(
            RawCandidate(
                title=title,
                artist=select_text(item, ".artist"),
                work_code_raw=code_raw,
                url=select_link(item, "a", base_url),
                source=SourceId.NEXTONE,
                bpm=select_text(item, ".bpm"),
                key=select_text(item, ".key"),
            )
        )

    return results
