# ABOUTME: Canonicalization of free text and catalog work codes.
# ABOUTME: Text is trimmed, case-folded, and whitespace-collapsed; codes become ddd-dddd-d.

import re

from musicdb.lookup.candidate import NormalizedCandidate, RawCandidate

_WHITESPACE_RE = re.compile(r"\s+")
# ASCII only: full-width digits are stripped along with every other non-digit.
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_CANONICAL_CODE_RE = re.compile(r"^[0-9]{3}-[0-9]{4}-[0-9]$")

_CODE_DIGITS = 8


def normalize_text(text: str | None) -> str:
    """Trim, case-fold, and collapse internal whitespace runs to a single space.

    None is treated as the empty string so optional fields compare cleanly.
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.strip()).casefold()


def normalize_work_code(raw: str | None) -> str | None:
    """Reduce a raw work code to canonical ``ddd-dddd-d`` form.

    Every non-digit character is stripped first. Only an exactly 8-digit
    remainder is accepted; anything else returns None.
    """
    if not raw:
        return None
    digits = _NON_DIGIT_RE.sub("", raw)
    if len(digits) != _CODE_DIGITS:
        return None
    formatted = f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"
    if not _CANONICAL_CODE_RE.match(formatted):
        return None
    return formatted


def normalize_candidate(raw: RawCandidate) -> NormalizedCandidate:
    """Attach the canonical work code (or None) to a raw candidate."""
    return NormalizedCandidate(raw=raw, work_code=normalize_work_code(raw.work_code_raw))
