"""Keyword search and highlighting over extracted document text.

The keyword is always matched literally. A compiled rule has exactly one
capturing group around the keyword so ``re.split`` returns matched text at
odd positions, which is what the highlighter relies on.
"""

import re
from functools import lru_cache

from guide_analyzer.models.schemas import HighlightSegment, SearchCriteria, SearchOutcome


def compile_rule(criteria: SearchCriteria) -> re.Pattern[str] | None:
    """Compile search criteria into a matching rule.

    Args:
        criteria: Keyword and matching options.

    Returns:
        Compiled pattern, or None when the keyword is blank.
    """
    if not criteria.keyword.strip():
        return None

    body = re.escape(criteria.keyword)
    if criteria.whole_word:
        body = rf"\b{body}\b"

    flags = 0 if criteria.case_sensitive else re.IGNORECASE
    return re.compile(f"({body})", flags)


def count_matches(text: str, rule: re.Pattern[str] | None) -> int | None:
    """Count non-overlapping matches of a rule.

    Returns:
        Number of matches, or None when no rule is active.
    """
    if rule is None:
        return None
    return sum(1 for _ in rule.finditer(text))


def highlight(text: str, rule: re.Pattern[str] | None) -> list[HighlightSegment]:
    """Split text into matched and unmatched segments.

    Concatenating the segment texts in order reproduces ``text`` exactly.
    Matched segments keep the casing found in the text.

    Args:
        text: Full text to segment.
        rule: Compiled rule from ``compile_rule``.

    Returns:
        Ordered segments with empty pieces dropped.
    """
    if not text:
        return []
    if rule is None:
        return [HighlightSegment(text=text)]

    segments: list[HighlightSegment] = []
    for index, part in enumerate(rule.split(text)):
        if part:
            segments.append(HighlightSegment(text=part, is_match=index % 2 == 1))
    return segments


@lru_cache(maxsize=64)
def search(text: str, criteria: SearchCriteria) -> SearchOutcome:
    """Apply search criteria to a text.

    Memoized on ``(text, criteria)`` so repeated renders with unchanged
    input do not rescan the document.

    Args:
        text: Extracted document text.
        criteria: Keyword and matching options.

    Returns:
        Highlight segments and the match count (None when no search is active).
    """
    if not text:
        return SearchOutcome()

    rule = compile_rule(criteria)
    return SearchOutcome(
        segments=tuple(highlight(text, rule)),
        match_count=count_matches(text, rule),
    )
