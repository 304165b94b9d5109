"""HTML helpers for the analyzer page.

Kept free of NiceGUI imports so they can be tested without a running UI.
"""

from collections.abc import Iterable
from html import escape

from guide_analyzer.models.schemas import HighlightSegment, PipelineStatus

MARK_CLASSES = "bg-sky-300 rounded px-1"

STATUS_MESSAGES = {
    PipelineStatus.EXTRACTING: "Extracting text from the PDF...",
    PipelineStatus.ANALYZING: "Analyzing the document... This may take a while.",
}


def highlight_to_html(segments: Iterable[HighlightSegment]) -> str:
    """Render highlight segments as HTML.

    Text is escaped; matched segments are wrapped in ``<mark>``.
    """
    parts = []
    for segment in segments:
        text = escape(segment.text)
        if segment.is_match:
            parts.append(f'<mark class="{MARK_CLASSES}">{text}</mark>')
        else:
            parts.append(text)
    return "".join(parts)


def match_count_label(match_count: int | None) -> str | None:
    """Describe a match count, or None when no search is active."""
    if match_count is None:
        return None
    if match_count == 0:
        return "No matches"
    if match_count == 1:
        return "1 match"
    return f"{match_count} matches"


def status_message(status: PipelineStatus) -> str:
    """Loading text shown while a run is in progress."""
    return STATUS_MESSAGES.get(status, "Working...")
