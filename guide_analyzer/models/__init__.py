"""Pydantic models shared by the pipeline, search, export and UI layers.

Provides type safety and validation for data crossing component boundaries.

Models:
    - PDFDocument: Selected PDF awaiting processing
    - AnalysisResult: Structured summary returned by the analyzer
    - SearchCriteria / SearchOutcome: Full-text search input and output
    - SessionView: Read-only snapshot of the document session
    - ExportPayload: File body for downloads
"""

from guide_analyzer.models.schemas import (
    PDF_MIME_TYPE,
    AnalysisResult,
    ErrorCode,
    ErrorInfo,
    ExportFormat,
    ExportPayload,
    HighlightSegment,
    PDFDocument,
    PipelineStatus,
    SearchCriteria,
    SearchOutcome,
    SessionView,
)

__all__ = [
    "PDF_MIME_TYPE",
    "AnalysisResult",
    "ErrorCode",
    "ErrorInfo",
    "ExportFormat",
    "ExportPayload",
    "HighlightSegment",
    "PDFDocument",
    "PipelineStatus",
    "SearchCriteria",
    "SearchOutcome",
    "SessionView",
]
