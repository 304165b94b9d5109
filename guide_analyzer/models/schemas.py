from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PDF_MIME_TYPE = "application/pdf"


class PipelineStatus(str, Enum):
    """Status values for a document pipeline run."""

    IDLE = "idle"
    EXTRACTING = "extracting"
    TOO_SHORT = "too_short"
    ANALYZING = "analyzing"
    ANALYZED = "analyzed"
    FAILED = "failed"


class ErrorCode(str, Enum):
    """Identifiers for every user-facing error."""

    INVALID_FILE_TYPE = "invalid_file_type"
    NO_DOCUMENT_SELECTED = "no_document_selected"
    OFFLINE = "offline"
    EXTRACTION_PASSWORD_PROTECTED = "extraction_password_protected"
    EXTRACTION_FAILED = "extraction_failed"
    DOCUMENT_TOO_SHORT = "document_too_short"
    ANALYSIS_UNAVAILABLE = "analysis_unavailable"
    ANALYSIS_SERVICE_ERROR = "analysis_service_error"
    ANALYSIS_MALFORMED_RESPONSE = "analysis_malformed_response"
    CLIPBOARD_WRITE_FAILED = "clipboard_write_failed"


class ExportFormat(str, Enum):
    """Download formats for an analysis result."""

    MARKDOWN = "markdown"
    JSON = "json"


class PDFDocument(BaseModel):
    """A selected PDF awaiting processing.

    Attributes:
        payload: Raw bytes of the file.
        file_name: Original file name.
        mime_type: MIME type reported by the file picker.
    """

    model_config = ConfigDict(frozen=True)

    payload: bytes = Field(repr=False)
    file_name: str
    mime_type: str


class AnalysisResult(BaseModel):
    """Structured summary of a guide returned by the analyzer.

    Attributes:
        overview: Short overview of the guide (2-4 sentences).
        components: Components required for the build.
        tools: Tools required for the build.
        steps: Main build steps, in order.
    """

    model_config = ConfigDict(strict=True)

    overview: str = Field(
        ..., min_length=1, description="Short overview of the guide in 2-4 sentences."
    )
    components: list[str] = Field(
        ..., description="Main components mentioned in the text that are required for the build."
    )
    tools: list[str] = Field(
        ..., description="Tools mentioned in the text that are required for the build."
    )
    steps: list[str] = Field(
        ..., description="Main steps of the build process, described briefly."
    )


class SearchCriteria(BaseModel):
    """Keyword search options for the full-text view.

    Attributes:
        keyword: Literal text to look for.
        case_sensitive: Match letter case exactly.
        whole_word: Only match the keyword as a whole word.
    """

    model_config = ConfigDict(frozen=True)

    keyword: str = ""
    case_sensitive: bool = False
    whole_word: bool = False


class HighlightSegment(BaseModel):
    """A piece of text that is either a search match or the text between matches."""

    model_config = ConfigDict(frozen=True)

    text: str
    is_match: bool = False


class SearchOutcome(BaseModel):
    """Result of applying search criteria to a text.

    Attributes:
        segments: Ordered pieces whose concatenation is the original text.
        match_count: Number of matches, or None when no search is active.
    """

    model_config = ConfigDict(frozen=True)

    segments: tuple[HighlightSegment, ...] = ()
    match_count: int | None = None


class ErrorInfo(BaseModel):
    """The single error currently shown to the user."""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str


class SessionView(BaseModel):
    """Read-only snapshot of the document session.

    Attributes:
        status: Current pipeline status.
        file_name: Name of the armed document, empty when none.
        extracted_text: Text of the last successful extraction.
        analysis_result: Result of the last successful analysis.
        error: Error currently shown, if any.
        is_loading: Whether a run is in progress.
        generation: Counter identifying the current run.
    """

    model_config = ConfigDict(frozen=True)

    status: PipelineStatus
    file_name: str = ""
    extracted_text: str = ""
    analysis_result: AnalysisResult | None = None
    error: ErrorInfo | None = None
    is_loading: bool = False
    generation: int = 0


class ExportPayload(BaseModel):
    """File contents produced for a download.

    Attributes:
        filename: Suggested file name.
        content: Encoded file body.
        media_type: Content type of the body.
    """

    filename: str
    content: bytes = Field(repr=False)
    media_type: str
