"""User-facing error taxonomy.

Every failure that reaches the user is one of these exceptions. Each carries
an ``ErrorCode`` so the session can hold a single structured error.
"""

from guide_analyzer.models.schemas import ErrorCode, ErrorInfo


class GuideAnalyzerError(Exception):
    """Base class for errors shown to the user."""

    code: ErrorCode = ErrorCode.EXTRACTION_FAILED
    default_message: str = "An unknown error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_info(self) -> ErrorInfo:
        """Convert to the serializable error held by the session."""
        return ErrorInfo(code=self.code, message=self.message)


class InvalidFileTypeError(GuideAnalyzerError):
    code = ErrorCode.INVALID_FILE_TYPE
    default_message = "Please select a file in PDF format."


class NoDocumentSelectedError(GuideAnalyzerError):
    code = ErrorCode.NO_DOCUMENT_SELECTED
    default_message = "No file selected."


class OfflineError(GuideAnalyzerError):
    code = ErrorCode.OFFLINE
    default_message = "You are offline. Connect to the internet to analyze the document."


class ExtractionError(GuideAnalyzerError):
    """Raised when PDF text extraction fails."""

    code = ErrorCode.EXTRACTION_FAILED
    default_message = "Could not process the PDF file."


class PasswordProtectedError(ExtractionError):
    code = ErrorCode.EXTRACTION_PASSWORD_PROTECTED
    default_message = "The PDF is password-protected and cannot be processed."


class DocumentTooShortError(GuideAnalyzerError):
    code = ErrorCode.DOCUMENT_TOO_SHORT
    default_message = "The document is too short to analyze."


class AnalysisError(GuideAnalyzerError):
    """Base class for structured analysis failures."""

    code = ErrorCode.ANALYSIS_SERVICE_ERROR
    default_message = "Could not analyze the guide. Please try again."


class AnalysisUnavailableError(AnalysisError):
    code = ErrorCode.ANALYSIS_UNAVAILABLE
    default_message = "The analysis service is not configured (missing API key)."


class AnalysisServiceError(AnalysisError):
    code = ErrorCode.ANALYSIS_SERVICE_ERROR
    default_message = "Could not analyze the guide. Please try again."


class AnalysisMalformedResponseError(AnalysisError):
    code = ErrorCode.ANALYSIS_MALFORMED_RESPONSE
    default_message = "Could not parse the response from the analysis service. Please try again."


class ClipboardWriteError(GuideAnalyzerError):
    code = ErrorCode.CLIPBOARD_WRITE_FAILED
    default_message = "Could not copy the analysis to the clipboard."
