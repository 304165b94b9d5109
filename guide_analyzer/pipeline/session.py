"""Document session state machine.

Owns the armed document, the extracted text, the analysis result and the
single displayed error. Only the methods of ``DocumentPipeline`` mutate that
state; everything else reads it through ``SessionView`` snapshots.

Runs are numbered by a generation counter. Selecting a document or starting
a run bumps the counter, and an asynchronous step commits its outcome only
if the generation it captured is still current. A superseded run therefore
finishes silently without touching the newer state.
"""

import logging
from collections.abc import Awaitable, Callable

from guide_analyzer.agent.analyzer import analyze_guide_text
from guide_analyzer.errors import (
    AnalysisError,
    AnalysisServiceError,
    ClipboardWriteError,
    DocumentTooShortError,
    ExtractionError,
    GuideAnalyzerError,
    InvalidFileTypeError,
    NoDocumentSelectedError,
    OfflineError,
)
from guide_analyzer.export.formatter import Exporter, copy_markdown, save_download
from guide_analyzer.models.schemas import (
    PDF_MIME_TYPE,
    AnalysisResult,
    ErrorInfo,
    ExportFormat,
    ExportPayload,
    PDFDocument,
    PipelineStatus,
    SearchCriteria,
    SearchOutcome,
    SessionView,
)
from guide_analyzer.parsing.pdf_parser import extract_text
from guide_analyzer.pipeline.config import get_pipeline_config
from guide_analyzer.pipeline.connectivity import ConnectivityMonitor, get_connectivity_monitor
from guide_analyzer.search.engine import search

logger = logging.getLogger(__name__)

Extractor = Callable[[bytes], Awaitable[str]]
Analyzer = Callable[[str], Awaitable[AnalysisResult]]


class DocumentPipeline:
    """Drives a document from selection through extraction and analysis.

    Status transitions:
        idle -> extracting -> analyzing -> analyzed
        extracting -> too_short (text not longer than ``min_text_length``)
        extracting | analyzing -> failed
        any -> idle on document selection
    """

    def __init__(
        self,
        extractor: Extractor | None = None,
        analyzer: Analyzer | None = None,
        connectivity: ConnectivityMonitor | None = None,
        min_text_length: int | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            extractor: Async PDF-to-text function. Defaults to pypdf extraction.
            analyzer: Async text-to-analysis function. Defaults to the Agno analyzer.
            connectivity: Online/offline gate. Defaults to the global monitor.
            min_text_length: Minimum text length for analysis. Defaults to config.
        """
        self._extractor = extractor or extract_text
        self._analyzer = analyzer or analyze_guide_text
        self._connectivity = connectivity or get_connectivity_monitor()
        if min_text_length is None:
            min_text_length = get_pipeline_config().min_text_length
        self._min_text_length = min_text_length

        self._status = PipelineStatus.IDLE
        self._document: PDFDocument | None = None
        self._extracted_text = ""
        self._analysis_result: AnalysisResult | None = None
        self._error: ErrorInfo | None = None
        self._is_loading = False
        self._generation = 0

    @property
    def view(self) -> SessionView:
        """Read-only snapshot of the current session."""
        return SessionView(
            status=self._status,
            file_name=self._document.file_name if self._document else "",
            extracted_text=self._extracted_text,
            analysis_result=self._analysis_result,
            error=self._error,
            is_loading=self._is_loading,
            generation=self._generation,
        )

    @property
    def has_document(self) -> bool:
        return self._document is not None

    def _clear_results(self) -> None:
        self._extracted_text = ""
        self._analysis_result = None

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _commit_error(self, generation: int, error: GuideAnalyzerError) -> None:
        if not self._is_current(generation):
            logger.debug(f"Discarding error from superseded run {generation}: {error}")
            return
        logger.warning(f"Run {generation} failed: {error.message}")
        self._status = PipelineStatus.FAILED
        self._error = error.to_info()

    def select_document(self, file_name: str, mime_type: str, payload: bytes) -> SessionView:
        """Arm a newly selected file.

        Any previous results, error and in-flight run are discarded. Files
        that are not PDFs are rejected and leave no document armed.

        Args:
            file_name: Original file name.
            mime_type: MIME type reported by the file picker.
            payload: File bytes.

        Returns:
            Session snapshot after the selection.
        """
        self._generation += 1
        self._status = PipelineStatus.IDLE
        self._is_loading = False
        self._error = None
        self._clear_results()

        if mime_type != PDF_MIME_TYPE:
            logger.warning(f"Rejected file {file_name!r} with type {mime_type!r}")
            self._document = None
            self._error = InvalidFileTypeError().to_info()
            return self.view

        self._document = PDFDocument(payload=payload, file_name=file_name, mime_type=mime_type)
        logger.info(f"Selected document: {file_name} ({len(payload)} bytes)")
        return self.view

    async def run(self) -> SessionView:
        """Extract and analyze the armed document.

        Fails fast without calling any collaborator when no document is
        armed or when offline. The loading flag is always cleared when the
        run ends, whichever step failed. Starting a run also clears
        loading left by any run it supersedes.

        Returns:
            Session snapshot after the run.
        """
        document = self._document
        if document is None:
            self._error = NoDocumentSelectedError().to_info()
            return self.view

        self._generation += 1
        generation = self._generation
        # A superseded run no longer clears loading in its own finally
        self._is_loading = False
        self._error = None
        self._clear_results()

        if not self._connectivity.is_online:
            logger.warning("Run refused: offline")
            self._status = PipelineStatus.FAILED
            self._error = OfflineError().to_info()
            return self.view

        logger.info(f"Starting run {generation} for {document.file_name}")
        self._is_loading = True
        self._status = PipelineStatus.EXTRACTING
        try:
            await self._process(document, generation)
        finally:
            if self._is_current(generation):
                self._is_loading = False

        return self.view

    async def _process(self, document: PDFDocument, generation: int) -> None:
        try:
            text = await self._extractor(document.payload)
        except ExtractionError as e:
            self._commit_error(generation, e)
            return
        except Exception:
            logger.exception("Unexpected error during text extraction")
            self._commit_error(generation, ExtractionError())
            return

        if not self._is_current(generation):
            logger.debug(f"Discarding extraction from superseded run {generation}")
            return

        self._extracted_text = text
        if len(text) <= self._min_text_length:
            logger.warning(f"Document too short for analysis: {len(text)} characters")
            self._status = PipelineStatus.TOO_SHORT
            self._error = DocumentTooShortError().to_info()
            return

        self._status = PipelineStatus.ANALYZING
        try:
            result = await self._analyzer(text)
        except AnalysisError as e:
            self._commit_error(generation, e)
            return
        except Exception:
            logger.exception("Unexpected error during analysis")
            self._commit_error(generation, AnalysisServiceError())
            return

        if not self._is_current(generation):
            logger.debug(f"Discarding analysis from superseded run {generation}")
            return

        self._analysis_result = result
        self._status = PipelineStatus.ANALYZED
        logger.info(f"Run {generation} complete for {document.file_name}")

    def search(self, criteria: SearchCriteria) -> SearchOutcome:
        """Search the extracted text of the current run."""
        return search(self._extracted_text, criteria)

    async def copy_result(self, exporter: Exporter) -> bool:
        """Copy the Markdown rendering of the current result to the clipboard.

        A clipboard failure becomes the displayed error; status, text and
        result are left as they are.

        Returns:
            True if the text was copied.
        """
        if self._analysis_result is None or self._document is None:
            return False
        try:
            await copy_markdown(exporter, self._analysis_result, self._document.file_name)
        except ClipboardWriteError as e:
            self._error = e.to_info()
            return False
        return True

    def download_result(self, exporter: Exporter, fmt: ExportFormat) -> ExportPayload | None:
        """Save the current result in the given format.

        Returns:
            The saved payload, or None when there is no result.
        """
        if self._analysis_result is None or self._document is None:
            return None
        return save_download(exporter, self._analysis_result, self._document.file_name, fmt)
