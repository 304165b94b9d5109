"""Unit tests for the browser-side export actions of the analyzer page."""

import json
from unittest.mock import AsyncMock, patch

import pytest
import pytest_check as check
from nicegui import ui

from guide_analyzer.errors import ClipboardWriteError
from guide_analyzer.export.formatter import copy_markdown, render_markdown
from guide_analyzer.models.schemas import AnalysisResult, ErrorCode, PipelineStatus
from guide_analyzer.pipeline.connectivity import ConnectivityMonitor
from guide_analyzer.pipeline.session import DocumentPipeline
from guide_analyzer.ui.analyzer_page import CLIPBOARD_TIMEOUT_SECONDS, NiceGUIExporter


class TestClipboardWrite:
    """Tests for NiceGUIExporter.write_clipboard."""

    async def test_confirmed_write(self, analysis_result: AnalysisResult) -> None:
        """The Markdown is sent to the browser as a JSON string literal."""
        run_javascript = AsyncMock(return_value=True)

        with patch.object(ui, "run_javascript", run_javascript):
            await copy_markdown(NiceGUIExporter(), analysis_result, "guide.pdf")

        script = run_javascript.call_args.args[0]
        check.is_in(json.dumps(render_markdown(analysis_result, "guide.pdf")), script)
        check.equal(run_javascript.call_args.kwargs["timeout"], CLIPBOARD_TIMEOUT_SECONDS)

    @pytest.mark.parametrize("reply", [False, None])
    async def test_refused_write_raises(
        self, analysis_result: AnalysisResult, reply: bool | None
    ) -> None:
        """A browser without clipboard access reports a failure."""
        with patch.object(ui, "run_javascript", AsyncMock(return_value=reply)):
            with pytest.raises(ClipboardWriteError):
                await copy_markdown(NiceGUIExporter(), analysis_result, "guide.pdf")

    async def test_unanswered_write_raises(self, analysis_result: AnalysisResult) -> None:
        """A browser that never answers counts as a failed write."""
        with patch.object(ui, "run_javascript", AsyncMock(side_effect=TimeoutError())):
            with pytest.raises(ClipboardWriteError):
                await copy_markdown(NiceGUIExporter(), analysis_result, "guide.pdf")

    async def test_refused_write_reaches_session_error(
        self, online: ConnectivityMonitor, analysis_result: AnalysisResult
    ) -> None:
        """Copying from the page reports the refusal instead of a success."""

        async def analyzer(text: str) -> AnalysisResult:
            return analysis_result

        async def extractor(payload: bytes) -> str:
            return "Solder the ESC to the pads, then mount the flight controller on the frame."

        pipeline = DocumentPipeline(
            extractor=extractor, analyzer=analyzer, connectivity=online, min_text_length=50
        )
        pipeline.select_document("guide.pdf", "application/pdf", b"%PDF")
        await pipeline.run()

        with patch.object(ui, "run_javascript", AsyncMock(return_value=False)):
            copied = await pipeline.copy_result(NiceGUIExporter())

        view = pipeline.view
        check.is_false(copied)
        check.equal(view.error.code, ErrorCode.CLIPBOARD_WRITE_FAILED)
        check.equal(view.status, PipelineStatus.ANALYZED)
