"""NiceGUI interface for PDF guide analysis with full-text search."""

import asyncio
import json
from collections.abc import Callable

from nicegui import events, ui

from guide_analyzer.models.schemas import AnalysisResult, ExportFormat, SearchCriteria
from guide_analyzer.pipeline.connectivity import get_connectivity_monitor
from guide_analyzer.pipeline.session import DocumentPipeline
from guide_analyzer.ui.rendering import highlight_to_html, match_count_label, status_message

CONNECTIVITY_REFRESH_SECONDS = 30.0
CLIPBOARD_TIMEOUT_SECONDS = 5.0

# navigator.clipboard only exists in secure contexts (HTTPS or localhost)
CLIPBOARD_SCRIPT = (
    "navigator.clipboard"
    " ? navigator.clipboard.writeText({text}).then(() => true, () => false)"
    " : false"
)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-card {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        border: 1px solid #e2e8f0;
    }

    .error-banner {
        background: #fee2e2;
        color: #dc2626;
        border-radius: 6px;
    }

    .full-text {
        white-space: pre-wrap;
        word-break: break-word;
        max-height: 60vh;
        overflow-y: auto;
        background: #f8fafc;
        border: 1px solid #e2e8f0;
        border-radius: 6px;
    }

    .offline-badge { background: #fef3c7; color: #92400e; }
</style>
"""


class NiceGUIExporter:
    """Clipboard and download actions for the current browser client."""

    async def write_clipboard(self, text: str) -> None:
        copied = await ui.run_javascript(
            CLIPBOARD_SCRIPT.format(text=json.dumps(text)),
            timeout=CLIPBOARD_TIMEOUT_SECONDS,
        )
        if copied is not True:
            raise RuntimeError("Browser refused the clipboard write")

    def save_file(self, name: str, data: bytes, media_type: str) -> None:
        ui.download.content(data, name, media_type)


class PageState:
    """Per-client UI state that is not owned by the pipeline."""

    def __init__(self) -> None:
        self.criteria = SearchCriteria()
        self.online = True

    def update_criteria(self, **changes: object) -> None:
        self.criteria = self.criteria.model_copy(update=changes)


def render_item_list(items: list[str], empty_text: str) -> None:
    if not items:
        ui.label(empty_text).classes("text-slate-500 italic")
        return
    with ui.column().classes("gap-2"):
        for item in items:
            with ui.row().classes("items-start gap-2 no-wrap"):
                ui.icon("check").classes("text-green-500 mt-1")
                ui.label(item).classes("text-slate-600")


def render_analysis(result: AnalysisResult) -> None:
    ui.label("Overview").classes("text-2xl font-semibold")
    ui.label(result.overview).classes("text-slate-600 whitespace-pre-wrap leading-relaxed")

    with ui.row().classes("w-full gap-8 mt-4"):
        with ui.column().classes("flex-1"):
            with ui.row().classes("items-center gap-2"):
                ui.icon("memory").classes("text-sky-500 text-2xl")
                ui.label("Required Components").classes("text-xl font-semibold")
            render_item_list(result.components, "No components found.")
        with ui.column().classes("flex-1"):
            with ui.row().classes("items-center gap-2"):
                ui.icon("build").classes("text-sky-500 text-2xl")
                ui.label("Required Tools").classes("text-xl font-semibold")
            render_item_list(result.tools, "No tools found.")

    ui.label("Main Build Steps").classes("text-xl font-semibold mt-4")
    if not result.steps:
        ui.label("No build steps found.").classes("text-slate-500 italic")
    else:
        with ui.column().classes("gap-3"):
            for number, step in enumerate(result.steps, start=1):
                with ui.row().classes("gap-2 no-wrap"):
                    ui.label(f"Step {number}:").classes("font-medium text-slate-700")
                    ui.label(step).classes("text-slate-600")


@ui.page("/")
def analyzer_page() -> None:
    """Main analyzer page."""
    ui.add_head_html(CUSTOM_CSS)
    pipeline = DocumentPipeline()
    connectivity = get_connectivity_monitor()
    exporter = NiceGUIExporter()
    state = PageState()
    state.online = connectivity.is_online

    refreshers: list[Callable[[], None]] = []

    def refresh_all() -> None:
        for refresh in refreshers:
            refresh()

    def on_connectivity(online: bool) -> None:
        state.online = online
        refresh_all()

    unsubscribe = connectivity.subscribe(on_connectivity)
    ui.context.client.on_disconnect(unsubscribe)
    ui.timer(CONNECTIVITY_REFRESH_SECONDS, connectivity.refresh)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        payload = await e.file.read()
        pipeline.select_document(e.file.name, e.file.content_type, payload)
        state.criteria = SearchCriteria()
        refresh_all()

    async def start_analysis() -> None:
        run = asyncio.create_task(pipeline.run())
        # Let the run reach its first suspension point so loading state shows
        await asyncio.sleep(0)
        refresh_all()
        await run
        refresh_all()

    async def copy_markdown() -> None:
        if await pipeline.copy_result(exporter):
            ui.notify("Analysis copied to clipboard", type="positive")
        refresh_all()

    def download(fmt: ExportFormat) -> None:
        pipeline.download_result(exporter, fmt)

    def on_keyword(e: events.ValueChangeEventArguments) -> None:
        state.update_criteria(keyword=e.value or "")
        full_text.refresh()

    def on_case(e: events.ValueChangeEventArguments) -> None:
        state.update_criteria(case_sensitive=bool(e.value))
        full_text.refresh()

    def on_whole_word(e: events.ValueChangeEventArguments) -> None:
        state.update_criteria(whole_word=bool(e.value))
        full_text.refresh()

    @ui.refreshable
    def controls() -> None:
        view = pipeline.view
        with ui.row().classes("w-full items-center gap-4"):
            ui.upload(
                label="Choose PDF",
                on_upload=handle_upload,
                auto_upload=True,
                max_files=1,
            ).props("accept=.pdf flat bordered").classes("w-64")
            ui.label(view.file_name or "No file selected").classes(
                "flex-1 truncate text-slate-500"
            )
            analyze_btn = ui.button("Analyze", on_click=start_analysis).props("color=positive")
            if not pipeline.has_document or view.is_loading:
                analyze_btn.disable()
        if not state.online:
            ui.label("Offline: analysis is unavailable until the connection returns.").classes(
                "offline-badge w-full mt-3 p-2 rounded text-sm text-center"
            )
        if view.error:
            ui.label(view.error.message).classes("error-banner w-full mt-4 p-3 text-center")

    @ui.refreshable
    def full_text() -> None:
        view = pipeline.view
        outcome = pipeline.search(state.criteria)
        label = match_count_label(outcome.match_count)
        if label:
            ui.label(label).classes("text-sm text-slate-500")
        ui.html(highlight_to_html(outcome.segments), sanitize=False).classes(
            "full-text w-full p-4"
        )
        if not view.extracted_text:
            ui.label("No text extracted yet.").classes("text-slate-500")

    @ui.refreshable
    def results() -> None:
        view = pipeline.view
        if view.is_loading:
            with ui.column().classes("w-full items-center gap-2 mt-8"):
                ui.spinner(size="lg")
                ui.label(status_message(view.status)).classes("text-sm text-slate-500")
            return
        if not (view.analysis_result or view.extracted_text):
            return

        with ui.card().classes("app-card w-full max-w-4xl mx-auto mt-8"):
            with ui.tabs().classes("w-full") as tabs:
                summary_tab = ui.tab("Analysis Results")
                text_tab = ui.tab("Full Text & Search")
            with ui.tab_panels(tabs, value=summary_tab).classes("w-full"):
                with ui.tab_panel(summary_tab):
                    if view.analysis_result:
                        render_analysis(view.analysis_result)
                        with ui.row().classes("gap-2 mt-6"):
                            ui.button("Copy Markdown", icon="content_copy", on_click=copy_markdown)
                            ui.button(
                                "Download .md",
                                icon="download",
                                on_click=lambda: download(ExportFormat.MARKDOWN),
                            )
                            ui.button(
                                "Download .json",
                                icon="download",
                                on_click=lambda: download(ExportFormat.JSON),
                            )
                    else:
                        ui.label(
                            "No analysis results. The document may be too short "
                            "or in an unsupported format."
                        ).classes("text-slate-500")
                with ui.tab_panel(text_tab):
                    ui.label("Full Document Text").classes("text-2xl font-semibold")
                    ui.input(
                        placeholder="Enter a keyword to search...",
                        value=state.criteria.keyword,
                        on_change=on_keyword,
                    ).props("type=search clearable").classes("w-full")
                    with ui.row().classes("gap-4"):
                        ui.checkbox(
                            "Case sensitive", value=state.criteria.case_sensitive, on_change=on_case
                        )
                        ui.checkbox(
                            "Whole word", value=state.criteria.whole_word, on_change=on_whole_word
                        )
                    full_text()

    refreshers.extend([controls.refresh, results.refresh])

    # === UI Layout ===
    with ui.column().classes("w-full p-4 md:p-8 items-center"):
        with ui.column().classes("items-center mb-8"):
            ui.label("AI Guide Analyzer").classes("text-4xl font-bold text-slate-900")
            ui.label(
                "Get a structured analysis of your technical guides and instructions."
            ).classes("text-lg text-slate-600")

        with ui.card().classes("app-card w-full max-w-3xl p-6"):
            controls()

        results()

