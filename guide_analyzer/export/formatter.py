"""Markdown and JSON rendering of analysis results, plus export actions.

Rendering is pure and deterministic. Side effects (clipboard, file save)
go through the ``Exporter`` protocol so the UI can plug in its own
implementation and tests can use a fake.
"""

import json
import logging
from pathlib import PurePath
from typing import Protocol

from guide_analyzer.errors import ClipboardWriteError
from guide_analyzer.models.schemas import AnalysisResult, ExportFormat, ExportPayload

logger = logging.getLogger(__name__)

NONE_FOUND = "_None found._"
DEFAULT_BASE_NAME = "document"

_EXTENSIONS = {
    ExportFormat.MARKDOWN: ".md",
    ExportFormat.JSON: ".json",
}
_MEDIA_TYPES = {
    ExportFormat.MARKDOWN: "text/markdown; charset=utf-8",
    ExportFormat.JSON: "application/json",
}


class Exporter(Protocol):
    """Side-effecting export capabilities provided by the host."""

    async def write_clipboard(self, text: str) -> None: ...

    def save_file(self, name: str, data: bytes, media_type: str) -> None: ...


def _bullets(items: list[str]) -> str:
    if not items:
        return NONE_FOUND
    return "\n".join(f"- {item}" for item in items)


def _numbered(items: list[str]) -> str:
    if not items:
        return NONE_FOUND
    return "\n".join(f"{number}. {item}" for number, item in enumerate(items, start=1))


def render_markdown(result: AnalysisResult, document_name: str) -> str:
    """Render an analysis as a Markdown document.

    Sections always appear in the order Overview, Components, Tools, Steps.

    Args:
        result: Analysis to render.
        document_name: Source document name used in the title.

    Returns:
        Markdown text without leading or trailing whitespace.
    """
    blocks = [
        f"# Analysis: {document_name}",
        "## Overview",
        result.overview.strip(),
        "## Components",
        _bullets(result.components),
        "## Tools",
        _bullets(result.tools),
        "## Steps",
        _numbered(result.steps),
    ]
    return "\n\n".join(blocks).strip()


def render_json(result: AnalysisResult) -> str:
    """Render an analysis as indented JSON in field declaration order."""
    return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)


def export_filename(document_name: str, fmt: ExportFormat) -> str:
    """Derive the download file name from the source document name.

    ``guide.pdf`` becomes ``guide_analysis.md`` or ``guide_analysis.json``.
    """
    base = PurePath(document_name.strip()).stem if document_name.strip() else ""
    return f"{base or DEFAULT_BASE_NAME}_analysis{_EXTENSIONS[fmt]}"


def build_download(
    result: AnalysisResult,
    document_name: str,
    fmt: ExportFormat,
) -> ExportPayload:
    """Build the file payload for a download.

    Args:
        result: Analysis to export.
        document_name: Source document name.
        fmt: Target format.

    Returns:
        ExportPayload with file name, UTF-8 body and media type.
    """
    fmt = ExportFormat(fmt)
    if fmt is ExportFormat.MARKDOWN:
        body = render_markdown(result, document_name)
    else:
        body = render_json(result)

    return ExportPayload(
        filename=export_filename(document_name, fmt),
        content=body.encode("utf-8"),
        media_type=_MEDIA_TYPES[fmt],
    )


async def copy_markdown(exporter: Exporter, result: AnalysisResult, document_name: str) -> None:
    """Copy the Markdown rendering to the clipboard.

    The exporter must raise when the write is refused, so the caller can
    report the failure instead of a false success.

    Raises:
        ClipboardWriteError: If the exporter cannot write to the clipboard.
    """
    try:
        await exporter.write_clipboard(render_markdown(result, document_name))
    except Exception as e:
        logger.warning(f"Clipboard write failed: {e}")
        raise ClipboardWriteError() from e


def save_download(
    exporter: Exporter,
    result: AnalysisResult,
    document_name: str,
    fmt: ExportFormat,
) -> ExportPayload:
    """Render a download and hand it to the exporter."""
    payload = build_download(result, document_name, fmt)
    exporter.save_file(payload.filename, payload.content, payload.media_type)
    logger.info(f"Exported analysis as {payload.filename}")
    return payload
