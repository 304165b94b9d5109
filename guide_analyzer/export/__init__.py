"""Export of analysis results as Markdown or JSON.

Responsibilities:
    - Deterministic Markdown and JSON rendering
    - Download file names and media types
    - Clipboard and file-save actions behind the Exporter protocol
"""

from guide_analyzer.export.formatter import (
    Exporter,
    build_download,
    copy_markdown,
    export_filename,
    render_json,
    render_markdown,
    save_download,
)

__all__ = [
    "Exporter",
    "build_download",
    "copy_markdown",
    "export_filename",
    "render_json",
    "render_markdown",
    "save_download",
]
