"""PDF text extraction using pypdf.

Extracts page-ordered text and metadata from PDF files with validation.
Encrypted documents are opened with an empty password when possible and
rejected as password-protected otherwise.
"""

import asyncio
import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import DependencyError, FileNotDecryptedError, PdfReadError

from guide_analyzer.errors import ExtractionError, PasswordProtectedError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PAGE_SEPARATOR = "\n\n"


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Page texts joined by a blank line, outer-trimmed.
        pages: Total number of pages in the document.
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    pages: int = Field(ge=0)
    metadata: dict[str, str | None]


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        ExtractionError: If validation fails.
    """
    if not file_content:
        raise ExtractionError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise ExtractionError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise ExtractionError("Invalid PDF: file does not start with PDF header")


def _unlock(reader: PdfReader) -> None:
    """Open an encrypted document with the empty user password.

    Raises:
        PasswordProtectedError: If a user password is required.
        ExtractionError: If the encryption scheme is unsupported.
    """
    if not reader.is_encrypted:
        return

    try:
        unlocked = reader.decrypt("")
    except DependencyError as e:
        raise ExtractionError(f"Unsupported PDF encryption: {e}") from e
    except (PdfReadError, NotImplementedError) as e:
        raise PasswordProtectedError() from e

    if not unlocked:
        raise PasswordProtectedError()


def _extract_metadata(reader: PdfReader) -> dict[str, str | None]:
    """Extract metadata from PDF reader.

    Args:
        reader: Initialized PdfReader instance.

    Returns:
        Dictionary of metadata fields.
    """
    metadata: dict[str, str | None] = {}

    try:
        if reader.metadata:
            metadata["title"] = reader.metadata.get("/Title")
            metadata["author"] = reader.metadata.get("/Author")
            metadata["subject"] = reader.metadata.get("/Subject")
            metadata["creator"] = reader.metadata.get("/Creator")
            metadata["producer"] = reader.metadata.get("/Producer")
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    return {k: v for k, v in metadata.items() if v is not None}


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Page texts are kept in page order and joined with a blank line,
    including pages without extractable text.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text, page count, and metadata.

    Raises:
        PasswordProtectedError: If the PDF requires a password.
        ExtractionError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
    except PdfReadError as e:
        raise ExtractionError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise ExtractionError(f"Failed to read PDF: {e}") from e

    _unlock(reader)

    try:
        pages = len(reader.pages)
    except FileNotDecryptedError as e:
        raise PasswordProtectedError() from e
    except PdfReadError as e:
        raise ExtractionError(f"Corrupt or invalid PDF: {e}") from e

    if pages == 0:
        raise ExtractionError("PDF contains no pages")

    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            text_parts.append(page.extract_text() or "")
        except FileNotDecryptedError as e:
            raise PasswordProtectedError() from e
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            text_parts.append("")

    text = PAGE_SEPARATOR.join(text_parts).strip()

    if not text:
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(
        text=text,
        pages=pages,
        metadata=_extract_metadata(reader),
    )


async def extract_text(file_content: bytes) -> str:
    """Extract the full text of a PDF without blocking the event loop.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        Page-ordered text of the document.

    Raises:
        ExtractionError: If the PDF cannot be processed.
    """
    content = await asyncio.to_thread(parse_pdf, file_content)
    logger.info(f"Extracted {len(content.text)} characters from {content.pages} pages")
    return content.text
