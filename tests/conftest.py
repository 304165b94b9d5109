"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - pdf_factory: Builds small text PDFs in memory
    - sample_pdf_bytes: Two-page guide PDF with enough text for analysis
    - encrypted_pdf_bytes: PDF that requires a user password
    - analysis_result: Typical AnalysisResult
    - online / offline: Connectivity monitors with a fixed status
    - async_client: HTTPX client for API testing
"""

import io
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfReader, PdfWriter

from guide_analyzer.api import app
from guide_analyzer.models.schemas import AnalysisResult
from guide_analyzer.pipeline.connectivity import ConnectivityMonitor

GUIDE_PAGES = [
    "FPV build guide. Solder the ESC to the frame pads.",
    "Mount the flight controller and connect the 3.3V receiver.",
]


def _escape_pdf_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, pages, strict=True):
        stream = f"BT /F1 12 Tf 72 720 Td ({_escape_pdf_string(text)}) Tj ET".encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return bytes(out)


def encrypt_pdf(content: bytes, user_password: str, owner_password: str = "owner") -> bytes:
    """Re-write a PDF with RC4 encryption."""
    writer = PdfWriter()
    writer.append(PdfReader(io.BytesIO(content)))
    writer.encrypt(
        user_password=user_password,
        owner_password=owner_password,
        algorithm="RC4-128",
    )
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def pdf_factory() -> Callable[[list[str]], bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Two-page guide PDF with more than 50 characters of text."""
    return build_pdf(GUIDE_PAGES)


@pytest.fixture
def encrypted_pdf_bytes() -> bytes:
    """Guide PDF protected by a user password."""
    return encrypt_pdf(build_pdf(GUIDE_PAGES), user_password="secret")


@pytest.fixture
def analysis_result() -> AnalysisResult:
    """Typical analysis of the sample guide."""
    return AnalysisResult(
        overview="A short guide to building a 5-inch FPV drone.",
        components=["Frame", "ESC", "Flight controller"],
        tools=["Soldering iron", "Hex drivers"],
        steps=["Solder the ESC", "Mount the flight controller"],
    )


@pytest.fixture
def online() -> ConnectivityMonitor:
    """Connectivity monitor reporting online."""
    return ConnectivityMonitor("http://probe.test", online=True)


@pytest.fixture
def offline() -> ConnectivityMonitor:
    """Connectivity monitor reporting offline."""
    return ConnectivityMonitor("http://probe.test", online=False)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
