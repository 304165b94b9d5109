"""PDF parsing utilities for document processing.

Responsibilities:
    - PDF text extraction with pypdf
    - Detection of password-protected documents
    - Metadata extraction (title, author, pages)

Output is a single page-ordered text ready for analysis and search.
"""

from guide_analyzer.parsing.pdf_parser import PDFContent, extract_text, parse_pdf

__all__ = ["PDFContent", "extract_text", "parse_pdf"]
