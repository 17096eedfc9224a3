"""
Text extraction from DKB statement PDFs.
"""

import logging
from pathlib import Path

import pdfplumber

logger = logging.getLogger(__name__)


class PDFExtractionError(Exception):
    """Exception raised when text cannot be extracted from a PDF."""


def extract_statement_text(file_path: str | Path) -> str:
    """
    Extract the text of all pages as a single line.

    Lines and pages are joined with single spaces, which is the shape
    the statement parser works on.

    Args:
        file_path: Path to the statement PDF

    Returns:
        Text of the whole statement without line breaks

    Raises:
        PDFExtractionError: If the file cannot be opened or read
    """
    try:
        with pdfplumber.open(file_path) as pdf:
            pages_text = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise PDFExtractionError(f"Error extracting text from {file_path}: {e}") from e

    logger.debug(f"Extracted text from {len(pages_text)} pages of {file_path}")
    return " ".join(
        line.strip()
        for page_text in pages_text
        for line in page_text.splitlines()
        if line.strip()
    )
