"""Resume text extraction service.

PDF via PyPDF2, DOCX via docx2txt, plain text decoded as UTF-8. Legacy
binary ``.doc`` files have no extractor and yield the placeholder text.
"""

from __future__ import annotations

import io
import logging
import os

import docx2txt
from PyPDF2 import PdfReader

from app.core.config import settings
from app.services.exceptions import (
    ExtractionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 500_000

PDF_TYPE = "application/pdf"
TEXT_TYPE = "text/plain"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _extension(filename: str | None) -> str:
    return os.path.splitext(filename or "")[1].lower()


def validate_upload(filename: str | None, content_type: str | None, size: int) -> None:
    """Raise if the upload's type or size is not accepted.

    A file is accepted when either its content type or its extension is on
    the allow-list; browsers often send ``application/octet-stream`` for
    ``.docx``.
    """
    if (
        content_type not in settings.ALLOWED_CONTENT_TYPES
        and _extension(filename) not in settings.ALLOWED_EXTENSIONS
    ):
        raise UnsupportedFileTypeError("Invalid file type")
    if size > settings.max_upload_bytes:
        raise FileTooLargeError("File too large")


def extract_text_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes.

    Raises ExtractionError if the PDF is unreadable, too long, or has no text.
    """
    try:
        reader = PdfReader(io.BytesIO(content))
        page_count = len(reader.pages)
        if page_count > settings.MAX_PDF_PAGES:
            raise ExtractionError(
                f"PDF has {page_count} pages, maximum is {settings.MAX_PDF_PAGES}"
            )
        pages = [page.extract_text() or "" for page in reader.pages]
    except ExtractionError:
        raise
    except Exception as exc:
        # Structurally broken PDFs surface as KeyError/TypeError, not PyPdfError
        raise ExtractionError(f"Could not read PDF: {exc}") from exc

    full_text = "\n\n".join(pages).strip()
    if not full_text:
        raise ExtractionError("Could not extract any text from PDF")

    logger.info("Extracted %d characters from %d page PDF", len(full_text), page_count)
    return full_text


def extract_text_from_docx(content: bytes) -> str:
    try:
        text = docx2txt.process(io.BytesIO(content))
    except Exception as exc:
        raise ExtractionError(f"Could not read DOCX: {exc}") from exc
    return (text or "").strip()


def extract_text(content: bytes, filename: str | None, content_type: str | None) -> str:
    """Turn an accepted upload into plain text.

    Raises ExtractionError when a PDF or DOCX cannot be parsed.
    """
    ext = _extension(filename)

    if content_type == PDF_TYPE or ext == ".pdf":
        text = extract_text_from_pdf(content)
    elif content_type == DOCX_TYPE or ext == ".docx":
        text = extract_text_from_docx(content)
    elif content_type == TEXT_TYPE or ext == ".txt":
        text = content.decode("utf-8", errors="replace")
    else:
        logger.info("No extractor for %s (%s), using placeholder text", filename, content_type)
        text = settings.PLACEHOLDER_TEXT

    if len(text) > MAX_TEXT_LENGTH:
        logger.warning("Truncating extracted text from %d to %d chars", len(text), MAX_TEXT_LENGTH)
        text = text[:MAX_TEXT_LENGTH]
    return text
