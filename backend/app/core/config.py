"""Application configuration loaded from environment variables.

The gateway only handles uploads and text extraction. All scoring happens
in-process in ``roast_engine``; the settings below control how uploads are
accepted and how the opening roast line is picked.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def _optional_int(name: str) -> Optional[int]:
    """Read an optional integer setting; unparsable values are ignored."""
    value = os.getenv(name)
    if value in (None, ""):
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, value)
        return None


class Settings:
    # Request limits
    MAX_UPLOAD_SIZE_MB: int = int(os.getenv("MAX_UPLOAD_SIZE_MB", "10"))
    MAX_PDF_PAGES: int = int(os.getenv("MAX_PDF_PAGES", "100"))

    ALLOWED_CONTENT_TYPES: tuple[str, ...] = (
        "application/pdf",
        "text/plain",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )
    ALLOWED_EXTENSIONS: tuple[str, ...] = (".pdf", ".txt", ".doc", ".docx")

    # Analysed instead of the upload when text cannot be extracted
    PLACEHOLDER_TEXT: str = os.getenv("PLACEHOLDER_TEXT", "Sample resume text for analysis")

    # "first_match" (deterministic) or "random"
    ROAST_POLICY: str = os.getenv("ROAST_POLICY", "first_match")
    ROAST_SEED: Optional[int] = _optional_int("ROAST_SEED")

    REPORT_FILENAME: str = "resume-roast-report.txt"

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


settings = Settings()
