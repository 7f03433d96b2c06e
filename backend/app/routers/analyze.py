"""Resume upload and analysis endpoint.

The gateway handles:
  - file validation and text extraction (PDF, DOCX, plain text)
  - calling the in-process roast engine with the extracted text

Extraction failures never reach the client: the placeholder text is analysed
instead, so every accepted upload gets a roast.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from fastapi import APIRouter, File, UploadFile

from shared.models import AnalysisResult
from roast_engine import analyze_resume
from app.core.config import settings
from app.services.exceptions import ExtractionError, MissingUploadError
from app.services.text_extraction import extract_text, validate_upload

logger = logging.getLogger(__name__)
router = APIRouter()


def _roast_rng() -> Optional[random.Random]:
    """Return a fresh random source for this request, or None for first-match."""
    if settings.ROAST_POLICY != "random":
        return None
    return random.Random(settings.ROAST_SEED)


@router.post("/analyze-resume", response_model=AnalysisResult)
async def analyze_resume_upload(resume: Optional[UploadFile] = File(None)) -> AnalysisResult:
    """Upload a resume file and return its roast.

    Accepts PDF, DOCX, DOC or plain text up to the configured size limit.
    """
    if resume is None:
        raise MissingUploadError("No file uploaded")

    content = await resume.read()
    validate_upload(resume.filename, resume.content_type, len(content))

    try:
        text = extract_text(content, resume.filename, resume.content_type)
    except ExtractionError as exc:
        logger.warning("Extraction failed for %s: %s, using placeholder", resume.filename, exc)
        text = settings.PLACEHOLDER_TEXT

    result = analyze_resume(text, rng=_roast_rng())

    logger.info(
        "Resume roasted: %s (%d characters, score %d)",
        resume.filename, len(text), result.score,
        extra={"characters": len(text), "upload_name": resume.filename, "score": result.score},
    )
    return result
