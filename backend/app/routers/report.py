"""Downloadable plain-text report endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from shared.models import AnalysisResult
from app.core.config import settings
from app.services.report_service import render_report

router = APIRouter()


@router.post("/report", response_class=PlainTextResponse)
async def download_report(result: AnalysisResult) -> PlainTextResponse:
    """Render a previously returned analysis as a text attachment."""
    return PlainTextResponse(
        render_report(result),
        headers={"Content-Disposition": f'attachment; filename="{settings.REPORT_FILENAME}"'},
    )
