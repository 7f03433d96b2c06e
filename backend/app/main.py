"""FastAPI application entrypoint.

Responsibilities:
  - Route and validate HTTP requests
  - Extract text from uploaded resumes
  - Call the in-process roast engine and return its result
  - Render the downloadable text report

NOT responsible for:
  - Any scoring logic (lives in roast_engine)
  - Persisting uploads or results (nothing is stored)
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.logging_config import setup_logging
from shared.models import ErrorResponse, HealthResponse
from app.routers import analyze, report
from app.services.exceptions import UploadRejectedError

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Resume Roast",
    version="1.0.0",
    description="Upload a resume, get roasted, maybe get a job",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze.router, prefix="/api", tags=["analyze"])
app.include_router(report.router, prefix="/api", tags=["report"])


@app.exception_handler(UploadRejectedError)
async def upload_rejected_handler(request: Request, exc: UploadRejectedError) -> JSONResponse:
    logger.info("Upload rejected: %s", exc)
    return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump(exclude_none=True))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Analysis error: %s", exc)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Failed to analyze resume", details=str(exc)).model_dump(),
    )


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()
