"""Structured JSON logging configuration.

Every record is one JSON line on stdout. Analysis and upload logs attach
score, skill and latency fields through ``extra=``; those listed in
``EXTRA_FIELDS`` are copied into the JSON entry.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Structured fields callers may attach via ``extra=``.
EXTRA_FIELDS = ("latency_ms", "score", "skill_count", "job_match_count", "characters", "upload_name")


class JSONFormatter(logging.Formatter):
    """Outputs log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)
        return json.dumps(log_entry)


def setup_logging() -> None:
    """Configure root logger with JSON formatter."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
