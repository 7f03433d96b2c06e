"""Rule-based resume roast engine.

Pure, deterministic text analysis: skill extraction, scoring, critique,
narration and job matching. No I/O and no ML inference.
"""

from roast_engine.analyzer import analyze_resume
from roast_engine.catalog import DEFAULT_CATALOG, JobPosting, RoastCatalog

__all__ = ["analyze_resume", "DEFAULT_CATALOG", "JobPosting", "RoastCatalog"]
