"""Single entry point of the roast engine.

``analyze_resume`` runs extraction, scoring, critique, narration and job
matching in sequence and returns one :class:`~shared.models.AnalysisResult`.
It is total over strings, keeps no state between calls, and performs no
I/O, so concurrent callers need no locking.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

from roast_engine import critique
from roast_engine.catalog import DEFAULT_CATALOG, RoastCatalog
from roast_engine.job_matcher import match_jobs
from roast_engine.narrator import RoastNarrator
from roast_engine.scorer import categorize, score_resume
from roast_engine.signals import compute_signals
from roast_engine.skill_extractor import extract_skills
from shared.models import AnalysisResult

logger = logging.getLogger(__name__)


def analyze_resume(
    resume_text: str,
    catalog: RoastCatalog = DEFAULT_CATALOG,
    rng: Optional[random.Random] = None,
) -> AnalysisResult:
    """Roast *resume_text* and rank the job catalog against it.

    Args:
        resume_text: Plain text of the resume. Case is ignored.
        catalog: Vocabularies and job postings to analyse against.
        rng: Optional random source. When given, the opening roast line is
            drawn at random among every detected issue instead of taking the
            highest-priority one.
    """
    started = time.perf_counter()
    text = (resume_text or "").lower()

    skills = extract_skills(text, catalog.vocabulary)
    signals = compute_signals(text, catalog)

    score = score_resume(signals)
    category = categorize(score)

    roast_text = RoastNarrator(rng).narrate(text, score, category, skills)
    jobs = match_jobs(skills, catalog.jobs)

    result = AnalysisResult(
        category=category,
        score=score,
        roast_text=roast_text,
        overused_skills=critique.overused_skills(text, signals, catalog),
        missing_skills=critique.missing_skills(text, signals),
        recommendations=critique.recommendations(text, signals),
        extracted_skills=skills,
        job_matches=jobs,
    )

    logger.info(
        "Resume analysed: score=%d category=%s (%d skills, %d job matches)",
        score, category, len(skills), len(jobs),
        extra={
            "latency_ms": round((time.perf_counter() - started) * 1000, 2),
            "score": score,
            "skill_count": len(skills),
            "job_match_count": len(jobs),
        },
    )
    return result
