"""Deterministic job matcher.

Ranks the static job catalog against a candidate's extracted skills. A
posting skill counts as covered when it contains one of the candidate's
skills or is contained by one (substring match in both directions), so
"java" covers "javascript" and vice versa.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from roast_engine.catalog import JobPosting
from shared.models import JobMatch

MIN_MATCH_PERCENT = 30  # exclusive
MAX_MATCHES = 5


def _covers(job_skill: str, user_skills: Sequence[str]) -> bool:
    return any(u in job_skill or job_skill in u for u in user_skills)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def display_name(skill: str) -> str:
    """Upper-case the first letter only; "node.js" becomes "Node.js"."""
    return skill[:1].upper() + skill[1:]


def match_percentage(user_skills: Sequence[str], job: JobPosting) -> int:
    """Return the share of *job* skills covered by *user_skills*, 0-100."""
    if not job.skills:
        return 0
    matched = sum(1 for s in job.skills if _covers(s, user_skills))
    return _round_half_up(matched / len(job.skills) * 100)


def match_jobs(skills: Iterable[str], jobs: Sequence[JobPosting]) -> list[JobMatch]:
    """Return up to five postings matching more than 30% of their skills.

    Highest match first; postings with equal scores keep catalog order.
    """
    user_skills = [s.lower() for s in skills]

    matches = [
        JobMatch(
            title=job.title,
            company=job.company,
            match=match_percentage(user_skills, job),
            skills=[display_name(s) for s in job.skills],
        )
        for job in jobs
    ]
    matches = [m for m in matches if m.match > MIN_MATCH_PERCENT]
    # sorted() is stable, so ties stay in catalog order
    matches = sorted(matches, key=lambda m: m.match, reverse=True)
    return matches[:MAX_MATCHES]
