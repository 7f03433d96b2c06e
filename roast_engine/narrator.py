"""Flavor-text lines shown above the structured critique.

The opening line is picked from a prioritised list of issues detected in the
resume. By default the first detected issue wins, which keeps the output
reproducible. Passing a ``random.Random`` switches to a uniform choice among
every detected issue; seed it to make that path reproducible too.
"""

from __future__ import annotations

import random
import re
from typing import Optional, Sequence

LINE_PREFIX = "> "

QUANTIFIED_PATTERN = re.compile(r"\d+%|\d+\+|\$\d+|increased|improved|reduced|achieved")

UNPAID_ROAST = "Your collection of unpaid work experience shows real dedication to being undervalued"
GENERIC_OBJECTIVE_ROAST = (
    "Your career objective is so generic, it could belong to literally anyone with a pulse"
)
MICROSOFT_OFFICE_ROAST = (
    "Listing Microsoft Office as a skill is like bragging about knowing how to use a doorknob"
)
NO_ACHIEVEMENTS_ROAST = (
    "Zero quantifiable achievements detected - I see you prefer the "
    "'trust me, I'm great' approach to proving your worth"
)
LOW_SCORE_ROAST = "Your resume reads like a cautionary tale about career planning"
MID_SCORE_ROAST = "Your resume shows promise, much like a participation trophy shows effort"
FALLBACK_ROAST = (
    "Your resume demonstrates the confidence of someone who hasn't read many job requirements"
)

FUTURE_LINE = "Based on your experience, I can also tell you your future is..."
TRAJECTORY_LINE = "Here's what else is going on in your career trajectory:"


def detect_issues(text: str, score: int, extracted_skills: Sequence[str]) -> list[str]:
    """Return every applicable opening roast, highest priority first."""
    lower = text.lower()
    issues: list[str] = []

    if "unpaid" in lower or "volunteer" in lower:
        issues.append(UNPAID_ROAST)
    if "seeking opportunities" in lower or "dynamic environment" in lower:
        issues.append(GENERIC_OBJECTIVE_ROAST)
    if "microsoft office" in extracted_skills:
        issues.append(MICROSOFT_OFFICE_ROAST)
    if not QUANTIFIED_PATTERN.search(lower):
        issues.append(NO_ACHIEVEMENTS_ROAST)

    if score < 40:
        issues.append(LOW_SCORE_ROAST)
    elif score < 60:
        issues.append(MID_SCORE_ROAST)

    return issues


class RoastNarrator:
    """Builds the four ``roastText`` lines for an analysis."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng

    def opening_line(self, text: str, score: int, extracted_skills: Sequence[str]) -> str:
        issues = detect_issues(text, score, extracted_skills)
        if not issues:
            return FALLBACK_ROAST
        if self._rng is None:
            return issues[0]
        return self._rng.choice(issues)

    def narrate(
        self,
        text: str,
        score: int,
        category: str,
        extracted_skills: Sequence[str],
    ) -> list[str]:
        verdict = "bad" if score < 50 else "questionable"
        lines = [
            self.opening_line(text, score, extracted_skills),
            FUTURE_LINE,
            f"{category} {verdict}",
            TRAJECTORY_LINE,
        ]
        return [LINE_PREFIX + line for line in lines]
