"""Deterministic resume scorer.

Turns a :class:`~roast_engine.signals.Signals` record into a bounded integer
score and a category label. No randomness and no failure modes: every
signals record, including the all-zero one produced by empty text, maps to a
score in ``[MIN_SCORE, MAX_SCORE]``.
"""

from __future__ import annotations

from roast_engine.signals import Signals

BASE_SCORE = 35
MIN_SCORE = 15
MAX_SCORE = 95

TECH_SKILL_POINTS = 8
MODERN_SKILL_POINTS = 5
ACHIEVEMENT_BONUS = 15
LEADERSHIP_BONUS = 10
EDUCATION_BONUS = 5
BUZZWORD_PENALTY = 3
PADDING_PENALTY = 2

# Checked top-down; the first threshold the score reaches wins.
CATEGORY_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (80, "actually competent human being"),
    (65, "promising professional with potential"),
    (50, "decent candidate who needs polish"),
    (35, "entry-level with room for growth"),
)
FALLBACK_CATEGORY = "resume emergency intervention needed"


def score_resume(signals: Signals) -> int:
    score = BASE_SCORE
    score += signals.tech_skill_count * TECH_SKILL_POINTS
    score += signals.modern_skill_count * MODERN_SKILL_POINTS
    if signals.has_achievements:
        score += ACHIEVEMENT_BONUS
    if signals.has_leadership:
        score += LEADERSHIP_BONUS
    if signals.has_education:
        score += EDUCATION_BONUS
    score -= signals.overused_count * BUZZWORD_PENALTY
    score -= signals.padding_count * PADDING_PENALTY
    return max(MIN_SCORE, min(MAX_SCORE, score))


def categorize(score: int) -> str:
    """Map a clamped score to its category label."""
    for threshold, label in CATEGORY_THRESHOLDS:
        if score >= threshold:
            return label
    return FALLBACK_CATEGORY
