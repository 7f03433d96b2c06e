"""Signals derived once per resume and shared by the scorer and the critique."""

from __future__ import annotations

import re
from dataclasses import dataclass

from roast_engine.catalog import RoastCatalog
from roast_engine.skill_extractor import find_phrases

ACHIEVEMENT_PATTERN = re.compile(
    r"\d+%|\d+\+|\$\d+|increased|improved|reduced|achieved|generated|saved|managed \d+",
    re.IGNORECASE,
)
LEADERSHIP_PATTERN = re.compile(
    r"led|managed|supervised|coordinated|directed|mentored", re.IGNORECASE
)
EDUCATION_PATTERN = re.compile(
    r"bachelor|master|phd|degree|university|college", re.IGNORECASE
)


@dataclass(frozen=True)
class Signals:
    tech_skill_count: int = 0
    modern_skill_count: int = 0
    has_achievements: bool = False
    has_leadership: bool = False
    has_education: bool = False
    overused_phrases: tuple[str, ...] = ()
    padding_count: int = 0

    @property
    def overused_count(self) -> int:
        return len(self.overused_phrases)


def compute_signals(text: str, catalog: RoastCatalog) -> Signals:
    """Compute the :class:`Signals` record for *text*.

    Pure function of its inputs; calling it twice on the same text returns
    equal records.
    """
    lower = text.lower()
    return Signals(
        tech_skill_count=len(find_phrases(lower, catalog.technical_skills)),
        modern_skill_count=len(find_phrases(lower, catalog.modern_skills)),
        has_achievements=ACHIEVEMENT_PATTERN.search(lower) is not None,
        has_leadership=LEADERSHIP_PATTERN.search(lower) is not None,
        has_education=EDUCATION_PATTERN.search(lower) is not None,
        overused_phrases=tuple(find_phrases(lower, catalog.buzzwords)),
        padding_count=len(find_phrases(lower, catalog.padding_phrases)),
    )
