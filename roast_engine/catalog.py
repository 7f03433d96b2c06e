"""Fixed vocabularies and the job catalog used by the roast engine.

Everything here is read-only data. ``DEFAULT_CATALOG`` is built once at
import time and passed explicitly to the extractor, scorer, critique and
job matcher, so tests can swap in a smaller catalog without patching
module globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class JobPosting:
    """One static entry of the job catalog."""
    title: str
    company: str
    skills: tuple[str, ...]
    # Minimum overlap the posting advertises. Informational only; ranking
    # uses the 30% match floor instead.
    required_skills: int = 0


@dataclass(frozen=True)
class RoastCatalog:
    vocabulary: tuple[str, ...]
    technical_skills: tuple[str, ...]
    modern_skills: tuple[str, ...]
    buzzwords: tuple[str, ...]
    padding_phrases: tuple[str, ...]
    buzzword_roasts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    jobs: tuple[JobPosting, ...] = ()


# ---------------------------------------------------------------------------
# Skill vocabulary
# Matched as plain substrings of the lower-cased resume text.
# ---------------------------------------------------------------------------

_VOCABULARY: tuple[str, ...] = (
    # --- Languages / frameworks ---
    "javascript", "python", "java", "react", "node.js", "sql", "html", "css",
    "typescript",
    # --- Infra / data ---
    "aws", "docker", "kubernetes", "git", "mongodb", "postgresql", "redis",
    # --- Soft skills ---
    "project management", "leadership", "communication", "teamwork",
    "problem solving",
    # --- Office / design tools ---
    "microsoft office", "excel", "powerpoint", "word", "photoshop",
    "illustrator",
    # --- Process / collaboration ---
    "agile", "scrum", "jira", "slack", "figma", "sketch",
)

_TECHNICAL_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "node.js", "sql", "typescript",
    "aws", "docker",
)

_MODERN_SKILLS: tuple[str, ...] = (
    "react", "node.js", "aws", "docker", "typescript", "kubernetes",
)

_BUZZWORDS: tuple[str, ...] = (
    "team player", "hard worker", "fast learner", "detail oriented",
    "self-motivated", "passionate", "results-driven", "dynamic", "synergy",
    "leverage", "utilize",
)

_PADDING_PHRASES: tuple[str, ...] = (
    "responsible for", "duties included", "worked on",
)

_BUZZWORD_ROASTS: dict[str, str] = {
    "team player": '"Team Player" - Translation: I do what others tell me',
    "hard worker": '"Hard Worker" - As opposed to all those lazy worker applicants',
    "fast learner": "\"Fast Learner\" - Because slow learners don't get hired",
    "detail oriented": '"Detail Oriented" - Yet somehow missed spell-checking this resume',
    "self-motivated": '"Self-Motivated" - Unlike those externally-motivated robots',
    "passionate": '"Passionate" - About what? Existing?',
    "results-driven": '"Results-Driven" - As opposed to failure-driven?',
    "dynamic": '"Dynamic" - Meaningless corporate buzzword #47',
    "synergy": '"Synergy" - Corporate buzzword that makes everyone cringe',
    "leverage": '"Leverage" - Using fancy words for basic concepts',
    "utilize": '"Utilize" - Just say "use" like a normal person',
}

_JOBS: tuple[JobPosting, ...] = (
    JobPosting(
        title="Junior Software Developer",
        company="TechStart Inc.",
        skills=("javascript", "react", "node.js", "git"),
        required_skills=3,
    ),
    JobPosting(
        title="Frontend Developer",
        company="WebCorp LLC",
        skills=("html", "css", "javascript", "react"),
        required_skills=3,
    ),
    JobPosting(
        title="Data Analyst",
        company="DataPro Solutions",
        skills=("python", "sql", "excel", "tableau"),
        required_skills=2,
    ),
    JobPosting(
        title="Project Coordinator",
        company="ManageCorp",
        skills=("project management", "communication", "leadership"),
        required_skills=2,
    ),
    JobPosting(
        title="Customer Support Specialist",
        company="SupportPro",
        skills=("communication", "problem solving", "microsoft office"),
        required_skills=2,
    ),
    JobPosting(
        title="Marketing Assistant",
        company="AdAgency Plus",
        skills=("social media", "content creation", "analytics", "photoshop"),
        required_skills=2,
    ),
)

DEFAULT_CATALOG = RoastCatalog(
    vocabulary=_VOCABULARY,
    technical_skills=_TECHNICAL_SKILLS,
    modern_skills=_MODERN_SKILLS,
    buzzwords=_BUZZWORDS,
    padding_phrases=_PADDING_PHRASES,
    buzzword_roasts=MappingProxyType(_BUZZWORD_ROASTS),
    jobs=_JOBS,
)
