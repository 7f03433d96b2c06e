"""Critique lists: overused skills, missing skills and recommendations.

Each list is built by appending lines in a fixed order and then truncating,
so which lines survive depends on that order. In particular the closing
"proofread" recommendation is dropped whenever all six conditional
recommendations fire.
"""

from __future__ import annotations

from roast_engine.catalog import RoastCatalog
from roast_engine.signals import Signals

MAX_OVERUSED = 5
MAX_MISSING = 6
MAX_RECOMMENDATIONS = 6

MICROSOFT_OFFICE_ROAST = "Microsoft Office - Congratulations on mastering 1995 technology"
COMMUNICATION_ROAST = "Basic Communication - A skill humans developed 50,000 years ago"

MISSING_TECH = "Any Technical Skills Whatsoever - The year is 2025, learn to code"
MISSING_ACHIEVEMENTS = "Quantifiable Achievements - Numbers prove you actually did something"
MISSING_LEADERSHIP = "Leadership Experience - Even leading a group project counts"
MISSING_CERTIFICATIONS = "Professional Certifications - Show you care about your career"
MISSING_PROJECTS = "Actual Project Experience - Theory is nice, practice is better"
MISSING_MODERN_STACK = "Modern Tech Stack Knowledge - It's not 2010 anymore"
MISSING_PORTFOLIO_LINK = "Portfolio/GitHub Link - Prove your skills exist"

RECOMMEND_TECH = (
    "Learn in-demand technical skills (seriously, AI won't replace programmers "
    "who actually know programming)"
)
RECOMMEND_ACHIEVEMENTS = (
    'Add specific, quantifiable achievements (saying "increased efficiency" '
    "without numbers is meaningless)"
)
RECOMMEND_NO_BUZZWORDS = (
    "Remove generic buzzwords and replace with actual accomplishments "
    "(buzzwords fool no one)"
)
RECOMMEND_LEADERSHIP = (
    "Highlight any leadership or mentoring experience (even training the new "
    "intern counts)"
)
RECOMMEND_CERTIFICATIONS = (
    "Get professional certifications in your field (show you're serious about growth)"
)
RECOMMEND_PROJECTS = (
    "Include relevant project experience or portfolio links (talk is cheap, "
    "show your work)"
)
RECOMMEND_PROOFREAD = (
    "Proofread for typos and generic phrases (attention to detail starts with "
    "your resume)"
)


def roast_for_buzzword(phrase: str, catalog: RoastCatalog) -> str:
    """Look up the roast line for *phrase*, with a generic line for unmapped phrases."""
    return catalog.buzzword_roasts.get(phrase, f'"{phrase}" by Everyone Ever')


def overused_skills(text: str, signals: Signals, catalog: RoastCatalog) -> list[str]:
    lower = text.lower()
    lines = [roast_for_buzzword(p, catalog) for p in signals.overused_phrases]
    if "microsoft office" in lower:
        lines.append(MICROSOFT_OFFICE_ROAST)
    if "communication" in lower and not signals.has_leadership:
        lines.append(COMMUNICATION_ROAST)
    return lines[:MAX_OVERUSED]


def missing_skills(text: str, signals: Signals) -> list[str]:
    lower = text.lower()
    mentions_portfolio = "portfolio" in lower
    lines: list[str] = []
    if signals.tech_skill_count == 0:
        lines.append(MISSING_TECH)
    if not signals.has_achievements:
        lines.append(MISSING_ACHIEVEMENTS)
    if not signals.has_leadership:
        lines.append(MISSING_LEADERSHIP)
    if "certification" not in lower and "certified" not in lower:
        lines.append(MISSING_CERTIFICATIONS)
    if "project" not in lower and not mentions_portfolio:
        lines.append(MISSING_PROJECTS)
    if signals.modern_skill_count == 0:
        lines.append(MISSING_MODERN_STACK)
    if "github" not in lower and not mentions_portfolio and signals.tech_skill_count > 0:
        lines.append(MISSING_PORTFOLIO_LINK)
    return lines[:MAX_MISSING]


def recommendations(text: str, signals: Signals) -> list[str]:
    lower = text.lower()
    lines: list[str] = []
    if signals.tech_skill_count < 3:
        lines.append(RECOMMEND_TECH)
    if not signals.has_achievements:
        lines.append(RECOMMEND_ACHIEVEMENTS)
    if signals.overused_count > 2:
        lines.append(RECOMMEND_NO_BUZZWORDS)
    if not signals.has_leadership:
        lines.append(RECOMMEND_LEADERSHIP)
    # Only the noun counts here; "certified" does not satisfy it.
    if "certification" not in lower:
        lines.append(RECOMMEND_CERTIFICATIONS)
    if "project" not in lower and "portfolio" not in lower:
        lines.append(RECOMMEND_PROJECTS)
    lines.append(RECOMMEND_PROOFREAD)
    return lines[:MAX_RECOMMENDATIONS]
