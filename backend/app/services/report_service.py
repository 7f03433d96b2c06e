"""Plain-text "RESUME ROAST REPORT" rendering.

Builds the downloadable report from the same fields the web client shows.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from shared.models import AnalysisResult

RULE = "=" * 50
NONE_DETECTED = "None detected."

_FINAL_THOUGHTS = (
    "Remember, this roast comes from a place of love (and advanced algorithms). "
    "Your resume might be {category} now, but with the right improvements, you "
    'could graduate to "competent human being" status.\n\n'
    "Good luck out there! You're going to need it."
)
_FOOTER = (
    "---\n"
    "Generated by Resume Roast AI\n"
    "Because someone needs to tell you the truth about your career prospects."
)


def _section(title: str) -> list[str]:
    return ["", RULE, title, RULE, ""]


def _bullets(items: list[str]) -> list[str]:
    return [f"• {item}" for item in items] or [NONE_DETECTED]


def _strip_prefix(line: str) -> str:
    return line[2:] if line.startswith("> ") else line


def render_report(result: AnalysisResult, generated_on: Optional[date] = None) -> str:
    """Render *result* as the plain-text report offered for download."""
    generated_on = generated_on or date.today()

    lines = ["RESUME ROAST REPORT", f"Generated on: {generated_on.isoformat()}"]

    lines += _section("OVERALL ASSESSMENT")
    lines.append(f"Category: {result.category}")
    lines.append(f"Score: {result.score}/100")
    if result.roast_text:
        lines.append("")
        lines += [_strip_prefix(line) for line in result.roast_text]

    lines += _section("DETAILED ANALYSIS")
    lines.append("OVERUSED SKILLS (Please stop):")
    lines += _bullets(result.overused_skills)
    lines.append("")
    lines.append("MISSING SKILLS (You really need these):")
    lines += _bullets(result.missing_skills)

    lines += _section("RECOMMENDATIONS FOR IMPROVEMENT")
    if result.recommendations:
        lines += [f"{i}. {rec}" for i, rec in enumerate(result.recommendations, 1)]
    else:
        lines.append(NONE_DETECTED)

    lines += _section("JOB OPPORTUNITIES")
    if result.job_matches:
        lines.append(
            "Based on your current skillset, here are some positions you might "
            "actually have a chance at:"
        )
        for i, job in enumerate(result.job_matches, 1):
            lines.append("")
            lines.append(f"{i}. {job.title} at {job.company} ({job.match}% match)")
            lines.append(f"   Skills needed: {', '.join(job.skills)}")
    else:
        lines.append(NONE_DETECTED)

    lines += _section("FINAL THOUGHTS")
    lines.append(_FINAL_THOUGHTS.format(category=result.category))
    lines.append("")
    lines.append(_FOOTER)

    return "\n".join(lines) + "\n"
