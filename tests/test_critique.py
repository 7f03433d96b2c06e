"""
Unit tests for the overused-skill, missing-skill and recommendation lists.
"""

from types import MappingProxyType

import pytest

from roast_engine import critique
from roast_engine.catalog import DEFAULT_CATALOG, RoastCatalog
from roast_engine.signals import compute_signals


def _overused(text, catalog=DEFAULT_CATALOG):
    return critique.overused_skills(text, compute_signals(text, catalog), catalog)


def _missing(text):
    return critique.missing_skills(text, compute_signals(text, DEFAULT_CATALOG))


def _recommendations(text):
    return critique.recommendations(text, compute_signals(text, DEFAULT_CATALOG))


class TestOverusedSkills:
    """Tests for critique.overused_skills."""

    def test_buzzwords_in_catalog_order(self):
        assert _overused("fast learner, team player and hard worker") == [
            '"Team Player" - Translation: I do what others tell me',
            '"Hard Worker" - As opposed to all those lazy worker applicants',
            "\"Fast Learner\" - Because slow learners don't get hired",
        ]

    def test_office_and_communication_lines_come_last(self):
        lines = _overused("team player, microsoft office, communication")
        assert lines[0].startswith('"Team Player"')
        assert lines[1:] == [critique.MICROSOFT_OFFICE_ROAST, critique.COMMUNICATION_ROAST]

    def test_communication_line_needs_missing_leadership(self):
        assert critique.COMMUNICATION_ROAST not in _overused("communication, mentored juniors")

    def test_truncated_to_five(self):
        text = "team player hard worker fast learner synergy leverage utilize microsoft office"
        lines = _overused(text)
        assert len(lines) == critique.MAX_OVERUSED
        assert critique.MICROSOFT_OFFICE_ROAST not in lines

    def test_unmapped_buzzword_uses_fallback(self):
        catalog = RoastCatalog(
            vocabulary=(),
            technical_skills=(),
            modern_skills=(),
            buzzwords=("rockstar", "synergy"),
            padding_phrases=(),
            buzzword_roasts=MappingProxyType({"synergy": "synergy line"}),
        )
        assert _overused("rockstar synergy", catalog) == [
            '"rockstar" by Everyone Ever',
            "synergy line",
        ]

    def test_empty_text(self):
        assert _overused("") == []


class TestMissingSkills:
    """Tests for critique.missing_skills."""

    def test_empty_text_fills_six_slots(self):
        assert _missing("") == [
            critique.MISSING_TECH,
            critique.MISSING_ACHIEVEMENTS,
            critique.MISSING_LEADERSHIP,
            critique.MISSING_CERTIFICATIONS,
            critique.MISSING_PROJECTS,
            critique.MISSING_MODERN_STACK,
        ]

    def test_portfolio_link_only_asked_of_technical_resumes(self):
        assert critique.MISSING_PORTFOLIO_LINK in _missing("python")
        assert critique.MISSING_PORTFOLIO_LINK not in _missing("python, github.com/me")
        assert critique.MISSING_PORTFOLIO_LINK not in _missing("python portfolio")

    def test_certified_counts_as_certification(self):
        assert critique.MISSING_CERTIFICATIONS not in _missing("AWS certified")

    def test_complete_resume_has_no_gaps(self):
        text = (
            "react python java certification project github "
            "increased sales 20% led the team"
        )
        assert _missing(text) == []


class TestRecommendations:
    """Tests for critique.recommendations."""

    def test_proofread_always_closes_short_lists(self):
        text = "python java react increased revenue 20% led a team certification project"
        assert _recommendations(text) == [critique.RECOMMEND_PROOFREAD]

    def test_empty_text_keeps_proofread_line(self):
        lines = _recommendations("")
        assert len(lines) == 6
        assert lines[-1] == critique.RECOMMEND_PROOFREAD
        assert critique.RECOMMEND_NO_BUZZWORDS not in lines

    def test_proofread_dropped_when_six_conditionals_fire(self):
        lines = _recommendations("team player hard worker fast learner")
        assert lines == [
            critique.RECOMMEND_TECH,
            critique.RECOMMEND_ACHIEVEMENTS,
            critique.RECOMMEND_NO_BUZZWORDS,
            critique.RECOMMEND_LEADERSHIP,
            critique.RECOMMEND_CERTIFICATIONS,
            critique.RECOMMEND_PROJECTS,
        ]

    def test_certified_does_not_satisfy_certification_recommendation(self):
        assert critique.RECOMMEND_CERTIFICATIONS in _recommendations("AWS certified")

    @pytest.mark.parametrize("text", ["", "synergy " * 50, "python react docker"])
    def test_never_more_than_six(self, text):
        assert len(_recommendations(text)) <= critique.MAX_RECOMMENDATIONS
