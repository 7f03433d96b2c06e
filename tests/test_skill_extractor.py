"""
Unit tests for keyword skill extraction and derived signals.
"""

import pytest

from roast_engine.catalog import DEFAULT_CATALOG
from roast_engine.signals import Signals, compute_signals
from roast_engine.skill_extractor import extract_skills, find_phrases


class TestExtractSkills:
    """Tests for extract_skills."""

    def test_empty_text_yields_no_skills(self):
        assert extract_skills("", DEFAULT_CATALOG.vocabulary) == []

    def test_case_insensitive(self):
        skills = extract_skills("Senior PYTHON dev, loves Docker", DEFAULT_CATALOG.vocabulary)
        assert skills == ["python", "docker"]

    def test_substring_matching_is_not_word_aware(self):
        """'java' is found inside 'javascript'."""
        skills = extract_skills("javascript", DEFAULT_CATALOG.vocabulary)
        assert skills == ["javascript", "java"]

    def test_result_follows_vocabulary_order(self):
        skills = extract_skills("figma, git, python", DEFAULT_CATALOG.vocabulary)
        assert skills == ["python", "git", "figma"]

    def test_multi_word_skills(self):
        text = "Strong problem solving and project management"
        assert extract_skills(text, DEFAULT_CATALOG.vocabulary) == [
            "project management",
            "problem solving",
        ]

    def test_custom_vocabulary(self):
        assert extract_skills("rust and go", ["rust", "zig"]) == ["rust"]

    def test_find_phrases_preserves_input_order(self):
        assert find_phrases("b a", ["b", "a", "c"]) == ["b", "a"]


class TestComputeSignals:
    """Tests for compute_signals."""

    def test_empty_text(self):
        assert compute_signals("", DEFAULT_CATALOG) == Signals()

    def test_counts_technical_and_modern_skills(self):
        signals = compute_signals("react and python", DEFAULT_CATALOG)
        assert signals.tech_skill_count == 2
        assert signals.modern_skill_count == 1

    @pytest.mark.parametrize(
        "text",
        ["grew revenue 20%", "10+ clients", "saved $500", "improved uptime", "managed 5 engineers"],
    )
    def test_achievement_patterns(self, text):
        assert compute_signals(text, DEFAULT_CATALOG).has_achievements

    def test_leadership_is_substring_based(self):
        """'led' also matches inside words like 'skilled'."""
        assert compute_signals("skilled typist", DEFAULT_CATALOG).has_leadership

    def test_education(self):
        assert compute_signals("State University", DEFAULT_CATALOG).has_education

    def test_overused_and_padding(self):
        signals = compute_signals(
            "Passionate team player. Responsible for worked on stuff", DEFAULT_CATALOG
        )
        assert signals.overused_phrases == ("team player", "passionate")
        assert signals.overused_count == 2
        assert signals.padding_count == 2

    def test_deterministic(self):
        text = "Led a team, python, synergy, bachelor"
        assert compute_signals(text, DEFAULT_CATALOG) == compute_signals(text, DEFAULT_CATALOG)
