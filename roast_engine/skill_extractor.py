"""Deterministic keyword-based skill extractor.

No LLM involved. Every vocabulary entry is looked up as a plain substring of
the lower-cased text, so "java" is also found inside "javascript". Word
boundaries are not enforced.
"""

from __future__ import annotations

from typing import Iterable


def find_phrases(text: str, phrases: Iterable[str]) -> list[str]:
    """Return the entries of *phrases* contained in *text*, in input order."""
    lower = text.lower()
    return [p for p in phrases if p in lower]


def extract_skills(text: str, vocabulary: Iterable[str]) -> list[str]:
    """Return the vocabulary skills found in *text*.

    The result follows vocabulary order, so the same text always yields the
    same list.
    """
    return find_phrases(text, vocabulary)
