from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import DEFAULT_MAX_SCORE, LOW_GRADE_THRESHOLD
from .model import Grade


def find_grade(grades: Sequence[Grade], subject: str, term: int) -> Optional[Grade]:
    for g in grades:
        if g.subject == subject and g.term == term:
            return g
    return None


def upsert_grade(grades: Sequence[Grade], *, subject: str, term: int, score: float) -> tuple[Grade, ...]:
    """(subject, term) is the key: replace the score in place, else append."""

    out = list(grades)
    for i, g in enumerate(out):
        if g.subject == subject and g.term == term:
            out[i] = replace(g, score=score)
            return tuple(out)
    out.append(Grade(subject=subject, score=score, term=term, max_score=DEFAULT_MAX_SCORE))
    return tuple(out)


def grades_for_term(grades: Sequence[Grade], term: int) -> tuple[Grade, ...]:
    return tuple(g for g in grades if g.term == term)


def grade_band(score: float) -> str:
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= LOW_GRADE_THRESHOLD:
        return "pass"
    return "at_risk"


def average_percentage(grades: Sequence[Grade]) -> Optional[float]:
    if not grades:
        return None
    return round(sum(g.percentage for g in grades) / len(grades), 1)
