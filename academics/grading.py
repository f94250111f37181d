"""Letter-grade lookup and GPA arithmetic."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

GRADE_POINTS: Mapping[str, Decimal] = MappingProxyType(
    {
        "A": Decimal("4.0"),
        "A-": Decimal("3.7"),
        "B+": Decimal("3.3"),
        "B": Decimal("3.0"),
        "B-": Decimal("2.7"),
        "C+": Decimal("2.3"),
        "C": Decimal("2.0"),
        "C-": Decimal("1.7"),
        "D": Decimal("1.0"),
        "F": Decimal("0.0"),
    }
)

GPA_PLACES = Decimal("0.01")


def normalize_grade(letter) -> Optional[str]:
    if letter is None:
        return None
    normalized = str(letter).strip().upper()
    return normalized or None


def grade_to_points(letter, table: Mapping[str, Decimal] = GRADE_POINTS) -> Optional[Decimal]:
    """Map a letter grade onto grade points; unknown letters yield ``None``."""

    normalized = normalize_grade(letter)
    if normalized is None:
        return None
    return table.get(normalized)


def calculate_gpa(graded: Iterable[Tuple[Optional[Decimal], int]]) -> Optional[Decimal]:
    """Credit-weighted average of ``(grade_points, credits)`` pairs.

    Pairs without grade points are ignored. Returns ``None`` when no credits
    carry a grade, otherwise the average rounded half-up to two places.
    """

    total_points = Decimal("0")
    total_credits = 0
    for points, credits in graded:
        if points is None:
            continue
        total_points += Decimal(str(points)) * int(credits)
        total_credits += int(credits)
    if total_credits <= 0:
        return None
    return (total_points / total_credits).quantize(GPA_PLACES, rounding=ROUND_HALF_UP)
