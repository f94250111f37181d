"""Admission limits and default-course configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, NamedTuple, Optional, Tuple

from django.conf import settings

from campus.exceptions import LimitExceeded

from .grading import GRADE_POINTS


class CourseLoad(NamedTuple):
    """Active course count and credit total of one student."""

    count: int = 0
    credits: int = 0

    def plus(self, credits: int) -> "CourseLoad":
        return CourseLoad(self.count + 1, self.credits + int(credits))


@dataclass(frozen=True)
class AcademicPolicy:
    course_limit: int = 6
    credit_limit: int = 18
    credit_minimum: int = 6
    active_statuses: Tuple[str, ...] = ("enrolled", "waitlisted")
    default_course_codes: Tuple[str, ...] = ()
    default_course_count: int = 3
    grade_points: Mapping[str, Decimal] = field(default_factory=lambda: GRADE_POINTS, repr=False)

    @classmethod
    def from_settings(cls) -> "AcademicPolicy":
        config = getattr(settings, "ACADEMIC_POLICY", {})
        defaults = cls()
        return cls(
            course_limit=int(config.get("COURSE_LIMIT", defaults.course_limit)),
            credit_limit=int(config.get("CREDIT_LIMIT", defaults.credit_limit)),
            credit_minimum=int(config.get("CREDIT_MIN", defaults.credit_minimum)),
            default_course_codes=tuple(config.get("DEFAULT_COURSE_CODES", ())),
            default_course_count=int(config.get("DEFAULT_COURSE_COUNT", defaults.default_course_count)),
        )

    def limit_breach(self, load: CourseLoad, credits: int) -> Optional[str]:
        """Name the first limit that admitting ``credits`` more would break.

        The course count is checked before the credit sum.
        """

        projected = load.plus(credits)
        if projected.count > self.course_limit:
            return LimitExceeded.COURSE_COUNT
        if projected.credits > self.credit_limit:
            return LimitExceeded.CREDIT_SUM
        return None
