"""Admission control, course load, GPA and default-course assignment."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Optional

from campus.exceptions import Duplicate, LimitExceeded, NotFound

from .grading import calculate_gpa, grade_to_points, normalize_grade
from .models import Enrollment
from .policy import AcademicPolicy, CourseLoad
from .stores import AcademicStore

logger = logging.getLogger(__name__)

ALREADY_ENROLLED = "already-enrolled"
LIMITS_EXCEEDED = "limits-exceeded"
NO_DEFAULT_COURSES = "no-default-courses"


@dataclass
class EnrollmentPatch:
    """Partial update of an enrollment; ``None`` means "leave as is".

    A blank ``grade`` withdraws the recorded letter and its points.
    """

    status: Optional[str] = None
    grade: Optional[str] = None
    publish: Optional[bool] = None


@dataclass(frozen=True)
class SkippedCourse:
    course_id: Optional[int]
    reason: str


@dataclass
class AutoEnrollmentResult:
    created: List[Enrollment] = field(default_factory=list)
    skipped: List[SkippedCourse] = field(default_factory=list)


class LoadCalculator:
    def __init__(self, store=None, policy: AcademicPolicy | None = None):
        self.store = store or AcademicStore()
        self.policy = policy or AcademicPolicy.from_settings()

    def current_load(self, student_id) -> CourseLoad:
        """Count and credits of enrollments that consume quota."""

        return self.store.active_load(student_id, self.policy.active_statuses)

    def summary(self, student_id) -> dict:
        load = self.current_load(student_id)
        return {
            "count": load.count,
            "credits": load.credits,
            "courseLimit": self.policy.course_limit,
            "creditLimit": self.policy.credit_limit,
            "creditMinimum": self.policy.credit_minimum,
            "remainingCourses": max(self.policy.course_limit - load.count, 0),
            "remainingCredits": max(self.policy.credit_limit - load.credits, 0),
            # Advisory only; nothing in the admission path enforces the floor.
            "belowCreditMinimum": load.credits < self.policy.credit_minimum,
        }


class GpaEngine:
    """Sole writer of ``Student.gpa``."""

    def __init__(self, store=None, policy: AcademicPolicy | None = None):
        self.store = store or AcademicStore()
        self.policy = policy or AcademicPolicy.from_settings()

    def recalculate(self, student_id) -> Optional[Decimal]:
        gpa = calculate_gpa(self.store.published_grades(student_id))
        if not self.store.set_student_gpa(student_id, gpa):
            raise NotFound("Student not found.")
        logger.debug("Recalculated GPA for student %s: %s", student_id, gpa)
        return gpa

    def recalculate_all(self) -> list:
        return [(student_id, self.recalculate(student_id)) for student_id in self.store.student_ids()]


class AdmissionController:
    def __init__(
        self,
        store=None,
        policy: AcademicPolicy | None = None,
        loads: LoadCalculator | None = None,
        gpa: GpaEngine | None = None,
    ):
        self.store = store or AcademicStore()
        self.policy = policy or AcademicPolicy.from_settings()
        self.loads = loads or LoadCalculator(self.store, self.policy)
        self.gpa = gpa or GpaEngine(self.store, self.policy)

    def create_enrollment(self, student_id, course_id, status: str = Enrollment.ENROLLED) -> Enrollment:
        """Admit a student into a course if both load limits still hold.

        Runs under a lock on the student row so concurrent requests for the
        same student see each other's inserts. Raises ``NotFound``,
        ``Duplicate`` or ``LimitExceeded``; a rejection writes nothing.
        """

        with self.store.atomic():
            student = self.store.get_student(student_id, lock=True)
            course = self.store.get_course(course_id)
            if student is None or course is None:
                raise NotFound("Student or course not found.")

            if self.store.enrollment_exists(student.pk, course.pk):
                raise Duplicate("Student is already linked to this course.")

            load = self.loads.current_load(student.pk)
            breach = self.policy.limit_breach(load, course.credits)
            if breach == LimitExceeded.COURSE_COUNT:
                logger.info("Student %s rejected for course %s: course limit reached", student.pk, course.pk)
                raise LimitExceeded(breach, f"Course limit reached ({self.policy.course_limit}).")
            if breach == LimitExceeded.CREDIT_SUM:
                logger.info("Student %s rejected for course %s: credit limit", student.pk, course.pk)
                raise LimitExceeded(
                    breach,
                    f"Adding this course would exceed the {self.policy.credit_limit}-credit limit.",
                )

            enrollment = self.store.create_enrollment(student.pk, course.pk, status)

        logger.info("Enrolled student %s in course %s (%s)", student.pk, course.pk, status)
        return enrollment

    def update_enrollment(self, enrollment_id, patch: EnrollmentPatch) -> Enrollment:
        """Apply a status/grade/publish patch and refresh the student's GPA.

        Load limits are not re-validated here.
        """

        with self.store.atomic():
            enrollment = self.store.get_enrollment(enrollment_id, lock=True)
            if enrollment is None:
                raise NotFound("Enrollment not found.")

            if patch.status:
                enrollment.status = patch.status
            letter = normalize_grade(patch.grade) if patch.grade is not None else normalize_grade(enrollment.grade_letter)
            enrollment.grade_letter = letter or ""
            enrollment.grade_points = grade_to_points(letter, self.policy.grade_points)
            if patch.publish is not None:
                enrollment.grade_released = patch.publish
            self.store.save_enrollment(enrollment, ["status", "grade_letter", "grade_points", "grade_released"])

            self.gpa.recalculate(enrollment.student_id)

        logger.info(
            "Updated enrollment %s: status=%s grade=%s published=%s",
            enrollment.pk,
            enrollment.status,
            enrollment.grade_letter or "-",
            enrollment.grade_released,
        )
        return enrollment


class AutoEnrollmentPlanner:
    def __init__(self, store=None, policy: AcademicPolicy | None = None, loads: LoadCalculator | None = None):
        self.store = store or AcademicStore()
        self.policy = policy or AcademicPolicy.from_settings()
        self.loads = loads or LoadCalculator(self.store, self.policy)

    def candidates(self) -> list:
        """Configured default courses in configured order, else the first K by code."""

        codes = self.policy.default_course_codes
        if not codes:
            return self.store.first_courses(self.policy.default_course_count)
        courses = self.store.courses_by_codes(codes)
        missing = set(codes) - {course.code for course in courses}
        if missing:
            logger.warning("Default course codes not found: %s", ", ".join(sorted(missing)))
        return courses

    def assign_defaults(self, student_id, candidates: Iterable | None = None) -> AutoEnrollmentResult:
        result = AutoEnrollmentResult()
        with self.store.atomic():
            student = self.store.get_student(student_id, lock=True)
            if student is None:
                raise NotFound("Student not found.")

            courses = list(candidates) if candidates is not None else self.candidates()
            if not courses:
                result.skipped.append(SkippedCourse(None, NO_DEFAULT_COURSES))
                return result

            existing = self.store.enrolled_course_ids(student.pk)
            running = self.loads.current_load(student.pk)
            for course in courses:
                if course.pk in existing:
                    result.skipped.append(SkippedCourse(course.pk, ALREADY_ENROLLED))
                    continue
                if self.policy.limit_breach(running, course.credits):
                    result.skipped.append(SkippedCourse(course.pk, LIMITS_EXCEEDED))
                    continue
                result.created.append(self.store.create_enrollment(student.pk, course.pk, Enrollment.ENROLLED))
                existing.add(course.pk)
                running = running.plus(course.credits)

        logger.info(
            "Assigned %d default course(s) to student %s, skipped %d",
            len(result.created),
            student_id,
            len(result.skipped),
        )
        return result
