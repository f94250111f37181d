import logging

import pytest
from django.db import DatabaseError

from academics.policy import AcademicPolicy
from academics.services import (
    ALREADY_ENROLLED,
    LIMITS_EXCEEDED,
    NO_DEFAULT_COURSES,
    AutoEnrollmentPlanner,
    LoadCalculator,
    SkippedCourse,
)
from campus.exceptions import NotFound

from .fakes import InMemoryAcademicStore


def test_assigns_all_defaults_to_new_student(store, policy):
    student = store.add_student()
    candidates = [store.add_course(code, credits=3) for code in ("MATH101", "ENG101", "HIST101")]

    result = AutoEnrollmentPlanner(store, policy).assign_defaults(student.pk, candidates)

    assert [enrollment.course_id for enrollment in result.created] == [course.pk for course in candidates]
    assert result.skipped == []
    load = LoadCalculator(store, policy).current_load(student.pk)
    assert (load.count, load.credits) == (3, 9)


def test_skips_existing_enrollments(store, policy):
    student = store.add_student()
    math = store.add_course("MATH101")
    eng = store.add_course("ENG101")
    store.add_enrollment(student, math)

    result = AutoEnrollmentPlanner(store, policy).assign_defaults(student.pk, [math, eng])

    assert [enrollment.course_id for enrollment in result.created] == [eng.pk]
    assert result.skipped == [SkippedCourse(math.pk, ALREADY_ENROLLED)]


def test_repeated_candidate_is_created_once(store, policy):
    student = store.add_student()
    math = store.add_course("MATH101")

    result = AutoEnrollmentPlanner(store, policy).assign_defaults(student.pk, [math, math])

    assert len(result.created) == 1
    assert result.skipped == [SkippedCourse(math.pk, ALREADY_ENROLLED)]


def test_limits_use_running_totals_and_keep_going(store, policy):
    student = store.add_student()
    for index in range(4):
        store.add_enrollment(student, store.add_course(f"OLD{index}", credits=4))
    big = store.add_course("LAB200", credits=4)
    small = store.add_course("ART105", credits=2)
    after = store.add_course("SEM101", credits=1)

    result = AutoEnrollmentPlanner(store, policy).assign_defaults(student.pk, [big, small, after])

    assert [enrollment.course_id for enrollment in result.created] == [small.pk]
    assert result.skipped == [
        SkippedCourse(big.pk, LIMITS_EXCEEDED),
        SkippedCourse(after.pk, LIMITS_EXCEEDED),
    ]


def test_no_candidates(store, policy):
    student = store.add_student()

    result = AutoEnrollmentPlanner(store, policy).assign_defaults(student.pk)

    assert result.created == []
    assert result.skipped == [SkippedCourse(None, NO_DEFAULT_COURSES)]


def test_unknown_student(store, policy):
    with pytest.raises(NotFound):
        AutoEnrollmentPlanner(store, policy).assign_defaults(7, [])


def test_fallback_candidates_are_first_courses_by_code(store):
    for code in ("PHYS120", "ART105", "MATH101", "CS110"):
        store.add_course(code)
    planner = AutoEnrollmentPlanner(store, AcademicPolicy(default_course_count=2))

    assert [course.code for course in planner.candidates()] == ["ART105", "CS110"]


def test_configured_codes_keep_configured_order(store, caplog):
    for code in ("ENG101", "HIST101", "MATH101"):
        store.add_course(code)
    planner = AutoEnrollmentPlanner(store, AcademicPolicy(default_course_codes=("MATH101", "NOPE1", "ENG101")))

    with caplog.at_level(logging.WARNING, logger="academics.services"):
        candidates = planner.candidates()

    assert [course.code for course in candidates] == ["MATH101", "ENG101"]
    assert "NOPE1" in caplog.text


class FailingSecondInsertStore(InMemoryAcademicStore):
    def __init__(self):
        super().__init__()
        self.inserts = 0

    def create_enrollment(self, student_id, course_id, status):
        self.inserts += 1
        if self.inserts == 2:
            raise DatabaseError("connection lost")
        return super().create_enrollment(student_id, course_id, status)


def test_failure_mid_assignment_leaves_no_enrollments(policy):
    store = FailingSecondInsertStore()
    student = store.add_student()
    candidates = [store.add_course(code) for code in ("ENG101", "HIST101", "MATH101")]

    with pytest.raises(DatabaseError):
        AutoEnrollmentPlanner(store, policy).assign_defaults(student.pk, candidates)

    assert store.enrollments == {}
    assert store.locked == [student.pk]
