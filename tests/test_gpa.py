from decimal import Decimal

import pytest

from academics.services import GpaEngine
from campus.exceptions import NotFound


def test_unpublished_grades_do_not_count(store, policy):
    student = store.add_student()
    store.add_enrollment(student, store.add_course("MATH101"), grade_points=Decimal("4.0"), released=True)
    store.add_enrollment(student, store.add_course("ENG101"), grade_points=Decimal("3.0"), released=False)

    gpa = GpaEngine(store, policy).recalculate(student.pk)

    assert gpa == Decimal("4.00")
    assert store.students[student.pk].gpa == Decimal("4.00")


def test_recalculate_is_idempotent(store, policy):
    student = store.add_student()
    store.add_enrollment(student, store.add_course("MATH101"), grade_points=Decimal("3.3"), released=True)
    engine = GpaEngine(store, policy)

    assert engine.recalculate(student.pk) == engine.recalculate(student.pk) == Decimal("3.30")


def test_no_published_grades_clears_gpa(store, policy):
    student = store.add_student(gpa=Decimal("3.00"))
    store.add_enrollment(student, store.add_course("MATH101"))

    assert GpaEngine(store, policy).recalculate(student.pk) is None
    assert store.students[student.pk].gpa is None


def test_recalculate_unknown_student(store, policy):
    with pytest.raises(NotFound):
        GpaEngine(store, policy).recalculate(404)


def test_recalculate_all(store, policy):
    first = store.add_student()
    second = store.add_student()
    store.add_enrollment(first, store.add_course("MATH101"), grade_points=Decimal("2.0"), released=True)

    results = GpaEngine(store, policy).recalculate_all()

    assert results == [(first.pk, Decimal("2.00")), (second.pk, None)]
