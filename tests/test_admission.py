from decimal import Decimal

import pytest

from academics.models import Enrollment
from academics.policy import CourseLoad
from academics.services import AdmissionController, EnrollmentPatch, LoadCalculator
from campus.exceptions import Duplicate, LimitExceeded, NotFound


@pytest.fixture
def admissions(store, policy):
    return AdmissionController(store, policy)


def enroll_many(store, student, credits_list, prefix="C"):
    for index, credits in enumerate(credits_list):
        store.add_enrollment(student, store.add_course(f"{prefix}{index}", credits=credits))


def test_reaching_exact_ceiling_is_accepted(store, policy, admissions):
    student = store.add_student()
    enroll_many(store, student, [3, 3, 3, 3, 3])
    course = store.add_course("MATH101", credits=3)

    enrollment = admissions.create_enrollment(student.pk, course.pk)

    assert enrollment.status == Enrollment.ENROLLED
    assert enrollment.grade_points is None
    assert LoadCalculator(store, policy).current_load(student.pk) == CourseLoad(6, 18)
    assert student.pk in store.locked


def test_course_limit_rejects_regardless_of_credits(store, admissions):
    student = store.add_student()
    enroll_many(store, student, [1, 1, 1, 1, 1, 1])
    course = store.add_course("MATH101", credits=1)

    with pytest.raises(LimitExceeded) as excinfo:
        admissions.create_enrollment(student.pk, course.pk)

    assert excinfo.value.reason == LimitExceeded.COURSE_COUNT
    assert excinfo.value.message == "Course limit reached (6)."
    assert len(store.enrollments) == 6


def test_credit_limit_rejects_below_course_limit(store, admissions):
    student = store.add_student()
    enroll_many(store, student, [4, 4, 4, 4])
    course = store.add_course("MATH101", credits=3)

    with pytest.raises(LimitExceeded) as excinfo:
        admissions.create_enrollment(student.pk, course.pk)

    assert excinfo.value.reason == LimitExceeded.CREDIT_SUM
    assert "18-credit limit" in excinfo.value.message


def test_course_count_reported_before_credit_sum(store, admissions):
    student = store.add_student()
    enroll_many(store, student, [3, 3, 3, 3, 3, 3])
    course = store.add_course("MATH101", credits=3)

    with pytest.raises(LimitExceeded) as excinfo:
        admissions.create_enrollment(student.pk, course.pk)

    assert excinfo.value.reason == LimitExceeded.COURSE_COUNT


def test_inactive_enrollments_do_not_consume_quota(store, admissions):
    student = store.add_student()
    for index in range(6):
        store.add_enrollment(student, store.add_course(f"OLD{index}", credits=3), status=Enrollment.DROPPED)
    course = store.add_course("MATH101", credits=3)

    assert admissions.create_enrollment(student.pk, course.pk).course_id == course.pk


def test_waitlisted_consumes_quota(store, admissions):
    student = store.add_student()
    for index in range(6):
        store.add_enrollment(student, store.add_course(f"W{index}", credits=1), status=Enrollment.WAITLISTED)
    course = store.add_course("MATH101", credits=1)

    with pytest.raises(LimitExceeded):
        admissions.create_enrollment(student.pk, course.pk, Enrollment.WAITLISTED)


def test_duplicate_is_checked_before_limits(store, admissions):
    student = store.add_student()
    enroll_many(store, student, [3, 3, 3, 3, 3, 3])
    already = next(iter(store.courses.values()))

    with pytest.raises(Duplicate):
        admissions.create_enrollment(student.pk, already.pk)


def test_dropped_enrollment_still_blocks_re_enrollment(store, admissions):
    student = store.add_student()
    course = store.add_course("MATH101")
    store.add_enrollment(student, course, status=Enrollment.DROPPED)

    with pytest.raises(Duplicate):
        admissions.create_enrollment(student.pk, course.pk)


@pytest.mark.parametrize("missing", ["student", "course"])
def test_missing_student_or_course(store, admissions, missing):
    student = store.add_student()
    course = store.add_course("MATH101")
    student_id = 999 if missing == "student" else student.pk
    course_id = 999 if missing == "course" else course.pk

    with pytest.raises(NotFound):
        admissions.create_enrollment(student_id, course_id)
    assert store.enrollments == {}


def test_update_normalizes_grade_and_publishes(store, admissions):
    student = store.add_student()
    enrollment = store.add_enrollment(student, store.add_course("MATH101"))

    updated = admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade=" a- ", publish=True))

    assert updated.grade_letter == "A-"
    assert updated.grade_points == Decimal("3.7")
    assert updated.grade_released is True
    assert store.students[student.pk].gpa == Decimal("3.70")


def test_update_without_publish_keeps_flag(store, admissions):
    student = store.add_student()
    enrollment = store.add_enrollment(student, store.add_course("MATH101"), released=True)

    updated = admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade="B"))

    assert updated.grade_released is True
    assert store.students[student.pk].gpa == Decimal("3.00")


def test_update_can_unpublish(store, admissions):
    student = store.add_student()
    enrollment = store.add_enrollment(student, store.add_course("MATH101"))
    admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade="A", publish=True))

    updated = admissions.update_enrollment(enrollment.pk, EnrollmentPatch(publish=False))

    assert updated.grade_letter == "A"
    assert updated.grade_released is False
    assert store.students[student.pk].gpa is None


def test_update_with_unknown_grade_stores_no_points(store, admissions):
    student = store.add_student()
    enrollment = store.add_enrollment(student, store.add_course("MATH101"))

    updated = admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade="Z", publish=True))

    assert updated.grade_letter == "Z"
    assert updated.grade_points is None
    assert store.students[student.pk].gpa is None


def test_status_change_does_not_recheck_limits(store, policy, admissions):
    student = store.add_student()
    enroll_many(store, student, [3, 3, 3, 3, 3, 3])
    dropped = store.add_enrollment(student, store.add_course("EXTRA"), status=Enrollment.DROPPED)

    updated = admissions.update_enrollment(dropped.pk, EnrollmentPatch(status=Enrollment.ENROLLED))

    assert updated.status == Enrollment.ENROLLED
    assert LoadCalculator(store, policy).current_load(student.pk) == CourseLoad(7, 21)


def test_update_missing_enrollment(admissions):
    with pytest.raises(NotFound):
        admissions.update_enrollment(42, EnrollmentPatch(grade="A"))


def test_blank_grade_withdraws_recorded_grade(store, admissions):
    student = store.add_student()
    enrollment = store.add_enrollment(student, store.add_course("MATH101"))
    admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade="A", publish=True))

    updated = admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade=""))

    assert updated.grade_letter == ""
    assert updated.grade_points is None
    assert updated.grade_released is True
    assert store.students[student.pk].gpa is None
