import datetime
from decimal import Decimal

import pytest
from django.urls import reverse

from academics.models import Course, Enrollment, Student
from facilities.models import Facility, FacilityBooking

pytestmark = pytest.mark.django_db


@pytest.fixture
def student():
    return Student.objects.create(name="Eli Stone", email="eli@example.edu", major="History", year=1)


def test_recalculate_gpa_action(admin_client, student):
    course = Course.objects.create(code="HIST101", title="World History", instructor="Dr. Hughes", credits=3)
    Enrollment.objects.create(
        student=student, course=course, grade_letter="B+", grade_points=Decimal("3.3"), grade_released=True
    )

    response = admin_client.post(
        reverse("admin:academics_student_changelist"),
        {"action": "recalculate_gpa", "_selected_action": [student.pk]},
    )

    assert response.status_code == 302
    student.refresh_from_db()
    assert student.gpa == Decimal("3.30")


def test_assign_default_courses_action(admin_client, student):
    for code in ("ENG101", "HIST101", "MATH101"):
        Course.objects.create(code=code, title=code, instructor="Staff", credits=3)

    admin_client.post(
        reverse("admin:academics_student_changelist"),
        {"action": "assign_default_courses", "_selected_action": [student.pk]},
    )

    assert Enrollment.objects.filter(student=student).count() == 3


def test_enrollment_change_goes_through_grading(admin_client, student):
    course = Course.objects.create(code="MATH101", title="Calculus", instructor="Staff", credits=3)
    enrollment = Enrollment.objects.create(student=student, course=course)

    response = admin_client.post(
        reverse("admin:academics_enrollment_change", args=[enrollment.pk]),
        {"status": "completed", "grade_letter": "a-", "grade_released": "on"},
    )

    assert response.status_code == 302
    enrollment.refresh_from_db()
    student.refresh_from_db()
    assert enrollment.grade_letter == "A-"
    assert enrollment.grade_points == Decimal("3.7")
    assert student.gpa == Decimal("3.70")


def test_booking_status_change_cannot_create_overlap(admin_client):
    facility = Facility.objects.create(name="Hall A", facility_type="lecture_hall", building="Main", capacity=80)
    slot = {
        "facility": facility,
        "booked_by": "registrar",
        "purpose": "Exam",
        "booking_date": datetime.date(2026, 5, 4),
        "start_time": datetime.time(10, 0),
        "end_time": datetime.time(11, 0),
    }
    cancelled = FacilityBooking.objects.create(status=FacilityBooking.CANCELLED, **slot)
    FacilityBooking.objects.create(status=FacilityBooking.PENDING, **slot)

    admin_client.post(
        reverse("admin:facilities_facilitybooking_change", args=[cancelled.pk]),
        {"status": FacilityBooking.PENDING},
    )

    cancelled.refresh_from_db()
    assert cancelled.status == FacilityBooking.CANCELLED
    assert FacilityBooking.objects.exclude(status=FacilityBooking.CANCELLED).count() == 1


def test_booking_status_change_without_clash(admin_client):
    facility = Facility.objects.create(name="Hall B", facility_type="lecture_hall", building="Main", capacity=80)
    booking = FacilityBooking.objects.create(
        facility=facility,
        booked_by="registrar",
        purpose="Seminar",
        booking_date=datetime.date(2026, 5, 4),
        start_time=datetime.time(9, 0),
        end_time=datetime.time(10, 0),
    )

    response = admin_client.post(
        reverse("admin:facilities_facilitybooking_change", args=[booking.pk]),
        {"status": FacilityBooking.CONFIRMED},
    )

    assert response.status_code == 302
    booking.refresh_from_db()
    assert booking.status == FacilityBooking.CONFIRMED


def test_blank_grade_in_admin_withdraws_grade(admin_client, student):
    course = Course.objects.create(code="ENG101", title="Writing", instructor="Staff", credits=3)
    enrollment = Enrollment.objects.create(
        student=student, course=course, grade_letter="B", grade_points=Decimal("3.0"), grade_released=True
    )
    Student.objects.filter(pk=student.pk).update(gpa=Decimal("3.00"))

    admin_client.post(
        reverse("admin:academics_enrollment_change", args=[enrollment.pk]),
        {"status": "completed", "grade_letter": "", "grade_released": "on"},
    )

    enrollment.refresh_from_db()
    student.refresh_from_db()
    assert enrollment.grade_letter == ""
    assert enrollment.grade_points is None
    assert student.gpa is None
