"""Create a small demo dataset for quick walkthroughs."""
from __future__ import annotations

import datetime

from django.core.management.base import BaseCommand

from academics.models import Course, Student
from academics.services import AdmissionController, AutoEnrollmentPlanner, EnrollmentPatch
from campus.exceptions import CampusError
from facilities.models import Facility, FacilityBooking
from facilities.services import BookingService


class Command(BaseCommand):
    help = "Seed courses, students (with default enrollments), facilities and a booking"

    def handle(self, *args, **options):
        self.stdout.write(self.style.MIGRATE_HEADING("Creating courses..."))
        courses = [
            ("ENG101", "Academic Writing", "Dr. Baker", 3, "core", "English"),
            ("HIST101", "World History", "Dr. Hughes", 3, "core", "History"),
            ("MATH101", "Calculus I", "Dr. Noether", 3, "core", "Mathematics"),
            ("CS110", "Introduction to Programming", "Dr. Hopper", 4, "major_required", "Computer Science"),
            ("PHYS120", "Mechanics", "Dr. Meitner", 4, "major_required", "Physics"),
            ("ART105", "Drawing Studio", "Prof. Kahlo", 2, "elective", "Fine Arts"),
        ]
        for code, title, instructor, credits, course_type, department in courses:
            Course.objects.get_or_create(
                code=code,
                defaults={
                    "title": title,
                    "instructor": instructor,
                    "credits": credits,
                    "course_type": course_type,
                    "department": department,
                },
            )

        self.stdout.write(self.style.MIGRATE_HEADING("Creating students..."))
        students_data = [
            ("Alice Carter", "alice@example.edu", "Computer Science", 1),
            ("Ben Okafor", "ben@example.edu", "Physics", 1),
            ("Chloe Martin", "chloe@example.edu", "History", 2),
        ]
        planner = AutoEnrollmentPlanner()
        students = []
        for name, email, major, year in students_data:
            student, created = Student.objects.get_or_create(
                email=email, defaults={"name": name, "major": major, "year": year}
            )
            students.append(student)
            if created:
                result = planner.assign_defaults(student.pk)
                self.stdout.write(
                    f"  {student.name}: {len(result.created)} default enrollment(s), {len(result.skipped)} skipped"
                )

        admissions = AdmissionController()
        extra = Course.objects.get(code="MATH101")
        try:
            enrollment = admissions.create_enrollment(students[0].pk, extra.pk)
        except CampusError as exc:
            self.stdout.write(self.style.WARNING(f"  Skipped extra enrollment: {exc.message}"))
        else:
            admissions.update_enrollment(enrollment.pk, EnrollmentPatch(grade="A-", publish=True))

        self.stdout.write(self.style.MIGRATE_HEADING("Creating facilities..."))
        hall, _ = Facility.objects.get_or_create(
            name="Lecture Hall A",
            building="Science Center",
            defaults={"facility_type": "lecture_hall", "floor": "1", "capacity": 120, "equipment": "Projector"},
        )
        Facility.objects.get_or_create(
            name="Study Room 3",
            building="Library",
            defaults={"facility_type": "study_room", "floor": "2", "capacity": 8},
        )

        booking_date = datetime.date.today() + datetime.timedelta(days=7)
        if not FacilityBooking.objects.filter(facility=hall, booking_date=booking_date).exists():
            BookingService().create_booking(
                hall.pk,
                "registrar",
                "Orientation session",
                booking_date,
                datetime.time(10, 0),
                datetime.time(11, 0),
            )

        self.stdout.write(self.style.SUCCESS("Demo data ready."))
