"""Print a student's enrollments and recalculated GPA."""
from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from academics.models import Enrollment, Student
from academics.services import GpaEngine


class Command(BaseCommand):
    help = "Show transcript and GPA for a student id"

    def add_arguments(self, parser):
        parser.add_argument("student_id", type=int)

    def handle(self, *args, **options):
        student = Student.objects.filter(pk=options["student_id"]).first()
        if student is None:
            raise CommandError(f"Student {options['student_id']} not found")

        rows = Enrollment.objects.filter(student=student).select_related("course").order_by("course__code")
        self.stdout.write(f"{student.name} ({student.major}, year {student.year})")
        if not rows:
            self.stdout.write("No enrollments found.")
        else:
            self.stdout.write("Course | Credits | Status | Grade | Published")
        for row in rows:
            self.stdout.write(
                f"{row.course.code:8} {row.course.credits:7d} {row.status:10} "
                f"{row.grade_letter or '-':5} {'yes' if row.grade_released else 'no'}"
            )
        gpa = GpaEngine().recalculate(student.pk)
        self.stdout.write(f"Cumulative GPA: {gpa if gpa is not None else 'N/A'}")
