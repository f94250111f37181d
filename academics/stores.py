"""ORM access used by the academic services.

Services only talk to a store, so tests can hand them an in-memory double
with the same methods.
"""
from __future__ import annotations

from django.db import IntegrityError, transaction
from django.db.models import Count, Sum

from campus.exceptions import Duplicate

from .models import Course, Enrollment, Student
from .policy import CourseLoad


class AcademicStore:
    def atomic(self):
        return transaction.atomic()

    def get_student(self, student_id, *, lock: bool = False):
        queryset = Student.objects.all()
        if lock:
            # The student row guards the whole enrollment set of that student.
            queryset = queryset.select_for_update()
        return queryset.filter(pk=student_id).first()

    def student_ids(self) -> list:
        return list(Student.objects.order_by("pk").values_list("pk", flat=True))

    def set_student_gpa(self, student_id, gpa) -> bool:
        return Student.objects.filter(pk=student_id).update(gpa=gpa) > 0

    def get_course(self, course_id):
        return Course.objects.filter(pk=course_id).first()

    def courses_by_codes(self, codes) -> list:
        found = {course.code: course for course in Course.objects.filter(code__in=codes)}
        return [found[code] for code in codes if code in found]

    def first_courses(self, count: int) -> list:
        return list(Course.objects.order_by("code")[:count])

    def active_load(self, student_id, statuses) -> CourseLoad:
        totals = Enrollment.objects.filter(student_id=student_id, status__in=statuses).aggregate(
            count=Count("id"),
            credits=Sum("course__credits"),
        )
        return CourseLoad(int(totals["count"] or 0), int(totals["credits"] or 0))

    def enrollment_exists(self, student_id, course_id) -> bool:
        return Enrollment.objects.filter(student_id=student_id, course_id=course_id).exists()

    def enrolled_course_ids(self, student_id) -> set:
        return set(Enrollment.objects.filter(student_id=student_id).values_list("course_id", flat=True))

    def create_enrollment(self, student_id, course_id, status):
        try:
            with transaction.atomic():
                return Enrollment.objects.create(
                    student_id=student_id,
                    course_id=course_id,
                    status=status,
                    grade_letter="",
                    grade_points=None,
                )
        except IntegrityError as exc:
            raise Duplicate("Student is already linked to this course.") from exc

    def get_enrollment(self, enrollment_id, *, lock: bool = False):
        queryset = Enrollment.objects.all()
        if lock:
            queryset = queryset.select_for_update()
        return queryset.filter(pk=enrollment_id).first()

    def save_enrollment(self, enrollment, fields) -> None:
        enrollment.save(update_fields=list(fields))

    def published_grades(self, student_id) -> list:
        return list(
            Enrollment.objects.filter(
                student_id=student_id,
                grade_points__isnull=False,
                grade_released=True,
            ).values_list("grade_points", "course__credits")
        )
