"""JSON endpoints adapting the academic services."""
from __future__ import annotations

import logging

from django.db import DatabaseError, IntegrityError
from django.db.models import Count, Q
from django.http import HttpResponse, JsonResponse

from campus.exceptions import Duplicate, NotFound
from campus.http import JsonView, read_json, validated

from .forms import (
    CourseForm,
    EnrollmentCreateForm,
    EnrollmentUpdateForm,
    StudentForm,
    course_form_data,
    partial_update_form,
)
from .models import Course, Enrollment, Student
from .services import (
    NO_DEFAULT_COURSES,
    AdmissionController,
    AutoEnrollmentPlanner,
    EnrollmentPatch,
    GpaEngine,
    LoadCalculator,
)

logger = logging.getLogger(__name__)


def _decimal(value):
    return float(value) if value is not None else None


def student_payload(student: Student) -> dict:
    return {
        "id": student.pk,
        "name": student.name,
        "email": student.email,
        "major": student.major,
        "year": student.year,
        "status": student.status,
        "gpa": _decimal(student.gpa),
        "advisor": student.advisor,
    }


def course_payload(course: Course) -> dict:
    return {
        "id": course.pk,
        "code": course.code,
        "title": course.title,
        "instructor": course.instructor,
        "credits": course.credits,
        "capacity": course.capacity,
        "courseType": course.course_type,
        "department": course.department or None,
        "schedule": {
            "day": course.schedule_day,
            "time": course.schedule_time,
            "location": course.schedule_location,
        },
    }


def enrollment_payload(enrollment: Enrollment, detail: bool = False) -> dict:
    payload = {
        "id": enrollment.pk,
        "studentId": enrollment.student_id,
        "courseId": enrollment.course_id,
        "status": enrollment.status,
        "grade": enrollment.grade_letter or None,
        "gradePoints": _decimal(enrollment.grade_points),
        "gradePublished": enrollment.grade_released,
    }
    if detail:
        payload["student"] = student_payload(enrollment.student)
        payload["course"] = course_payload(enrollment.course)
    return payload


def auto_enrollment_payload(result) -> dict:
    return {
        "created": [enrollment_payload(enrollment) for enrollment in result.created],
        "skipped": [{"courseId": skip.course_id, "reason": skip.reason} for skip in result.skipped],
    }


def _get_student(student_id) -> Student:
    student = Student.objects.filter(pk=student_id).first()
    if student is None:
        raise NotFound("Student not found.")
    return student


def _get_course(course_id) -> Course:
    course = Course.objects.filter(pk=course_id).first()
    if course is None:
        raise NotFound("Course not found.")
    return course


def _save(form, message):
    validated(form)
    try:
        return form.save()
    except IntegrityError as exc:
        raise Duplicate(message) from exc


def _student_enrollments(student_id) -> list:
    queryset = Enrollment.objects.filter(student_id=student_id).select_related("student", "course")
    return [enrollment_payload(enrollment, detail=True) for enrollment in queryset]


class StudentCollectionView(JsonView):
    def get(self, request):
        return JsonResponse([student_payload(student) for student in Student.objects.all()], safe=False)

    def post(self, request):
        student = _save(StudentForm(read_json(request)), "A student with this email already exists.")

        auto_enrollments = []
        note = None
        try:
            result = AutoEnrollmentPlanner().assign_defaults(student.pk)
        except DatabaseError:
            logger.exception("Default enrollment failed for student %s", student.pk)
            note = "Default courses could not be assigned."
        else:
            auto_enrollments = auto_enrollment_payload(result)["created"]
            if any(skip.reason == NO_DEFAULT_COURSES for skip in result.skipped):
                note = "No default courses are available."
            elif result.skipped:
                note = f"Skipped {len(result.skipped)} default courses due to limits or existing matches."

        return JsonResponse(
            {"student": student_payload(student), "autoEnrollments": auto_enrollments, "autoEnrollNote": note},
            status=201,
        )


class StudentDetailView(JsonView):
    def get(self, request, student_id):
        return JsonResponse(student_payload(_get_student(student_id)))

    def put(self, request, student_id):
        # gpa is not a form field; only GpaEngine writes it.
        form = partial_update_form(StudentForm, _get_student(student_id), read_json(request))
        student = _save(form, "A student with this email already exists.")
        return JsonResponse(student_payload(student))

    patch = put

    def delete(self, request, student_id):
        deleted, _ = Student.objects.filter(pk=student_id).delete()
        if not deleted:
            raise NotFound("Student not found.")
        return HttpResponse(status=204)


class StudentRecordsView(JsonView):
    def get(self, request):
        engine = GpaEngine()
        records = []
        for student in Student.objects.all():
            student.gpa = engine.recalculate(student.pk)
            records.append(
                {
                    "student": student_payload(student),
                    "gpa": _decimal(student.gpa),
                    "enrollments": _student_enrollments(student.pk),
                }
            )
        return JsonResponse(records, safe=False)


class StudentTranscriptView(JsonView):
    def get(self, request, student_id):
        student = _get_student(student_id)
        gpa = GpaEngine().recalculate(student.pk)
        student.gpa = gpa
        return JsonResponse(
            {
                "student": student_payload(student),
                "gpa": _decimal(gpa),
                "enrollments": _student_enrollments(student.pk),
            }
        )


class StudentLoadView(JsonView):
    def get(self, request, student_id):
        student = _get_student(student_id)
        return JsonResponse({"studentId": student.pk, **LoadCalculator().summary(student.pk)})


class StudentAutoEnrollView(JsonView):
    def post(self, request, student_id):
        result = AutoEnrollmentPlanner().assign_defaults(student_id)
        gpa = GpaEngine().recalculate(student_id)
        student = Student.objects.get(pk=student_id)
        payload = auto_enrollment_payload(result)
        return JsonResponse(
            {
                "student": student_payload(student),
                "autoEnrollments": payload["created"],
                "skipped": payload["skipped"],
                "gpa": _decimal(gpa),
                "enrollments": _student_enrollments(student.pk),
            }
        )


class GpaRecalculationView(JsonView):
    def post(self, request):
        results = GpaEngine().recalculate_all()
        return JsonResponse(
            {
                "updated": len(results),
                "results": [{"studentId": student_id, "gpa": _decimal(gpa)} for student_id, gpa in results],
            }
        )


class CourseCollectionView(JsonView):
    def get(self, request):
        return JsonResponse([course_payload(course) for course in Course.objects.all()], safe=False)

    def post(self, request):
        form = CourseForm(course_form_data(read_json(request)))
        course = _save(form, "A course with this code already exists.")
        return JsonResponse(course_payload(course), status=201)


class CourseDetailView(JsonView):
    def get(self, request, course_id):
        return JsonResponse(course_payload(_get_course(course_id)))

    def put(self, request, course_id):
        payload = course_form_data(read_json(request))
        form = partial_update_form(CourseForm, _get_course(course_id), payload)
        course = _save(form, "A course with this code already exists.")
        return JsonResponse(course_payload(course))

    patch = put

    def delete(self, request, course_id):
        deleted, _ = Course.objects.filter(pk=course_id).delete()
        if not deleted:
            raise NotFound("Course not found.")
        return HttpResponse(status=204)


class ScheduleView(JsonView):
    def get(self, request):
        courses = Course.objects.annotate(
            enrolled=Count("enrollments", filter=Q(enrollments__status=Enrollment.ENROLLED))
        )
        return JsonResponse(
            [
                {
                    "courseId": course.pk,
                    "code": course.code,
                    "title": course.title,
                    "instructor": course.instructor,
                    "day": course.schedule_day,
                    "time": course.schedule_time,
                    "location": course.schedule_location,
                    "enrolled": course.enrolled,
                }
                for course in courses
            ],
            safe=False,
        )


class EnrollmentCollectionView(JsonView):
    def get(self, request):
        queryset = Enrollment.objects.select_related("student", "course")
        return JsonResponse([enrollment_payload(enrollment, detail=True) for enrollment in queryset], safe=False)

    def post(self, request):
        data = validated(EnrollmentCreateForm(read_json(request)))
        enrollment = AdmissionController().create_enrollment(data["student_id"], data["course_id"], data["status"])
        return JsonResponse(enrollment_payload(enrollment), status=201)


class EnrollmentDetailView(JsonView):
    def put(self, request, enrollment_id):
        data = validated(EnrollmentUpdateForm(read_json(request)))
        patch = EnrollmentPatch(status=data["status"] or None, grade=data["grade"], publish=data["publish"])
        enrollment = AdmissionController().update_enrollment(enrollment_id, patch)
        return JsonResponse(enrollment_payload(enrollment))

    patch = put

    def delete(self, request, enrollment_id):
        deleted, _ = Enrollment.objects.filter(pk=enrollment_id).delete()
        if not deleted:
            raise NotFound("Enrollment not found.")
        return HttpResponse(status=204)
