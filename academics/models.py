"""Django models for students, courses and enrollments."""
from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q


class Student(models.Model):
    STATUS_CHOICES = [
        ("active", "Active"),
        ("probation", "Probation"),
        ("suspended", "Suspended"),
        ("graduated", "Graduated"),
        ("withdrawn", "Withdrawn"),
    ]

    name = models.CharField("Name", max_length=255)
    email = models.EmailField("Email", unique=True)
    major = models.CharField("Major", max_length=255)
    year = models.PositiveSmallIntegerField("Year of study", validators=[MinValueValidator(1)])
    status = models.CharField("Status", max_length=20, choices=STATUS_CHOICES, default="active")
    advisor = models.CharField("Advisor", max_length=255, default="Not Assigned")
    # Written only by academics.services.GpaEngine.
    gpa = models.DecimalField("GPA", max_digits=3, decimal_places=2, null=True, blank=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Student"
        verbose_name_plural = "Students"
        ordering = ["name", "id"]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.name} <{self.email}>"


class Course(models.Model):
    COURSE_TYPE_CHOICES = [
        ("core", "Core"),
        ("major_required", "Major required"),
        ("elective", "Elective"),
        ("general_education", "General education"),
        ("lab", "Lab/practical"),
    ]

    code = models.CharField("Course code", max_length=20, unique=True)
    title = models.CharField("Title", max_length=255)
    instructor = models.CharField("Instructor", max_length=255)
    credits = models.PositiveSmallIntegerField("Credits", validators=[MinValueValidator(1)])
    capacity = models.PositiveIntegerField("Capacity", default=30)
    schedule_day = models.CharField("Day", max_length=50, default="TBD")
    schedule_time = models.CharField("Time", max_length=50, default="TBD")
    schedule_location = models.CharField("Location", max_length=255, default="TBD")
    course_type = models.CharField("Course type", max_length=50, choices=COURSE_TYPE_CHOICES, default="core")
    department = models.CharField("Department", max_length=255, blank=True)

    class Meta:
        verbose_name = "Course"
        verbose_name_plural = "Courses"
        ordering = ["code"]
        constraints = [
            models.CheckConstraint(condition=Q(credits__gt=0), name="course_credits_positive"),
        ]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.code} - {self.title}"

    def save(self, *args, **kwargs):
        self.code = self.code.strip().upper()
        super().save(*args, **kwargs)


class Enrollment(models.Model):
    ENROLLED = "enrolled"
    WAITLISTED = "waitlisted"
    DROPPED = "dropped"
    COMPLETED = "completed"

    STATUS_CHOICES = [
        (ENROLLED, "Enrolled"),
        (WAITLISTED, "Waitlisted"),
        (DROPPED, "Dropped"),
        (COMPLETED, "Completed"),
    ]

    student = models.ForeignKey(Student, on_delete=models.CASCADE, related_name="enrollments", verbose_name="Student")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="enrollments", verbose_name="Course")
    status = models.CharField("Status", max_length=20, choices=STATUS_CHOICES, default=ENROLLED)
    grade_letter = models.CharField("Grade", max_length=5, blank=True)
    grade_points = models.DecimalField("Grade points", max_digits=3, decimal_places=2, null=True, blank=True)
    grade_released = models.BooleanField("Grade published", default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Enrollment"
        verbose_name_plural = "Enrollments"
        unique_together = [("student", "course")]
        ordering = ["student_id", "course__code"]

    def __str__(self) -> str:  # pragma: no cover - human readable labels
        return f"{self.student_id} -> {self.course_id} ({self.status})"
