# Generated manually for initial Django models
import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Student",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="Email")),
                ("major", models.CharField(max_length=255, verbose_name="Major")),
                (
                    "year",
                    models.PositiveSmallIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="Year of study",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("active", "Active"),
                            ("probation", "Probation"),
                            ("suspended", "Suspended"),
                            ("graduated", "Graduated"),
                            ("withdrawn", "Withdrawn"),
                        ],
                        default="active",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("advisor", models.CharField(default="Not Assigned", max_length=255, verbose_name="Advisor")),
                (
                    "gpa",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        editable=False,
                        max_digits=3,
                        null=True,
                        verbose_name="GPA",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Student",
                "verbose_name_plural": "Students",
                "ordering": ["name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=20, unique=True, verbose_name="Course code")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("instructor", models.CharField(max_length=255, verbose_name="Instructor")),
                (
                    "credits",
                    models.PositiveSmallIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)],
                        verbose_name="Credits",
                    ),
                ),
                ("capacity", models.PositiveIntegerField(default=30, verbose_name="Capacity")),
                ("schedule_day", models.CharField(default="TBD", max_length=50, verbose_name="Day")),
                ("schedule_time", models.CharField(default="TBD", max_length=50, verbose_name="Time")),
                ("schedule_location", models.CharField(default="TBD", max_length=255, verbose_name="Location")),
                (
                    "course_type",
                    models.CharField(
                        choices=[
                            ("core", "Core"),
                            ("major_required", "Major required"),
                            ("elective", "Elective"),
                            ("general_education", "General education"),
                            ("lab", "Lab/practical"),
                        ],
                        default="core",
                        max_length=50,
                        verbose_name="Course type",
                    ),
                ),
                ("department", models.CharField(blank=True, max_length=255, verbose_name="Department")),
            ],
            options={
                "verbose_name": "Course",
                "verbose_name_plural": "Courses",
                "ordering": ["code"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("credits__gt", 0)), name="course_credits_positive"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("enrolled", "Enrolled"),
                            ("waitlisted", "Waitlisted"),
                            ("dropped", "Dropped"),
                            ("completed", "Completed"),
                        ],
                        default="enrolled",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("grade_letter", models.CharField(blank=True, max_length=5, verbose_name="Grade")),
                (
                    "grade_points",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=3,
                        null=True,
                        verbose_name="Grade points",
                    ),
                ),
                ("grade_released", models.BooleanField(default=False, verbose_name="Grade published")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="academics.course",
                        verbose_name="Course",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="enrollments",
                        to="academics.student",
                        verbose_name="Student",
                    ),
                ),
            ],
            options={
                "verbose_name": "Enrollment",
                "verbose_name_plural": "Enrollments",
                "ordering": ["student_id", "course__code"],
                "unique_together": {("student", "course")},
            },
        ),
    ]
