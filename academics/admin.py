"""Admin configuration for students, courses and enrollments."""
from django.contrib import admin, messages

from .models import Course, Enrollment, Student
from .services import AdmissionController, AutoEnrollmentPlanner, EnrollmentPatch, GpaEngine


class EnrollmentInline(admin.TabularInline):
    model = Enrollment
    extra = 0
    fields = ("course", "status", "grade_letter", "grade_points", "grade_released")
    readonly_fields = fields
    can_delete = False
    verbose_name = "Enrollment"
    verbose_name_plural = "Enrollments"

    def has_add_permission(self, request, obj=None):
        # New enrollments go through admission control.
        return False


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "major", "year", "status", "gpa", "advisor")
    list_filter = ("status", "year", "major")
    search_fields = ("name", "email", "major", "advisor")
    readonly_fields = ("gpa",)
    inlines = [EnrollmentInline]
    actions = ["recalculate_gpa", "assign_default_courses"]

    @admin.action(description="Recalculate GPA from published grades")
    def recalculate_gpa(self, request, queryset):
        engine = GpaEngine()
        for student in queryset:
            engine.recalculate(student.pk)
        self.message_user(request, f"Recalculated GPA for {queryset.count()} student(s).", level=messages.SUCCESS)

    @admin.action(description="Assign default courses (within load limits)")
    def assign_default_courses(self, request, queryset):
        planner = AutoEnrollmentPlanner()
        total_added = 0
        total_skipped = 0
        for student in queryset:
            result = planner.assign_defaults(student.pk)
            total_added += len(result.created)
            total_skipped += len(result.skipped)

        if total_added:
            self.message_user(
                request,
                f"Created {total_added} enrollment(s); skipped {total_skipped} course(s).",
                level=messages.SUCCESS,
            )
        else:
            self.message_user(
                request,
                "No enrollments created (already enrolled, load limits reached or no default courses).",
                level=messages.INFO,
            )


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("code", "title", "instructor", "credits", "capacity", "course_type", "department")
    list_filter = ("course_type", "department")
    search_fields = ("code", "title", "instructor")


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ("student", "course", "status", "grade_letter", "grade_points", "grade_released")
    list_filter = ("status", "grade_released", "course")
    search_fields = ("student__name", "student__email", "course__code")
    readonly_fields = ("student", "course", "grade_points")

    def has_add_permission(self, request):
        return False

    def save_model(self, request, obj, form, change):
        patch = EnrollmentPatch(status=obj.status, grade=obj.grade_letter, publish=obj.grade_released)
        AdmissionController().update_enrollment(obj.pk, patch)
