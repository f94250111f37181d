from django.urls import path

from .views import (
    CourseCollectionView,
    CourseDetailView,
    EnrollmentCollectionView,
    EnrollmentDetailView,
    GpaRecalculationView,
    ScheduleView,
    StudentAutoEnrollView,
    StudentCollectionView,
    StudentDetailView,
    StudentLoadView,
    StudentRecordsView,
    StudentTranscriptView,
)

urlpatterns = [
    path("students/", StudentCollectionView.as_view(), name="student_collection"),
    path("students/records/", StudentRecordsView.as_view(), name="student_records"),
    path("students/recalculate-gpas/", GpaRecalculationView.as_view(), name="gpa_recalculation"),
    path("students/<int:student_id>/", StudentDetailView.as_view(), name="student_detail"),
    path("students/<int:student_id>/transcript/", StudentTranscriptView.as_view(), name="student_transcript"),
    path("students/<int:student_id>/load/", StudentLoadView.as_view(), name="student_load"),
    path(
        "students/<int:student_id>/auto-enroll-defaults/",
        StudentAutoEnrollView.as_view(),
        name="student_auto_enroll",
    ),
    path("courses/", CourseCollectionView.as_view(), name="course_collection"),
    path("courses/<int:course_id>/", CourseDetailView.as_view(), name="course_detail"),
    path("schedule/", ScheduleView.as_view(), name="schedule"),
    path("enrollments/", EnrollmentCollectionView.as_view(), name="enrollment_collection"),
    path("enrollments/<int:enrollment_id>/", EnrollmentDetailView.as_view(), name="enrollment_detail"),
]
