"""Keep cached GPAs consistent when enrollments are deleted."""
from __future__ import annotations

from django.db.models.signals import post_delete
from django.dispatch import receiver

from academics.models import Enrollment, Student
from academics.services import GpaEngine


def _deleting_student(origin) -> bool:
    # origin is the instance or queryset that started the delete.
    return isinstance(origin, Student) or getattr(origin, "model", None) is Student


@receiver(post_delete, sender=Enrollment)
def recalculate_gpa_after_delete(sender, instance: Enrollment, origin=None, **kwargs):
    # Enrollment signals fire before the student row goes; skip students being deleted.
    if _deleting_student(origin):
        return
    GpaEngine().recalculate(instance.student_id)
