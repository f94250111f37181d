from django.core.management.base import BaseCommand

from academics.services import GpaEngine


class Command(BaseCommand):
    help = "Recalculate every student's GPA from published grades"

    def handle(self, *args, **options):
        results = GpaEngine().recalculate_all()
        for student_id, gpa in results:
            self.stdout.write(f"{student_id}: {gpa if gpa is not None else 'N/A'}")
        self.stdout.write(self.style.SUCCESS(f"Updated {len(results)} student(s)."))
