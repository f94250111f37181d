"""Forms validating API payloads before they reach the services."""
from __future__ import annotations

from django import forms
from django.forms.models import model_to_dict

from campus.exceptions import RequestValidationError

from .models import Course, Enrollment, Student


class TriStateFlagField(forms.Field):
    """``True``/``"true"`` and ``False``/``"false"``; any other value is ``None``."""

    widget = forms.TextInput

    def to_python(self, value):
        if value is True or value == "true":
            return True
        if value is False or value == "false":
            return False
        return None


class StudentForm(forms.ModelForm):
    class Meta:
        model = Student
        fields = ("name", "email", "major", "year", "status", "advisor")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["status"].required = False
        self.fields["advisor"].required = False

    def clean_status(self):
        return self.cleaned_data.get("status") or "active"

    def clean_advisor(self):
        return self.cleaned_data.get("advisor") or "Not Assigned"


class CourseForm(forms.ModelForm):
    class Meta:
        model = Course
        fields = (
            "code",
            "title",
            "instructor",
            "credits",
            "capacity",
            "schedule_day",
            "schedule_time",
            "schedule_location",
            "course_type",
            "department",
        )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in ("capacity", "schedule_day", "schedule_time", "schedule_location", "course_type"):
            self.fields[name].required = False

    def clean_code(self):
        return self.cleaned_data["code"].strip().upper()

    def clean(self):
        cleaned = super().clean()
        defaults = {
            "capacity": 30,
            "schedule_day": "TBD",
            "schedule_time": "TBD",
            "schedule_location": "TBD",
            "course_type": "core",
        }
        for name, value in defaults.items():
            if cleaned.get(name) in (None, ""):
                cleaned[name] = value
        return cleaned


def course_form_data(payload: dict) -> dict:
    """Accept the emitted course shape (``courseType``, nested ``schedule``) as well as flat field names."""

    data = dict(payload)
    if "courseType" in data:
        data.setdefault("course_type", data.pop("courseType"))
    schedule = data.pop("schedule", None)
    if isinstance(schedule, dict):
        for key in ("day", "time", "location"):
            if key in schedule:
                data.setdefault(f"schedule_{key}", schedule[key])
    return data


def partial_update_form(form_class, instance, payload: dict):
    """Bind ``form_class`` to ``instance`` with only the supplied fields overridden."""

    fields = form_class._meta.fields
    supplied = {name: value for name, value in payload.items() if name in fields}
    if not supplied:
        raise RequestValidationError(message="No valid fields provided for update.")
    data = model_to_dict(instance, fields=fields)
    data.update(supplied)
    return form_class(data, instance=instance)


class EnrollmentCreateForm(forms.Form):
    student_id = forms.IntegerField(min_value=1)
    course_id = forms.IntegerField(min_value=1)
    status = forms.ChoiceField(choices=Enrollment.STATUS_CHOICES, required=False)

    def clean_status(self):
        return self.cleaned_data.get("status") or Enrollment.ENROLLED


class EnrollmentUpdateForm(forms.Form):
    status = forms.ChoiceField(choices=Enrollment.STATUS_CHOICES, required=False)
    grade = forms.CharField(max_length=5, required=False)
    publish = TriStateFlagField(required=False)

    def clean_grade(self):
        # Missing or null keeps the stored grade; a blank string clears it.
        if self.data.get("grade") is None:
            return None
        return self.cleaned_data["grade"]
