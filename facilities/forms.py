from django import forms

from .models import Facility, FacilityBooking


class FacilityForm(forms.ModelForm):
    class Meta:
        model = Facility
        fields = ("name", "facility_type", "building", "floor", "capacity", "equipment", "amenities", "status")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["status"].required = False

    def clean_status(self):
        return self.cleaned_data.get("status") or "available"


class BookingForm(forms.Form):
    facility_id = forms.IntegerField(min_value=1)
    booked_by = forms.CharField(max_length=150)
    purpose = forms.CharField(max_length=255)
    booking_date = forms.DateField()
    start_time = forms.TimeField()
    end_time = forms.TimeField()
    status = forms.ChoiceField(choices=FacilityBooking.STATUS_CHOICES, required=False)

    def clean_status(self):
        return self.cleaned_data.get("status") or FacilityBooking.PENDING

    def clean(self):
        cleaned = super().clean()
        start = cleaned.get("start_time")
        end = cleaned.get("end_time")
        if start and end and end <= start:
            raise forms.ValidationError("End time must be after start time.")
        return cleaned


class BookingFilterForm(forms.Form):
    facility_id = forms.IntegerField(min_value=1, required=False)
    date = forms.DateField(required=False)
