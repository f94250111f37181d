from django.contrib import admin, messages

from campus.exceptions import CampusError

from . import models
from .services import BookingService


class FacilityBookingInline(admin.TabularInline):
    model = models.FacilityBooking
    extra = 0
    fields = ("booking_date", "start_time", "end_time", "booked_by", "purpose", "status")
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        # Bookings are created through the conflict-checked booking service.
        return False


@admin.register(models.Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ("name", "facility_type", "building", "floor", "capacity", "status")
    list_filter = ("facility_type", "building", "status")
    search_fields = ("name", "building")
    inlines = [FacilityBookingInline]


@admin.register(models.FacilityBooking)
class FacilityBookingAdmin(admin.ModelAdmin):
    list_display = ("facility", "booking_date", "start_time", "end_time", "booked_by", "status")
    list_filter = ("status", "booking_date", "facility__building")
    search_fields = ("facility__name", "booked_by", "purpose")
    readonly_fields = ("facility", "booking_date", "start_time", "end_time", "booked_by", "purpose")

    def has_add_permission(self, request):
        return False

    def save_model(self, request, obj, form, change):
        if "status" not in form.changed_data:
            return
        try:
            BookingService().change_status(obj.pk, obj.status)
        except CampusError as exc:
            self.message_user(request, f"Status not changed: {exc.message}", level=messages.ERROR)
