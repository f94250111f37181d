"""ORM access used by the booking services."""
from __future__ import annotations

from django.db import transaction

from .models import Facility, FacilityBooking


class BookingStore:
    def atomic(self):
        return transaction.atomic()

    def get_facility(self, facility_id, *, lock: bool = False):
        queryset = Facility.objects.all()
        if lock:
            # The facility row guards every booking made against it.
            queryset = queryset.select_for_update()
        return queryset.filter(pk=facility_id).first()

    def active_bookings(self, facility_id, booking_date) -> list:
        return list(
            FacilityBooking.objects.filter(facility_id=facility_id, booking_date=booking_date)
            .exclude(status=FacilityBooking.CANCELLED)
            .order_by("start_time")
        )

    def create_booking(self, **fields):
        return FacilityBooking.objects.create(**fields)

    def get_booking(self, booking_id):
        return FacilityBooking.objects.filter(pk=booking_id).first()

    def save_booking(self, booking, fields) -> None:
        booking.save(update_fields=list(fields))
