"""Facility reservation conflict detection."""
from __future__ import annotations

import logging

from campus.exceptions import Conflict, NotFound

from .models import FacilityBooking
from .stores import BookingStore

logger = logging.getLogger(__name__)


def overlaps_existing(existing_start, existing_end, start, end) -> bool:
    """Whether an existing ``[existing_start, existing_end)`` blocks ``[start, end)``.

    Not the symmetric interval-overlap test: a request ending exactly when
    the existing booking ends counts as a conflict, one starting exactly
    when it ends does not, and an existing booking strictly inside the
    requested range is not caught at all.
    """

    return (existing_start <= start and existing_end > start) or (existing_start < end and existing_end >= end)


class BookingConflictDetector:
    def __init__(self, store=None):
        self.store = store or BookingStore()

    def conflicts(self, facility_id, booking_date, start, end) -> list:
        return [
            booking
            for booking in self.store.active_bookings(facility_id, booking_date)
            if overlaps_existing(booking.start_time, booking.end_time, start, end)
        ]

    def has_conflict(self, facility_id, booking_date, start, end) -> bool:
        return bool(self.conflicts(facility_id, booking_date, start, end))


class BookingService:
    def __init__(self, store=None, detector: BookingConflictDetector | None = None):
        self.store = store or BookingStore()
        self.detector = detector or BookingConflictDetector(self.store)

    def create_booking(
        self,
        facility_id,
        booked_by,
        purpose,
        booking_date,
        start,
        end,
        status: str = FacilityBooking.PENDING,
    ) -> FacilityBooking:
        with self.store.atomic():
            facility = self.store.get_facility(facility_id, lock=True)
            if facility is None:
                raise NotFound("Facility not found.")

            clashes = self.detector.conflicts(facility.pk, booking_date, start, end)
            if clashes:
                logger.info(
                    "Booking for facility %s on %s %s-%s rejected; clashes with %s",
                    facility.pk,
                    booking_date,
                    start,
                    end,
                    ", ".join(str(booking.pk) for booking in clashes),
                )
                raise Conflict("Time slot is already booked.")

            booking = self.store.create_booking(
                facility_id=facility.pk,
                booked_by=booked_by,
                purpose=purpose,
                booking_date=booking_date,
                start_time=start,
                end_time=end,
                status=status,
            )

        logger.info("Booked facility %s on %s %s-%s for %s", facility.pk, booking_date, start, end, booked_by)
        return booking

    def change_status(self, booking_id, status: str) -> FacilityBooking:
        """Move a booking to ``status``; reactivating a cancelled one is conflict-checked."""

        with self.store.atomic():
            booking = self.store.get_booking(booking_id)
            if booking is None:
                raise NotFound("Booking not found.")
            self.store.get_facility(booking.facility_id, lock=True)
            booking = self.store.get_booking(booking_id)

            if booking.status == FacilityBooking.CANCELLED and status != FacilityBooking.CANCELLED:
                clashes = [
                    other
                    for other in self.detector.conflicts(
                        booking.facility_id, booking.booking_date, booking.start_time, booking.end_time
                    )
                    if other.pk != booking.pk
                ]
                if clashes:
                    logger.info(
                        "Reactivating booking %s rejected; clashes with %s",
                        booking.pk,
                        ", ".join(str(other.pk) for other in clashes),
                    )
                    raise Conflict("Time slot is already booked.")

            booking.status = status
            self.store.save_booking(booking, ["status"])

        logger.info("Booking %s is now %s", booking.pk, status)
        return booking
