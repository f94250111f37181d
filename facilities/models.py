from django.db import models
from django.db.models import F, Q


class Facility(models.Model):
    STATUS_CHOICES = [
        ("available", "Available"),
        ("maintenance", "Under maintenance"),
        ("unavailable", "Unavailable"),
    ]

    name = models.CharField("Name", max_length=255)
    facility_type = models.CharField("Type", max_length=100)
    building = models.CharField("Building", max_length=255)
    floor = models.CharField("Floor", max_length=50, blank=True)
    capacity = models.PositiveIntegerField("Capacity")
    equipment = models.TextField("Equipment", blank=True)
    amenities = models.TextField("Amenities", blank=True)
    status = models.CharField("Status", max_length=20, choices=STATUS_CHOICES, default="available")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Facility"
        verbose_name_plural = "Facilities"
        ordering = ["building", "name"]

    def __str__(self):
        return f"{self.building} - {self.name}"


class FacilityBooking(models.Model):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (CONFIRMED, "Confirmed"),
        (CANCELLED, "Cancelled"),
    ]

    facility = models.ForeignKey(Facility, on_delete=models.CASCADE, related_name="bookings")
    booked_by = models.CharField("Requested by", max_length=150)
    purpose = models.CharField("Purpose", max_length=255)
    booking_date = models.DateField("Date")
    start_time = models.TimeField("Start time")
    end_time = models.TimeField("End time")
    status = models.CharField("Status", max_length=20, choices=STATUS_CHOICES, default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Facility booking"
        verbose_name_plural = "Facility bookings"
        ordering = ["booking_date", "start_time"]
        constraints = [
            models.CheckConstraint(
                condition=Q(end_time__gt=F("start_time")),
                name="facilitybooking_end_after_start",
            ),
        ]

    def __str__(self):
        return f"{self.facility} {self.booking_date} {self.start_time}-{self.end_time} ({self.status})"
