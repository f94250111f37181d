# Generated manually for initial Django models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Facility",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                ("facility_type", models.CharField(max_length=100, verbose_name="Type")),
                ("building", models.CharField(max_length=255, verbose_name="Building")),
                ("floor", models.CharField(blank=True, max_length=50, verbose_name="Floor")),
                ("capacity", models.PositiveIntegerField(verbose_name="Capacity")),
                ("equipment", models.TextField(blank=True, verbose_name="Equipment")),
                ("amenities", models.TextField(blank=True, verbose_name="Amenities")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("available", "Available"),
                            ("maintenance", "Under maintenance"),
                            ("unavailable", "Unavailable"),
                        ],
                        default="available",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Facility",
                "verbose_name_plural": "Facilities",
                "ordering": ["building", "name"],
            },
        ),
        migrations.CreateModel(
            name="FacilityBooking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("booked_by", models.CharField(max_length=150, verbose_name="Requested by")),
                ("purpose", models.CharField(max_length=255, verbose_name="Purpose")),
                ("booking_date", models.DateField(verbose_name="Date")),
                ("start_time", models.TimeField(verbose_name="Start time")),
                ("end_time", models.TimeField(verbose_name="End time")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "facility",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bookings",
                        to="facilities.facility",
                    ),
                ),
            ],
            options={
                "verbose_name": "Facility booking",
                "verbose_name_plural": "Facility bookings",
                "ordering": ["booking_date", "start_time"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("end_time__gt", models.F("start_time"))),
                        name="facilitybooking_end_after_start",
                    ),
                ],
            },
        ),
    ]
