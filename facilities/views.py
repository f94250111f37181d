from django.http import JsonResponse

from campus.http import JsonView, read_json, validated

from .forms import BookingFilterForm, BookingForm, FacilityForm
from .models import Facility, FacilityBooking
from .services import BookingService


def facility_payload(facility: Facility) -> dict:
    return {
        "id": facility.pk,
        "name": facility.name,
        "facilityType": facility.facility_type,
        "building": facility.building,
        "floor": facility.floor or None,
        "capacity": facility.capacity,
        "equipment": facility.equipment or None,
        "amenities": facility.amenities or None,
        "status": facility.status,
    }


def booking_payload(booking: FacilityBooking) -> dict:
    return {
        "id": booking.pk,
        "facilityId": booking.facility_id,
        "bookedBy": booking.booked_by,
        "purpose": booking.purpose,
        "bookingDate": booking.booking_date.isoformat(),
        "startTime": booking.start_time.strftime("%H:%M"),
        "endTime": booking.end_time.strftime("%H:%M"),
        "status": booking.status,
    }


class FacilityCollectionView(JsonView):
    def get(self, request):
        return JsonResponse([facility_payload(facility) for facility in Facility.objects.all()], safe=False)

    def post(self, request):
        form = FacilityForm(read_json(request))
        validated(form)
        return JsonResponse(facility_payload(form.save()), status=201)


class BookingCollectionView(JsonView):
    def get(self, request):
        filters = validated(BookingFilterForm(request.GET))
        queryset = FacilityBooking.objects.all()
        if filters["facility_id"]:
            queryset = queryset.filter(facility_id=filters["facility_id"])
        if filters["date"]:
            queryset = queryset.filter(booking_date=filters["date"])
        return JsonResponse([booking_payload(booking) for booking in queryset], safe=False)

    def post(self, request):
        data = validated(BookingForm(read_json(request)))
        booking = BookingService().create_booking(
            data["facility_id"],
            data["booked_by"],
            data["purpose"],
            data["booking_date"],
            data["start_time"],
            data["end_time"],
            status=data["status"],
        )
        return JsonResponse(booking_payload(booking), status=201)
