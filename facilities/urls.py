from django.urls import path

from .views import BookingCollectionView, FacilityCollectionView

urlpatterns = [
    path("", FacilityCollectionView.as_view(), name="facility_collection"),
    path("bookings/", BookingCollectionView.as_view(), name="booking_collection"),
]
