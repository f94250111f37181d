"""URL configuration for the campus operations platform."""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/facilities/", include("facilities.urls")),
    path("api/", include("academics.urls")),
]
