"""
apps.villas.urls
~~~~~~~~~~~~~~~~
URL routing for the Villa API.
Mounted at /api/ by the root URLconf.
"""
from django.urls import path

from .views import VillaDetailView, VillaListCreateView

urlpatterns = [
    # GET, POST /api/villaAPI
    path("villaAPI", VillaListCreateView.as_view(), name="villa-list"),
    # GET, PUT, PATCH, DELETE /api/villaAPI/<id>
    path("villaAPI/<int:pk>", VillaDetailView.as_view(), name="villa-detail"),
]
