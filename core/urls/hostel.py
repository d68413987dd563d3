"""Hostel catalogue and owner listing management."""

from django.urls import path

from ..views import hostel

urlpatterns = [
    path("hostels", hostel.HostelListCreateView.as_view(), name="hostel_list"),
    # Must precede the detail route.
    path("hostels/search", hostel.HostelSearchView.as_view(), name="hostel_search"),
    path("hostels/<int:pk>", hostel.HostelDetailView.as_view(), name="hostel_detail"),
]
