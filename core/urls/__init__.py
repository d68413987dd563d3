"""Aggregate URL patterns for the core application."""

from . import admin, auth, booking, enquiry, hostel, public, review

urlpatterns = [
    *public.urlpatterns,
    *auth.urlpatterns,
    *hostel.urlpatterns,
    *admin.urlpatterns,
    *booking.urlpatterns,
    *review.urlpatterns,
    *enquiry.urlpatterns,
    *public.fallback_urlpatterns,
]
