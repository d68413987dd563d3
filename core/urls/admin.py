"""Admin moderation endpoints."""

from django.urls import path

from ..views import admin

urlpatterns = [
    path("admin/hostels", admin.AdminHostelListView.as_view(), name="admin_hostel_list"),
    path("admin/hostels/<int:pk>", admin.AdminHostelDetailView.as_view(), name="admin_hostel_reject"),
    path("admin/verify-hostel/<int:pk>", admin.VerifyHostelView.as_view(), name="admin_verify_hostel"),
    path("admin/unverify-hostel/<int:pk>", admin.UnverifyHostelView.as_view(), name="admin_unverify_hostel"),
]
