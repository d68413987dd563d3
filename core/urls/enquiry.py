"""Enquiry and visit-request endpoints."""

from django.urls import path

from ..views import enquiry

urlpatterns = [
    path("enquiries", enquiry.EnquiryCreateView.as_view(), name="enquiry_create"),
    path("enquiries/hostel/<int:hostel_id>", enquiry.HostelEnquiriesView.as_view(), name="hostel_enquiries"),
    path("enquiries/owner", enquiry.OwnerEnquiriesView.as_view(), name="owner_enquiries"),
    path("enquiries/student", enquiry.StudentEnquiriesView.as_view(), name="student_enquiries"),
    path("enquiries/<int:pk>/reply", enquiry.EnquiryReplyView.as_view(), name="enquiry_reply"),
]
