"""Student booking requests and owner decisions."""

from django.urls import path

from ..views import booking

urlpatterns = [
    path("bookings", booking.BookingCreateView.as_view(), name="booking_create"),
    path("bookings/student", booking.StudentBookingsView.as_view(), name="student_bookings"),
    path("bookings/hostel/<int:hostel_id>", booking.HostelBookingsView.as_view(), name="hostel_bookings"),
    path("bookings/<int:pk>", booking.BookingDetailView.as_view(), name="booking_detail"),
]
