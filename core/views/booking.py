from rest_framework import status
from rest_framework.response import Response

from ..api.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingStatusSerializer,
    HostelBookingSerializer,
    StudentBookingSerializer,
)
from ..permissions import IsOwner, IsStudent
from ..services.booking import (
    BookingRequestService,
    BookingStatusService,
    HostelBookingsService,
    StudentBookingsService,
)
from .base import ServiceAPIView

__all__ = [
    "BookingCreateView",
    "StudentBookingsView",
    "HostelBookingsView",
    "BookingDetailView",
]


class BookingCreateView(ServiceAPIView):
    service_class = BookingRequestService
    method_permissions = {"POST": [IsStudent]}

    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.get_service().create_booking(serializer.validated_data["hostel_id"])
        return Response(
            {"message": "Booking created successfully (pending confirmation)", "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )


class StudentBookingsView(ServiceAPIView):
    service_class = StudentBookingsService
    method_permissions = {"GET": [IsStudent]}

    def get(self, request):
        return Response(StudentBookingSerializer(self.get_service().bookings(), many=True).data)


class HostelBookingsView(ServiceAPIView):
    service_class = HostelBookingsService
    method_permissions = {"GET": [IsOwner]}

    def get(self, request, hostel_id):
        return Response(HostelBookingSerializer(self.get_service().bookings(hostel_id), many=True).data)


class BookingDetailView(ServiceAPIView):
    """Status changes are open to students and owners; the service decides the rest."""

    service_class = BookingStatusService
    method_permissions = {"DELETE": [IsStudent]}

    def put(self, request, pk):
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.get_service().update_status(pk, serializer.validated_data["status"])
        return Response({"message": "Booking updated successfully", "booking": BookingSerializer(booking).data})

    def delete(self, request, pk):
        self.get_service().delete(pk)
        return Response({"message": "Booking deleted successfully"})
