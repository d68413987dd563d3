from rest_framework import status
from rest_framework.response import Response

from ..api.serializers import EnquiryCreateSerializer, EnquiryReplySerializer, EnquirySerializer
from ..models import Enquiry
from ..permissions import IsOwner, IsStudent
from ..services.enquiry import EnquiryService
from .base import ServiceAPIView

__all__ = [
    "EnquiryCreateView",
    "HostelEnquiriesView",
    "OwnerEnquiriesView",
    "StudentEnquiriesView",
    "EnquiryReplyView",
]


class EnquiryCreateView(ServiceAPIView):
    service_class = EnquiryService
    method_permissions = {"POST": [IsStudent]}

    def post(self, request):
        serializer = EnquiryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        enquiry = self.get_service().create(serializer.validated_data)
        if enquiry.type == Enquiry.TYPE_SCHEDULE_VISIT:
            message = "Visit scheduled successfully"
        else:
            message = "Enquiry sent successfully"
        return Response(
            {"message": message, "enquiry": EnquirySerializer(enquiry).data},
            status=status.HTTP_201_CREATED,
        )


class HostelEnquiriesView(ServiceAPIView):
    service_class = EnquiryService
    method_permissions = {"GET": [IsOwner]}

    def get(self, request, hostel_id):
        return Response(EnquirySerializer(self.get_service().for_hostel(hostel_id), many=True).data)


class OwnerEnquiriesView(ServiceAPIView):
    service_class = EnquiryService
    method_permissions = {"GET": [IsOwner]}

    def get(self, request):
        return Response(EnquirySerializer(self.get_service().for_owner(), many=True).data)


class StudentEnquiriesView(ServiceAPIView):
    service_class = EnquiryService
    method_permissions = {"GET": [IsStudent]}

    def get(self, request):
        return Response(EnquirySerializer(self.get_service().for_student(), many=True).data)


class EnquiryReplyView(ServiceAPIView):
    service_class = EnquiryService
    method_permissions = {"PUT": [IsOwner]}

    def put(self, request, pk):
        serializer = EnquiryReplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        enquiry = self.get_service().reply(pk, serializer.validated_data["reply"])
        return Response({"message": "Reply sent successfully", "enquiry": EnquirySerializer(enquiry).data})
