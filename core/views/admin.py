from rest_framework.response import Response

from ..api.serializers import AdminHostelSerializer
from ..permissions import IsAdmin
from ..services.hostel import HostelModerationService
from .base import ServiceAPIView

__all__ = ["AdminHostelListView", "AdminHostelDetailView", "VerifyHostelView", "UnverifyHostelView"]


class AdminHostelListView(ServiceAPIView):
    service_class = HostelModerationService
    method_permissions = {"GET": [IsAdmin]}

    def get(self, request):
        return Response(AdminHostelSerializer(self.get_service().all_hostels(), many=True).data)


class AdminHostelDetailView(ServiceAPIView):
    service_class = HostelModerationService
    method_permissions = {"DELETE": [IsAdmin]}

    def delete(self, request, pk):
        self.get_service().reject(pk)
        return Response({"message": "Hostel rejected and removed successfully", "deleted": True})


class VerifyHostelView(ServiceAPIView):
    service_class = HostelModerationService
    method_permissions = {"PUT": [IsAdmin]}

    def put(self, request, pk):
        hostel = self.get_service().verify(pk)
        return Response({"message": "Hostel verified successfully", "hostel": AdminHostelSerializer(hostel).data})


class UnverifyHostelView(ServiceAPIView):
    service_class = HostelModerationService
    method_permissions = {"PUT": [IsAdmin]}

    def put(self, request, pk):
        hostel = self.get_service().unverify(pk)
        return Response({"message": "Hostel unverified successfully", "hostel": AdminHostelSerializer(hostel).data})
