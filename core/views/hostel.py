from rest_framework import status
from rest_framework.response import Response

from ..api.serializers import HostelSerializer, HostelWriteSerializer
from ..permissions import IsOwner
from ..services.hostel import HostelCatalogService, HostelManagementService, HostelUpdate
from .base import ServiceAPIView

__all__ = ["HostelListCreateView", "HostelSearchView", "HostelDetailView"]


class HostelListCreateView(ServiceAPIView):
    service_class = HostelCatalogService
    method_permissions = {"POST": [IsOwner]}

    def get(self, request):
        hostels = self.get_service().list()
        return Response(HostelSerializer(hostels, many=True).data)

    def post(self, request):
        serializer = HostelWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        hostel = self.get_service(HostelManagementService).create(serializer.validated_data)
        return Response(
            {"message": "Hostel created successfully (pending verification)", "hostel": HostelSerializer(hostel).data},
            status=status.HTTP_201_CREATED,
        )


class HostelSearchView(ServiceAPIView):
    service_class = HostelCatalogService

    def get(self, request):
        service = self.get_service()
        filters = service.build_filters(request.query_params)
        return Response(HostelSerializer(service.search(filters), many=True).data)


class HostelDetailView(ServiceAPIView):
    service_class = HostelManagementService
    method_permissions = {"PUT": [IsOwner], "DELETE": [IsOwner]}

    def get(self, request, pk):
        hostel = self.get_service(HostelCatalogService).get(pk)
        return Response(HostelSerializer(hostel).data)

    def put(self, request, pk):
        serializer = HostelWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        hostel = self.get_service().update(pk, HostelUpdate.from_data(serializer.validated_data))
        return Response({"message": "Hostel updated successfully", "hostel": HostelSerializer(hostel).data})

    def delete(self, request, pk):
        self.get_service().delete(pk)
        return Response({"message": "Hostel deleted successfully"})
