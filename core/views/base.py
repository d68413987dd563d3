from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from ..authentication import Identity


class ServiceAPIView(APIView):
    """
    Thin API view that hands the caller's identity to a service.

    ``method_permissions`` adds role gates per HTTP method on top of
    ``permission_classes``, so one view can serve a public read and an
    owner-only write on the same path.
    """

    permission_classes = [IsAuthenticated]
    method_permissions: dict = {}
    service_class = None

    def get_permissions(self):
        permissions = list(self.permission_classes)
        permissions.extend(self.method_permissions.get(self.request.method, ()))
        return [permission() for permission in permissions]

    def get_identity(self) -> Identity:
        return self.request.auth

    def get_service(self, service_class=None):
        service_class = service_class or self.service_class
        return service_class(self.get_identity())
