from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

ENDPOINTS = {
    "auth": "/auth/signup, /auth/login",
    "hostels": "/hostels, /hostels/search, /hostels/:id",
    "admin": "/admin/hostels, /admin/verify-hostel/:id, /admin/unverify-hostel/:id",
    "reviews": "/reviews, /reviews/:id, /reviews/hostel/:hostelId, /reviews/student/:studentId",
    "enquiries": "/enquiries, /enquiries/hostel/:hostelId, /enquiries/owner, /enquiries/student, /enquiries/:id/reply",
    "bookings": "/bookings, /bookings/student, /bookings/hostel/:hostelId",
}


class ApiRootView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({"message": "HostelGo Backend API", "status": "Running", "endpoints": ENDPOINTS})


@csrf_exempt
def route_not_found(request, exception=None):
    return JsonResponse({"error": "Route not found"}, status=404)
