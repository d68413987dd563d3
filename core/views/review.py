from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ..api.serializers import ReviewCreateSerializer, ReviewSerializer, ReviewUpdateSerializer
from ..permissions import IsStudent
from ..services.review import ReviewQueryService, ReviewService
from .base import ServiceAPIView

__all__ = ["ReviewCreateView", "ReviewDetailView", "HostelReviewsView", "StudentReviewsView"]


class ReviewCreateView(ServiceAPIView):
    service_class = ReviewService
    method_permissions = {"POST": [IsStudent]}

    def post(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = self.get_service().create(serializer.validated_data)
        return Response(
            {"message": "Review created successfully", "review": ReviewSerializer(review).data},
            status=status.HTTP_201_CREATED,
        )


class ReviewDetailView(ServiceAPIView):
    service_class = ReviewService
    method_permissions = {"PUT": [IsStudent], "DELETE": [IsStudent]}

    def put(self, request, pk):
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = self.get_service().update(pk, serializer.validated_data)
        return Response({"message": "Review updated successfully", "review": ReviewSerializer(review).data})

    def delete(self, request, pk):
        self.get_service().delete(pk)
        return Response({"message": "Review deleted successfully"})


class HostelReviewsView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    service_class = ReviewQueryService

    def get(self, request, hostel_id):
        reviews = self.service_class().for_hostel(hostel_id)
        return Response(ReviewSerializer(reviews, many=True).data)


class StudentReviewsView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    service_class = ReviewQueryService

    def get(self, request, student_id):
        reviews = self.service_class().for_student(student_id)
        return Response(ReviewSerializer(reviews, many=True).data)
