"""Review endpoints; listings are public."""

from django.urls import path

from ..views import review

urlpatterns = [
    path("reviews", review.ReviewCreateView.as_view(), name="review_create"),
    path("reviews/<int:pk>", review.ReviewDetailView.as_view(), name="review_detail"),
    path("reviews/hostel/<int:hostel_id>", review.HostelReviewsView.as_view(), name="hostel_reviews"),
    path("reviews/student/<int:student_id>", review.StudentReviewsView.as_view(), name="student_reviews"),
]
