from rest_framework import status

from ..models import Review
from .helpers import HostelGoTestCase


class ReviewCreateTests(HostelGoTestCase):
    def test_student_reviews_verified_hostel(self):
        response = self.client.post(
            "/reviews",
            {"hostel_id": self.verified_hostel.id, "rating": 4, "comment": "Clean rooms"},
            **self.creds(self.student),
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Review created successfully")
        self.assertEqual(response.data["review"]["rating"], 4)
        self.assertEqual(response.data["review"]["student_id"], self.student.id)

    def test_comment_is_optional(self):
        response = self.client.post(
            "/reviews",
            {"hostel_id": self.verified_hostel.id, "rating": 5},
            **self.creds(self.student),
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Review.objects.get().comment, "")

    def test_rating_bounds(self):
        for rating in (0, 6, "great"):
            response = self.client.post(
                "/reviews",
                {"hostel_id": self.verified_hostel.id, "rating": rating},
                **self.creds(self.student),
            )
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data["error"], "Rating must be between 1 and 5")
        self.assertFalse(Review.objects.exists())

    def test_required_fields(self):
        response = self.client.post("/reviews", {"comment": "hi"}, **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "hostel_id and rating are required")

    def test_unverified_hostel(self):
        response = self.client.post(
            "/reviews",
            {"hostel_id": self.pending_hostel.id, "rating": 3},
            **self.creds(self.student),
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "You can only review verified hostels")

    def test_missing_hostel(self):
        response = self.client.post("/reviews", {"hostel_id": 9999, "rating": 3}, **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_is_gated(self):
        response = self.client.post(
            "/reviews",
            {"hostel_id": self.verified_hostel.id, "rating": 3},
            **self.creds(self.admin),
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "Access denied. Required role: student")

    def test_multiple_reviews_allowed(self):
        for rating in (2, 5):
            self.client.post(
                "/reviews",
                {"hostel_id": self.verified_hostel.id, "rating": rating},
                **self.creds(self.student),
            )
        self.assertEqual(Review.objects.filter(student=self.student).count(), 2)


class ReviewListTests(HostelGoTestCase):
    def setUp(self):
        super().setUp()
        self.first = Review.objects.create(hostel=self.verified_hostel, student=self.student, rating=4, comment="Good")
        self.second = Review.objects.create(hostel=self.verified_hostel, student=self.other_student, rating=2)

    def test_hostel_reviews_are_public(self):
        response = self.client.get(f"/reviews/hostel/{self.verified_hostel.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["id"] for row in response.data], [self.second.id, self.first.id])
        self.assertEqual(response.data[1]["student_name"], "Ahad")

    def test_student_reviews_are_public(self):
        response = self.client.get(f"/reviews/student/{self.student.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["hostel_name"], "Gulberg Boys Hostel")

    def test_unknown_hostel_has_no_reviews(self):
        response = self.client.get("/reviews/hostel/9999")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])

    def test_bad_credentials_do_not_block_public_listing(self):
        response = self.client.get(
            f"/reviews/hostel/{self.verified_hostel.id}",
            **self.creds(self.student, password="wrong"),
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)


class ReviewEditTests(HostelGoTestCase):
    def setUp(self):
        super().setUp()
        self.review = Review.objects.create(hostel=self.verified_hostel, student=self.student, rating=3, comment="Ok")

    def test_update_own_review(self):
        response = self.client.put(f"/reviews/{self.review.id}", {"rating": 5}, **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Review updated successfully")
        self.review.refresh_from_db()
        self.assertEqual(self.review.rating, 5)
        self.assertEqual(self.review.comment, "Ok")

    def test_update_needs_a_field(self):
        response = self.client.put(f"/reviews/{self.review.id}", {}, **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "At least one field (rating or comment) is required")

    def test_cannot_update_others_review(self):
        response = self.client.put(f"/reviews/{self.review.id}", {"rating": 1}, **self.creds(self.other_student))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "You can only update your own reviews")

    def test_delete_own_review(self):
        response = self.client.delete(f"/reviews/{self.review.id}", **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Review.objects.exists())

    def test_cannot_delete_others_review(self):
        response = self.client.delete(f"/reviews/{self.review.id}", **self.creds(self.other_student))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Review.objects.exists())

    def test_missing_review(self):
        response = self.client.delete("/reviews/9999", **self.creds(self.student))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Review not found")
