from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from django.db.models import QuerySet

from .. import policies
from ..models import Hostel, Review
from .common import fetch_or_404

if TYPE_CHECKING:  # pragma: no cover - used for static analysis only
    from ..authentication import Identity

logger = logging.getLogger(__name__)


class ReviewQueryService:
    """Public review listings."""

    def _queryset(self) -> QuerySet[Review]:
        return Review.objects.select_related("student", "hostel").order_by("-id")

    def for_hostel(self, hostel_id: int) -> QuerySet[Review]:
        return self._queryset().filter(hostel_id=hostel_id)

    def for_student(self, student_id: int) -> QuerySet[Review]:
        return self._queryset().filter(student_id=student_id)


class ReviewService:
    """Handle review creation and edits for students."""

    def __init__(self, identity: "Identity"):
        self.identity = identity

    def create(self, data: Mapping[str, Any]) -> Review:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=data["hostel_id"])
        policies.enforce(policies.can_review_hostel(self.identity, hostel))
        review = Review.objects.create(
            hostel=hostel,
            student_id=self.identity.id,
            rating=data["rating"],
            comment=data.get("comment") or "",
        )
        logger.info("Student %s reviewed hostel %s (%s/5)", self.identity.id, hostel.pk, review.rating)
        return review

    def update(self, review_id: int, data: Mapping[str, Any]) -> Review:
        review = fetch_or_404(Review.objects.select_related("student", "hostel"), "Review not found", pk=review_id)
        policies.enforce(policies.can_modify_review(self.identity, review, "update"))

        update_fields = []
        if "rating" in data:
            review.rating = data["rating"]
            update_fields.append("rating")
        if "comment" in data:
            review.comment = data["comment"]
            update_fields.append("comment")
        review.save(update_fields=update_fields)
        logger.info("Student %s updated review %s", self.identity.id, review.pk)
        return review

    def delete(self, review_id: int) -> None:
        review = fetch_or_404(Review.objects.all(), "Review not found", pk=review_id)
        policies.enforce(policies.can_modify_review(self.identity, review, "delete"))
        review.delete()
        logger.info("Student %s deleted review %s", self.identity.id, review_id)
