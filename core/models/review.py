from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .hostel import Hostel
from .user import User


class Review(models.Model):
    hostel = models.ForeignKey(Hostel, on_delete=models.CASCADE, related_name="reviews")
    student = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        limit_choices_to={"role": User.ROLE_STUDENT},
        related_name="reviews",
    )
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-id"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"Review for {self.hostel.name} by {self.student.name}"
