from django.db import models
from django.db.models import Q

from .hostel import Hostel
from .user import User


class Booking(models.Model):
    STATUS_PENDING = "pending"
    STATUS_CONFIRMED = "confirmed"
    STATUS_CANCELLED = "cancelled"
    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending Owner Approval"),
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_CANCELLED, "Cancelled"),
    )
    OPEN_STATUSES = (STATUS_PENDING, STATUS_CONFIRMED)

    # (current, target) -> roles allowed to drive the transition
    TRANSITIONS = {
        (STATUS_PENDING, STATUS_CONFIRMED): frozenset({User.ROLE_OWNER}),
        (STATUS_PENDING, STATUS_CANCELLED): frozenset({User.ROLE_STUDENT, User.ROLE_OWNER}),
        (STATUS_CONFIRMED, STATUS_CANCELLED): frozenset({User.ROLE_OWNER}),
    }

    hostel = models.ForeignKey(Hostel, on_delete=models.CASCADE, related_name="bookings")
    student = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        limit_choices_to={"role": User.ROLE_STUDENT},
        related_name="bookings",
    )
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["hostel", "student"],
                condition=Q(status__in=["pending", "confirmed"]),
                name="unique_open_booking_per_student",
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"Booking #{self.pk} for {self.hostel} ({self.status})"

    def can_transition(self, target: str, role: str) -> bool:
        return role in self.TRANSITIONS.get((self.status, target), frozenset())

    def mark_confirmed(self) -> None:
        self.status = self.STATUS_CONFIRMED
        self.save(update_fields=["status", "updated_at"])

    def mark_cancelled(self) -> None:
        self.status = self.STATUS_CANCELLED
        self.save(update_fields=["status", "updated_at"])
