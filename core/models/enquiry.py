from django.db import models
from django.utils import timezone

from .hostel import Hostel
from .user import User


class Enquiry(models.Model):
    TYPE_ENQUIRY = "enquiry"
    TYPE_SCHEDULE_VISIT = "schedule_visit"
    TYPE_CHOICES = (
        (TYPE_ENQUIRY, "Enquiry"),
        (TYPE_SCHEDULE_VISIT, "Schedule Visit"),
    )
    STATUS_PENDING = "pending"
    STATUS_RESPONDED = "responded"
    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending"),
        (STATUS_RESPONDED, "Responded"),
    )

    hostel = models.ForeignKey(Hostel, on_delete=models.CASCADE, related_name="enquiries")
    student = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        limit_choices_to={"role": User.ROLE_STUDENT},
        related_name="enquiries",
    )
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    message = models.TextField(null=True, blank=True)
    scheduled_date = models.DateTimeField(null=True, blank=True)
    reply = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    replied_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "enquiries"

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"{self.get_type_display()} for {self.hostel.name} ({self.status})"

    def mark_responded(self, reply: str) -> None:
        # Replying again overwrites the previous reply and restamps replied_at.
        self.reply = reply
        self.status = self.STATUS_RESPONDED
        self.replied_at = timezone.now()
        self.save(update_fields=["reply", "status", "replied_at"])
