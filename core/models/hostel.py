from django.db import models

from .user import User


class Hostel(models.Model):
    owner = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        limit_choices_to={"role": User.ROLE_OWNER},
        related_name="hostels",
    )
    name = models.CharField(max_length=255)
    address = models.TextField()
    city = models.CharField(max_length=255)
    rent = models.PositiveIntegerField(help_text="Monthly rent")
    facilities = models.TextField(blank=True, default="", help_text="e.g., Wifi, AC, Mess")
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-id"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return self.name

    def mark_verified(self) -> None:
        self.is_verified = True
        self.save(update_fields=["is_verified"])

    def mark_unverified(self) -> None:
        self.is_verified = False
        self.save(update_fields=["is_verified"])
