from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from django.db.models import QuerySet

from .. import policies
from ..exceptions import ValidationError
from ..models import Enquiry, Hostel
from .common import fetch_or_404

if TYPE_CHECKING:  # pragma: no cover - used for static analysis only
    from ..authentication import Identity

logger = logging.getLogger(__name__)


class EnquiryService:
    """Student enquiries and visit requests, and the owner's replies to them."""

    def __init__(self, identity: "Identity"):
        self.identity = identity

    def _queryset(self) -> QuerySet[Enquiry]:
        return Enquiry.objects.select_related("student", "hostel__owner").order_by("-created_at", "-id")

    def create(self, data: Mapping[str, Any]) -> Enquiry:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=data["hostel_id"])
        policies.enforce(policies.can_enquire(self.identity, hostel))
        enquiry = Enquiry.objects.create(
            hostel=hostel,
            student_id=self.identity.id,
            type=data["type"],
            message=data.get("message") or None,
            scheduled_date=data.get("scheduled_date"),
        )
        logger.info("Student %s sent %s %s to hostel %s", self.identity.id, enquiry.type, enquiry.pk, hostel.pk)
        return self._queryset().get(pk=enquiry.pk)

    def for_hostel(self, hostel_id: int) -> QuerySet[Enquiry]:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=hostel_id)
        policies.enforce(policies.can_view_hostel_enquiries(self.identity, hostel))
        return self._queryset().filter(hostel=hostel)

    def for_owner(self) -> QuerySet[Enquiry]:
        return self._queryset().filter(hostel__owner_id=self.identity.id)

    def for_student(self) -> QuerySet[Enquiry]:
        return self._queryset().filter(student_id=self.identity.id)

    def reply(self, enquiry_id: int, reply: str) -> Enquiry:
        reply = (reply or "").strip()
        if not reply:
            raise ValidationError("Reply message is required")
        enquiry = fetch_or_404(self._queryset(), "Enquiry not found", pk=enquiry_id)
        policies.enforce(policies.can_reply_to_enquiry(self.identity, enquiry))
        enquiry.mark_responded(reply)
        logger.info("Owner %s replied to enquiry %s", self.identity.id, enquiry.pk)
        return enquiry
