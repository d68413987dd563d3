from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from .. import policies
from ..api.serializers import BookingSerializer
from ..exceptions import ValidationError
from ..models import Booking, Hostel
from .common import fetch_or_404

if TYPE_CHECKING:  # pragma: no cover - used for static analysis only
    from ..authentication import Identity

logger = logging.getLogger(__name__)

OWNER_TARGET_STATUSES = {Booking.STATUS_CONFIRMED, Booking.STATUS_CANCELLED}


class BookingRequestService:
    """Creates booking requests for students."""

    def __init__(self, identity: "Identity"):
        self.identity = identity

    def open_booking(self, hostel: Hostel) -> Booking | None:
        return (
            Booking.objects
            .filter(hostel=hostel, student_id=self.identity.id, status__in=Booking.OPEN_STATUSES)
            .first()
        )

    def create_booking(self, hostel_id: int) -> Booking:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=hostel_id)
        policies.enforce(policies.can_book_hostel(self.identity, hostel))

        existing = self.open_booking(hostel)
        if existing is not None:
            raise self._duplicate(existing)

        try:
            with transaction.atomic():
                booking = Booking.objects.create(
                    hostel=hostel,
                    student_id=self.identity.id,
                    status=Booking.STATUS_PENDING,
                )
        except IntegrityError:
            existing = self.open_booking(hostel)
            if existing is None:
                raise
            raise self._duplicate(existing)

        logger.info("Student %s requested booking %s for hostel %s", self.identity.id, booking.pk, hostel.pk)
        return booking

    def _duplicate(self, existing: Booking) -> ValidationError:
        logger.warning("Student %s already holds open booking %s", self.identity.id, existing.pk)
        return ValidationError(
            "You already have a booking for this hostel",
            extra={"booking": BookingSerializer(existing).data},
        )


class StudentBookingsService:
    """A student's own booking history with hostel and owner details."""

    def __init__(self, identity: "Identity"):
        self.identity = identity

    def bookings(self) -> QuerySet[Booking]:
        return (
            Booking.objects
            .filter(student_id=self.identity.id)
            .select_related("hostel__owner")
            .order_by("-id")
        )


class HostelBookingsService:
    """Bookings placed against one of the owner's hostels."""

    def __init__(self, identity: "Identity"):
        self.identity = identity

    def bookings(self, hostel_id: int) -> QuerySet[Booking]:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=hostel_id)
        policies.enforce(policies.can_view_hostel_bookings(self.identity, hostel))
        return (
            Booking.objects
            .filter(hostel=hostel)
            .select_related("student")
            .order_by("-id")
        )


class BookingStatusService:
    """Moves bookings through pending -> confirmed -> cancelled."""

    def __init__(self, identity: "Identity"):
        self.identity = identity

    def _booking(self, booking_id: int) -> Booking:
        return fetch_or_404(
            Booking.objects.select_related("hostel", "student"),
            "Booking not found",
            pk=booking_id,
        )

    def update_status(self, booking_id: int, status: str) -> Booking:
        booking = self._booking(booking_id)
        policies.enforce(policies.can_update_booking(self.identity, booking, status))

        if self.identity.is_owner and status not in OWNER_TARGET_STATUSES:
            raise ValidationError("Owners can only confirm or cancel bookings")

        if not booking.can_transition(status, self.identity.role):
            raise ValidationError(f"Cannot change booking from {booking.status} to {status}")

        if status == Booking.STATUS_CONFIRMED:
            booking.mark_confirmed()
        else:
            booking.mark_cancelled()
        logger.info(
            "%s %s moved booking %s to %s",
            self.identity.role.capitalize(),
            self.identity.id,
            booking.pk,
            booking.status,
        )
        return booking

    def delete(self, booking_id: int) -> None:
        booking = self._booking(booking_id)
        policies.enforce(policies.can_delete_booking(self.identity, booking))
        booking.delete()
        logger.info("Student %s deleted booking %s", self.identity.id, booking_id)
