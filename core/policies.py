"""
Authorization rules for HostelGo.

Each ``can_*`` function is pure: it looks only at the acting identity and the
rows it is handed, and returns a :class:`Decision`. Services call
:func:`enforce` after confirming the rows exist, so a caller always sees 404
before 403.

Role-keyed predicate builders produce the base queryset filter for hostel
listings; search filters are applied on top of them, never instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Callable, Mapping

from django.db.models import Q

from .exceptions import AuthorizationError
from .models import Booking, Enquiry, Hostel, Review, User

if TYPE_CHECKING:  # pragma: no cover - used for static analysis only
    from .authentication import Identity


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = Decision(True)


def deny(reason: str) -> Decision:
    return Decision(False, reason)


def enforce(decision: Decision) -> None:
    """Raise a 403 carrying the decision's reason when it is a denial."""
    if not decision.allowed:
        raise AuthorizationError(decision.reason or "Access denied")


# ---------------------------------------------------------------------------
# Hostel visibility predicates
# ---------------------------------------------------------------------------

HOSTEL_VISIBILITY: Mapping[str, Callable[["Identity"], Q]] = {
    User.ROLE_STUDENT: lambda identity: Q(is_verified=True),
    User.ROLE_OWNER: lambda identity: Q(owner_id=identity.id),
    User.ROLE_ADMIN: lambda identity: Q(),
}


def hostel_visibility(identity: "Identity") -> Q:
    """Return the base filter of hostels ``identity`` may list."""
    builder = HOSTEL_VISIBILITY.get(identity.role)
    if builder is None:
        # Unknown roles see nothing.
        return Q(pk__in=[])
    return builder(identity)


@dataclass(frozen=True)
class HostelFilters:
    """Value object holding the optional search filters for hostel queries."""

    city: str = ""
    max_rent: Decimal | None = None
    facility: str = ""

    @classmethod
    def from_query(cls, data: Mapping[str, str]) -> "HostelFilters":
        """Build filters from raw query parameters, ignoring an unparsable ``maxRent``."""
        max_rent_raw = (data.get("maxRent") or "").strip()
        max_rent: Decimal | None = None
        if max_rent_raw:
            try:
                max_rent = Decimal(max_rent_raw)
            except (InvalidOperation, TypeError):
                max_rent = None
            else:
                if not max_rent.is_finite():
                    max_rent = None
        return cls(
            city=(data.get("city") or "").strip(),
            max_rent=max_rent,
            facility=(data.get("facility") or "").strip(),
        )

    def as_q(self) -> Q:
        predicate = Q()
        if self.city:
            predicate &= Q(city=self.city)
        if self.max_rent is not None:
            predicate &= Q(rent__lte=self.max_rent)
        if self.facility:
            predicate &= Q(facilities__icontains=self.facility)
        return predicate


# ---------------------------------------------------------------------------
# Hostels
# ---------------------------------------------------------------------------


def can_view_hostel(identity: "Identity", hostel: Hostel) -> Decision:
    if identity.is_student and not hostel.is_verified:
        return deny("This hostel is not verified yet")
    if identity.is_owner and hostel.owner_id != identity.id:
        return deny("You can only view your own hostels")
    if identity.role not in (User.ROLE_STUDENT, User.ROLE_OWNER, User.ROLE_ADMIN):
        return deny("Access denied")
    return ALLOW


def can_create_hostel(identity: "Identity") -> Decision:
    if not identity.is_owner:
        return deny("Only owners can create hostels")
    return ALLOW


def can_modify_hostel(identity: "Identity", hostel: Hostel, action: str = "update") -> Decision:
    if not identity.is_owner or hostel.owner_id != identity.id:
        return deny(f"You can only {action} your own hostels")
    return ALLOW


def can_moderate_hostel(identity: "Identity") -> Decision:
    if not identity.is_admin:
        return deny("Only admins can verify hostels")
    return ALLOW


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------


def can_review_hostel(identity: "Identity", hostel: Hostel) -> Decision:
    if not identity.is_student:
        return deny("Only students can create reviews")
    # The verification check is scoped to students on purpose; the role gate
    # above is kept as a separate guard.
    if identity.is_student and not hostel.is_verified:
        return deny("You can only review verified hostels")
    return ALLOW


def can_modify_review(identity: "Identity", review: Review, action: str = "update") -> Decision:
    if review.student_id != identity.id:
        return deny(f"You can only {action} your own reviews")
    return ALLOW


# ---------------------------------------------------------------------------
# Bookings
# ---------------------------------------------------------------------------


def can_book_hostel(identity: "Identity", hostel: Hostel) -> Decision:
    if not identity.is_student:
        return deny("Only students can book hostels")
    if not hostel.is_verified:
        return deny("You can only book verified hostels")
    return ALLOW


def can_view_hostel_bookings(identity: "Identity", hostel: Hostel) -> Decision:
    if not identity.is_owner or hostel.owner_id != identity.id:
        return deny("You can only view bookings for your own hostels")
    return ALLOW


def can_update_booking(identity: "Identity", booking: Booking, target_status: str) -> Decision:
    """
    Decide whether ``identity`` may request ``target_status`` on ``booking``.

    This covers ownership and the per-role set of target statuses. Whether the
    target is reachable from the booking's current status is a separate check
    (:meth:`Booking.can_transition`), reported as a validation error.
    """
    if identity.is_student:
        if booking.student_id != identity.id:
            return deny("You can only update your own bookings")
        if target_status != Booking.STATUS_CANCELLED:
            return deny("Students can only cancel bookings")
        return ALLOW
    if identity.is_owner:
        if booking.hostel.owner_id != identity.id:
            return deny("You can only update bookings for your own hostels")
        return ALLOW
    return deny("Only students and owners can update bookings")


def can_delete_booking(identity: "Identity", booking: Booking) -> Decision:
    if not identity.is_student or booking.student_id != identity.id:
        return deny("You can only delete your own bookings")
    return ALLOW


# ---------------------------------------------------------------------------
# Enquiries
# ---------------------------------------------------------------------------


def can_enquire(identity: "Identity", hostel: Hostel) -> Decision:
    if not identity.is_student:
        return deny("Only students can send enquiries")
    if identity.is_student and not hostel.is_verified:
        return deny("You can only enquire about verified hostels")
    return ALLOW


def can_view_hostel_enquiries(identity: "Identity", hostel: Hostel) -> Decision:
    if not identity.is_owner or hostel.owner_id != identity.id:
        return deny("You can only view enquiries for your own hostels")
    return ALLOW


def can_reply_to_enquiry(identity: "Identity", enquiry: Enquiry) -> Decision:
    if not identity.is_owner or enquiry.hostel.owner_id != identity.id:
        return deny("You can only reply to enquiries for your own hostels")
    return ALLOW
