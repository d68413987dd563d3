from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Mapping

from django.db.models import QuerySet

from .. import policies
from ..exceptions import ValidationError
from ..models import Hostel
from ..policies import HostelFilters
from .common import fetch_or_404

if TYPE_CHECKING:  # pragma: no cover - used for static analysis only
    from ..authentication import Identity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostelUpdate:
    """Named optional fields for a partial hostel edit; ``None`` means untouched."""

    name: str | None = None
    address: str | None = None
    city: str | None = None
    rent: int | None = None
    facilities: str | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "HostelUpdate":
        return cls(
            name=data.get("name"),
            address=data.get("address"),
            city=data.get("city"),
            rent=data.get("rent"),
            facilities=data.get("facilities"),
        )

    def changes(self) -> dict[str, Any]:
        return {field: value for field, value in asdict(self).items() if value is not None}


class HostelCatalogService:
    """Role-filtered hostel listing, search and lookup."""

    def __init__(self, identity: "Identity", base_queryset: QuerySet[Hostel] | None = None) -> None:
        self.identity = identity
        self.base_queryset = base_queryset if base_queryset is not None else Hostel.objects.all()

    def visible(self) -> QuerySet[Hostel]:
        return self.base_queryset.filter(policies.hostel_visibility(self.identity))

    def build_filters(self, data: Mapping[str, str]) -> HostelFilters:
        return HostelFilters.from_query(data)

    def list(self) -> QuerySet[Hostel]:
        hostels = self.visible().order_by("-id")
        logger.debug("Listing hostels for %s %s", self.identity.role, self.identity.id)
        return hostels

    def search(self, filters: HostelFilters) -> QuerySet[Hostel]:
        return self.visible().filter(filters.as_q()).order_by("-id")

    def get(self, hostel_id: int) -> Hostel:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=hostel_id)
        policies.enforce(policies.can_view_hostel(self.identity, hostel))
        return hostel


class HostelManagementService:
    """Create, edit and delete listings on behalf of their owner."""

    def __init__(self, identity: "Identity") -> None:
        self.identity = identity

    def create(self, data: Mapping[str, Any]) -> Hostel:
        policies.enforce(policies.can_create_hostel(self.identity))
        hostel = Hostel.objects.create(
            name=data["name"],
            address=data["address"],
            city=data["city"],
            rent=data["rent"],
            facilities=data.get("facilities") or "",
            owner_id=self.identity.id,
            is_verified=False,
        )
        logger.info("Owner %s created hostel %s (pending verification)", self.identity.id, hostel.pk)
        return hostel

    def update(self, hostel_id: int, update: HostelUpdate) -> Hostel:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=hostel_id)
        policies.enforce(policies.can_modify_hostel(self.identity, hostel, "update"))

        changes = update.changes()
        if not changes:
            raise ValidationError("No fields to update")

        for field, value in changes.items():
            setattr(hostel, field, value)
        hostel.save(update_fields=list(changes))
        logger.info("Owner %s updated hostel %s: %s", self.identity.id, hostel.pk, sorted(changes))
        return hostel

    def delete(self, hostel_id: int) -> None:
        hostel = fetch_or_404(Hostel.objects.all(), "Hostel not found", pk=hostel_id)
        policies.enforce(policies.can_modify_hostel(self.identity, hostel, "delete"))
        hostel.delete()
        logger.info("Owner %s deleted hostel %s", self.identity.id, hostel_id)


class HostelModerationService:
    """Admin verification workflow for listings."""

    def __init__(self, identity: "Identity") -> None:
        self.identity = identity

    def _queryset(self) -> QuerySet[Hostel]:
        return Hostel.objects.select_related("owner")

    def all_hostels(self) -> QuerySet[Hostel]:
        policies.enforce(policies.can_moderate_hostel(self.identity))
        return self._queryset().order_by("-id")

    def verify(self, hostel_id: int) -> Hostel:
        policies.enforce(policies.can_moderate_hostel(self.identity))
        hostel = fetch_or_404(self._queryset(), "Hostel not found", pk=hostel_id)
        if hostel.is_verified:
            raise ValidationError("Hostel is already verified")
        hostel.mark_verified()
        logger.info("Admin %s verified hostel %s", self.identity.id, hostel.pk)
        return hostel

    def unverify(self, hostel_id: int) -> Hostel:
        policies.enforce(policies.can_moderate_hostel(self.identity))
        hostel = fetch_or_404(self._queryset(), "Hostel not found", pk=hostel_id)
        if not hostel.is_verified:
            raise ValidationError("Hostel is not verified")
        hostel.mark_unverified()
        logger.info("Admin %s unverified hostel %s", self.identity.id, hostel.pk)
        return hostel

    def reject(self, hostel_id: int) -> None:
        """Remove a listing that has not been verified yet."""
        policies.enforce(policies.can_moderate_hostel(self.identity))
        hostel = fetch_or_404(self._queryset(), "Hostel not found", pk=hostel_id)
        if hostel.is_verified:
            raise ValidationError("Only unverified hostels can be rejected; unverify it first")
        hostel.delete()
        logger.info("Admin %s rejected hostel %s", self.identity.id, hostel_id)
