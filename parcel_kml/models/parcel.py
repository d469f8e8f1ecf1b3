"""Land parcel records.

A ``LandParcel`` is a farmer's accepted boundary plus descriptive fields.
Its geometry is immutable: a new capture replaces the whole ring (and the
derived area) rather than patching it.

A ``ParcelDraft`` is what the KML decoder produces: a name, a ring and a
recomputed area, with no owner and no id.  The caller attaches ownership
with ``ParcelDraft.to_parcel`` before persisting.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from parcel_kml.geometry.area import area_hectares
from parcel_kml.geometry.classification import SizeTier, tier
from parcel_kml.models.geometry import Ring, as_ring, is_degenerate


@dataclass(frozen=True, slots=True)
class OwnerRef:
    """Opaque owner reference supplied by the caller.

    Attributes:
        first_name: Owner first name.
        last_name: Owner last name.
        phone: Contact phone number, empty if unknown.
        region: Administrative region (wilaya), empty if unknown.
    """

    first_name: str
    last_name: str
    phone: str = ""
    region: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True, slots=True)
class LandParcel:
    """A farmer's land parcel.

    Attributes:
        id: Caller-assigned identifier.
        name: Parcel (holding) name, may be empty.
        location: Free-text location, may be empty.
        soil_type: Soil type label, may be empty.
        area_hectares: Parcel area in hectares.
        ring: Boundary ring, ``(lat, lng)`` points, closing edge implicit.
        owner: Owner reference, ``None`` when not attached.
    """

    id: str
    name: str = ""
    location: str = ""
    soil_type: str = ""
    area_hectares: float = 0.0
    ring: Ring = ()
    owner: OwnerRef | None = None

    @classmethod
    def create(
        cls,
        *,
        id: str,  # noqa: A002
        ring: Ring,
        name: str = "",
        location: str = "",
        soil_type: str = "",
        owner: OwnerRef | None = None,
    ) -> LandParcel:
        """Build a parcel whose area is computed from its ring."""
        ring = as_ring(ring)
        return cls(
            id=id,
            name=name,
            location=location,
            soil_type=soil_type,
            area_hectares=area_hectares(ring),
            ring=ring,
            owner=owner,
        )

    def with_ring(self, ring: Ring) -> LandParcel:
        """Return a copy with the ring fully replaced and area recomputed."""
        ring = as_ring(ring)
        return replace(self, ring=ring, area_hectares=area_hectares(ring))

    @property
    def tier(self) -> SizeTier:
        return tier(self.area_hectares)

    @property
    def is_degenerate(self) -> bool:
        return is_degenerate(self.ring)


@dataclass(frozen=True, slots=True)
class ParcelDraft:
    """A parcel decoded from KML, awaiting an owner.

    Attributes:
        name: Placemark name (or the configured import fallback).
        ring: Decoded ring, ``(lat, lng)`` points, closing edge implicit.
        area_hectares: Area recomputed from ``ring``.
    """

    name: str
    ring: Ring
    area_hectares: float

    def to_parcel(
        self,
        id: str,  # noqa: A002
        owner: OwnerRef | None,
        *,
        location: str = "",
        soil_type: str = "",
    ) -> LandParcel:
        """Attach an id and owner, producing a persistable parcel."""
        return LandParcel(
            id=id,
            name=self.name,
            location=location,
            soil_type=soil_type,
            area_hectares=self.area_hectares,
            ring=self.ring,
            owner=owner,
        )


@dataclass(frozen=True, slots=True)
class SkippedItem:
    """One batch item that was skipped instead of failing the batch.

    Attributes:
        index: Zero-based position of the item in the batch.
        name: Item name, if it had one.
        code: Machine-readable error code of the failure.
        message: Human-readable reason.
    """

    index: int
    name: str
    code: str
    message: str
