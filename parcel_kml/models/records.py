"""Pydantic boundary records for KML import/export.

The portal's REST layer speaks camelCase JSON.  These models validate
those payloads at the codec boundary and convert them to and from the
frozen domain dataclasses:

- ``ParcelRecord``: encode input ``{id, name, location, soilType, area?,
  owner: {firstName, lastName, phone?, region?}, coordinates: [{lat, lng}]}``.
  ``area`` is accepted but ignored; it is always recomputed from the ring.
- ``DraftRecord``: decode output ``{name, coordinates: [{lat, lng}], area}``.

snake_case field names are accepted as well (``populate_by_name``).
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from parcel_kml.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from parcel_kml.core.exceptions import ContractError
from parcel_kml.models.geometry import Point
from parcel_kml.models.parcel import LandParcel, OwnerRef, ParcelDraft


class RecordValidationError(ContractError):
    """Raised when a boundary record does not match its schema."""

    default_stage = "records"
    default_code = "RECORD_VALIDATION_FAILED"


class CoordinateRecord(BaseModel):
    """A ``{lat, lng}`` pair in WGS 84 degrees."""

    lat: float = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)
    lng: float = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)

    def to_point(self) -> Point:
        return Point(lat=self.lat, lng=self.lng)


class OwnerRecord(BaseModel):
    """Owner metadata attached to an exported parcel."""

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    phone: str | None = None
    region: str | None = None

    model_config = {"populate_by_name": True}

    def to_owner(self) -> OwnerRef:
        return OwnerRef(
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone or "",
            region=self.region or "",
        )


class ParcelRecord(BaseModel):
    """Encode-boundary parcel record."""

    id: str
    name: str = ""
    location: str = ""
    soil_type: str = Field(default="", alias="soilType")
    area: float | None = None
    owner: OwnerRecord | None = None
    coordinates: list[CoordinateRecord] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: object) -> object:
        # Mongo ObjectIds and integer keys both arrive here
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("name", "location", "soil_type", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    def to_parcel(self) -> LandParcel:
        """Convert to a ``LandParcel``, recomputing the area from the ring."""
        return LandParcel.create(
            id=self.id,
            name=self.name,
            location=self.location,
            soil_type=self.soil_type,
            ring=tuple(c.to_point() for c in self.coordinates),
            owner=self.owner.to_owner() if self.owner is not None else None,
        )


class DraftRecord(BaseModel):
    """Decode-boundary draft record."""

    name: str
    coordinates: list[CoordinateRecord] = Field(default_factory=list)
    area: float = 0.0

    @classmethod
    def from_draft(cls, draft: ParcelDraft) -> DraftRecord:
        return cls(
            name=draft.name,
            coordinates=[CoordinateRecord(lat=p.lat, lng=p.lng) for p in draft.ring],
            area=draft.area_hectares,
        )


def parse_parcel_record(data: Mapping[str, object], *, index: int = 0) -> ParcelRecord:
    """Validate one encode-boundary mapping.

    Raises:
        RecordValidationError: If the mapping does not match ``ParcelRecord``.
    """
    if not isinstance(data, Mapping):
        msg = f"Parcel record {index} must be a mapping, got {type(data).__name__}"
        raise RecordValidationError(msg)
    try:
        return ParcelRecord.model_validate(dict(data))
    except PydanticValidationError as exc:
        msg = f"Parcel record {index} is invalid: {exc.error_count()} error(s): {exc}"
        raise RecordValidationError(msg) from exc
