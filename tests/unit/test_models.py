"""Tests for the geometric primitives and parcel dataclasses.

Covers:
- Point construction, dict round trip, malformed mappings
- Ring helpers: as_ring, is_degenerate, validate_ring, strip_closing_point
- LandParcel.create / with_ring area recomputation and full ring replacement
- ParcelDraft.to_parcel ownership attachment
"""

from __future__ import annotations

import dataclasses

import pytest

from parcel_kml.geometry.area import area_hectares
from parcel_kml.geometry.classification import SizeTier
from parcel_kml.models.geometry import (
    InvalidRingError,
    Point,
    as_ring,
    is_degenerate,
    strip_closing_point,
    validate_ring,
)
from parcel_kml.models.parcel import LandParcel, OwnerRef, ParcelDraft


class TestPoint:
    def test_to_dict(self) -> None:
        assert Point(lat=36.1, lng=3.2).to_dict() == {"lat": 36.1, "lng": 3.2}

    def test_from_dict_coerces_numbers(self) -> None:
        assert Point.from_dict({"lat": "36.5", "lng": 3}) == Point(lat=36.5, lng=3.0)

    def test_from_dict_missing_key(self) -> None:
        with pytest.raises(TypeError, match="'lat' and 'lng'"):
            Point.from_dict({"lat": 36.0})

    def test_from_dict_non_numeric(self) -> None:
        with pytest.raises(ValueError):
            Point.from_dict({"lat": "north", "lng": 3.0})

    def test_is_frozen(self) -> None:
        p = Point(lat=1.0, lng=2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.lat = 5.0  # type: ignore[misc]

    def test_is_finite(self) -> None:
        assert Point(1.0, 2.0).is_finite
        assert not Point(float("nan"), 2.0).is_finite


class TestRingHelpers:
    def test_as_ring_accepts_points_and_mappings(self) -> None:
        ring = as_ring([Point(1.0, 2.0), {"lat": 3.0, "lng": 4.0}])
        assert ring == (Point(1.0, 2.0), Point(3.0, 4.0))

    @pytest.mark.parametrize(("count", "degenerate"), [(0, True), (2, True), (3, False)])
    def test_is_degenerate(self, count: int, degenerate: bool) -> None:
        ring = tuple(Point(float(i), float(i * i)) for i in range(count))
        assert is_degenerate(ring) is degenerate

    def test_validate_ring_passes_usable_ring(self, square_ring: tuple[Point, ...]) -> None:
        assert validate_ring(square_ring, "test") is square_ring

    def test_validate_ring_rejects_two_points(self) -> None:
        with pytest.raises(InvalidRingError, match="only 2 point"):
            validate_ring((Point(0.0, 0.0), Point(1.0, 1.0)), "test")

    def test_validate_ring_rejects_non_finite(self) -> None:
        ring = (Point(0.0, 0.0), Point(0.0, 1.0), Point(float("inf"), 1.0), Point(1.0, 0.0))
        with pytest.raises(InvalidRingError, match=r"non-finite coordinates at vertex \[2\]"):
            validate_ring(ring, "test")

    def test_strip_closing_point(self) -> None:
        a, b, c = Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)
        assert strip_closing_point((a, b, c, a)) == (a, b, c)

    def test_strip_closing_point_leaves_open_ring(self) -> None:
        a, b, c = Point(0.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)
        assert strip_closing_point((a, b, c)) == (a, b, c)


class TestLandParcel:
    def test_create_computes_area(self, parcel: LandParcel, square_ring) -> None:
        assert parcel.area_hectares == pytest.approx(area_hectares(square_ring))
        assert parcel.ring == square_ring

    def test_tier_follows_area(self, parcel: LandParcel) -> None:
        # ~20.25 ha sits just above the small-farm limit
        assert parcel.tier is SizeTier.MEDIUM

    def test_with_ring_replaces_whole_ring(self, parcel: LandParcel) -> None:
        new_ring = (Point(36.0, 3.0), Point(36.0, 3.1), Point(36.1, 3.1))
        updated = parcel.with_ring(new_ring)
        assert updated.ring == new_ring
        assert updated.area_hectares == pytest.approx(area_hectares(new_ring))
        assert updated.id == parcel.id
        assert updated.owner == parcel.owner
        # the source parcel is untouched
        assert len(parcel.ring) == 4

    def test_with_ring_degenerate(self, parcel: LandParcel) -> None:
        updated = parcel.with_ring(())
        assert updated.is_degenerate
        assert updated.area_hectares == 0.0

    def test_owner_display_name(self, owner: OwnerRef) -> None:
        assert owner.display_name == "Ahmed Benali"
        assert OwnerRef(first_name="Amina", last_name="").display_name == "Amina"


class TestParcelDraft:
    def test_to_parcel_attaches_owner(self, square_ring, owner: OwnerRef) -> None:
        draft = ParcelDraft(name="Imported", ring=square_ring, area_hectares=20.25)
        parcel = draft.to_parcel("land-9", owner, location="Mazouna", soil_type="Sandy")
        assert parcel.id == "land-9"
        assert parcel.owner is owner
        assert parcel.name == "Imported"
        assert parcel.ring == square_ring
        assert parcel.area_hectares == 20.25
        assert parcel.location == "Mazouna"
        assert parcel.soil_type == "Sandy"
