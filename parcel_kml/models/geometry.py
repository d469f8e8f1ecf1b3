"""Geometric primitives: points and rings.

A ``Point`` is a WGS 84 position in degrees with no altitude.  A ring is
an ordered tuple of points describing a simple polygon boundary whose
closing edge (last point back to the first) is implicit: the first point
is never repeated at the end.

Rings with fewer than ``MIN_RING_VERTICES`` points are *degenerate*.
They carry no area and no centroid, and batch operations skip them
instead of failing.

Axis order is ``(lat, lng)`` everywhere in this package except the KML
boundary, which writes and reads ``lng,lat``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from parcel_kml.core.constants import MIN_RING_VERTICES
from parcel_kml.core.exceptions import ValidationError


class InvalidRingError(ValidationError):
    """Raised when a ring has fewer than three usable vertices."""

    default_stage = "geometry"
    default_code = "INVALID_RING"


@dataclass(frozen=True, slots=True)
class Point:
    """A WGS 84 position in decimal degrees.

    Attributes:
        lat: Latitude in degrees.
        lng: Longitude in degrees.
    """

    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Point:
        """Build a point from a ``{"lat": ..., "lng": ...}`` mapping.

        Raises:
            TypeError: If ``lat`` or ``lng`` is missing.
            ValueError: If a value cannot be converted to float.
        """
        if "lat" not in data or "lng" not in data:
            msg = f"Point mapping needs 'lat' and 'lng' keys, got {sorted(data)}"
            raise TypeError(msg)
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))  # type: ignore[arg-type]

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.lat) and math.isfinite(self.lng)


Ring = tuple[Point, ...]
"""Ordered polygon boundary; the closing edge is implicit."""


def as_ring(points: Iterable[Point | Mapping[str, object]]) -> Ring:
    """Build a ring from points or ``{lat, lng}`` mappings."""
    return tuple(p if isinstance(p, Point) else Point.from_dict(p) for p in points)


def is_degenerate(ring: Ring) -> bool:
    """Whether the ring has too few vertices to enclose an area."""
    return len(ring) < MIN_RING_VERTICES


def validate_ring(ring: Ring, context: str) -> Ring:
    """Return the ring unchanged if it is usable.

    Raises:
        InvalidRingError: If the ring has fewer than three vertices or a
            NaN/infinite coordinate.
    """
    if is_degenerate(ring):
        msg = (
            f"Ring has only {len(ring)} point(s), need at least "
            f"{MIN_RING_VERTICES} for {context}"
        )
        raise InvalidRingError(msg)
    bad = [i for i, p in enumerate(ring) if not p.is_finite]
    if bad:
        msg = f"Ring has non-finite coordinates at vertex {bad} for {context}"
        raise InvalidRingError(msg)
    return ring


def strip_closing_point(ring: Ring) -> Ring:
    """Drop a trailing point that repeats the first one.

    KML closes its rings explicitly; the ring model does not.
    """
    if len(ring) > 1 and ring[0] == ring[-1]:
        return ring[:-1]
    return ring
