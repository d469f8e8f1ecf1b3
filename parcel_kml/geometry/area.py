"""Parcel area in hectares.

Three distinct named operations are provided:

- ``area_hectares``: the spherical-excess (generalised shoelace on a
  sphere of radius ``EARTH_RADIUS_M``) approximation used for stored
  parcels and KML import/export.  It is accurate for parcel-scale
  polygons (tens of hectares) but is not a geodesic algorithm.
- ``drawing_area_hectares``: the figure the interactive drawing tool
  displays while a boundary is captured.  Same spherical formula on a
  sphere of radius ``DRAWING_SPHERE_RADIUS_M`` (the WGS 84 semi-major
  axis), rounded to two decimals.
- ``geodesic_area_hectares``: area on the WGS 84 ellipsoid via
  ``pyproj.Geod``, for callers that need a surveyed figure.

The three disagree slightly; none silently replaces another.

All are pure functions and return ``0.0`` for degenerate rings.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from parcel_kml.core.constants import (
    DRAWING_AREA_DECIMALS,
    DRAWING_SPHERE_RADIUS_M,
    EARTH_RADIUS_M,
    SQ_METRES_PER_HECTARE,
)
from parcel_kml.models.geometry import is_degenerate

if TYPE_CHECKING:
    from parcel_kml.models.geometry import Ring


def area_hectares(ring: Ring) -> float:
    """Compute the spherical-excess area of a ring in hectares.

    For each edge ``(i, i+1 mod n)`` accumulates
    ``(lng2 - lng1) * (2 + sin(lat1) + sin(lat2))`` in radians, scales by
    ``R² / 2`` and takes the absolute value, so winding order does not
    matter.

    Args:
        ring: Polygon boundary; the closing edge is implicit.

    Returns:
        Area in hectares, ``0.0`` if the ring is degenerate.
    """
    if is_degenerate(ring):
        return 0.0
    return _spherical_area_m2(ring, EARTH_RADIUS_M) / SQ_METRES_PER_HECTARE


def drawing_area_hectares(ring: Ring) -> float:
    """Area shown by the drawing tool, in hectares to two decimals.

    Returns:
        Rounded area in hectares, ``0.0`` if the ring is degenerate.
    """
    if is_degenerate(ring):
        return 0.0
    area_m2 = _spherical_area_m2(ring, DRAWING_SPHERE_RADIUS_M)
    return round(area_m2 / SQ_METRES_PER_HECTARE, DRAWING_AREA_DECIMALS)


def _spherical_area_m2(ring: Ring, radius_m: float) -> float:
    n = len(ring)
    total = 0.0
    for i in range(n):
        p1 = ring[i]
        p2 = ring[(i + 1) % n]
        lat1 = math.radians(p1.lat)
        lat2 = math.radians(p2.lat)
        lng1 = math.radians(p1.lng)
        lng2 = math.radians(p2.lng)
        total += (lng2 - lng1) * (2 + math.sin(lat1) + math.sin(lat2))

    return abs(total * radius_m * radius_m / 2)


def geodesic_area_hectares(ring: Ring) -> float:
    """Compute the geodesic area of a ring on the WGS 84 ellipsoid.

    Uses ``pyproj.Geod.polygon_area_perimeter``; the absolute value makes
    the result winding-order agnostic.

    Returns:
        Area in hectares, ``0.0`` if the ring is degenerate.
    """
    if is_degenerate(ring):
        return 0.0

    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    lons = [p.lng for p in ring]
    lats = [p.lat for p in ring]
    area_m2, _perimeter = geod.polygon_area_perimeter(lons, lats)
    return abs(area_m2) / SQ_METRES_PER_HECTARE
