"""Representative point of a parcel ring.

The result positions map markers and feeds reverse geocoding, so it must
lie close to the parcel rather than be its exact geodesic centroid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parcel_kml.models.geometry import Point, is_degenerate

if TYPE_CHECKING:
    from parcel_kml.models.geometry import Ring


def centroid(ring: Ring) -> Point | None:
    """Compute the area-weighted planar centroid of a ring.

    Latitude and longitude are treated as Cartesian coordinates.  When the
    polygon has no planar area (collinear vertices, or a self-intersection
    whose lobes cancel) the plain average of the vertices is returned.

    Returns:
        The centroid, or ``None`` if the ring is degenerate.
    """
    if is_degenerate(ring):
        return None

    from shapely.geometry import Polygon

    # planar, so (lat, lng) can be passed as (x, y) without reordering
    poly = Polygon([(p.lat, p.lng) for p in ring])
    if poly.area > 0:
        c = poly.centroid
        if not c.is_empty:
            return Point(lat=c.x, lng=c.y)

    return vertex_average(ring)


def vertex_average(ring: Ring) -> Point | None:
    """Average of the ring's vertices, ``None`` for an empty ring."""
    if not ring:
        return None
    n = len(ring)
    return Point(
        lat=sum(p.lat for p in ring) / n,
        lng=sum(p.lng for p in ring) / n,
    )
