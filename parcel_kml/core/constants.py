"""Shared parcel constants (single source of truth).

Centralises the geometric and classification numbers used by the area
calculator, the size classification policy, and the KML codec.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean Earth radius in metres used by the spherical-excess area formula."""

SQ_METRES_PER_HECTARE: float = 10_000.0
"""Square metres per hectare."""

DRAWING_SPHERE_RADIUS_M: float = 6_378_137.0
"""Sphere radius used by the drawing tool area figure (WGS 84 semi-major axis)."""

DRAWING_AREA_DECIMALS: int = 2
"""Decimals the drawing tool rounds its hectare figure to."""

MIN_RING_VERTICES: int = 3
"""Vertices needed for a non-degenerate ring (closing edge is implicit)."""

# WGS 84 coordinate bounds
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# ---------------------------------------------------------------------------
# Size classification (hectares, upper bounds inclusive)
# ---------------------------------------------------------------------------

SMALL_FARM_MAX_HA: float = 20.0
"""Largest area still classified as a small farm."""

MEDIUM_FARM_MAX_HA: float = 50.0
"""Largest area still classified as a medium farm."""
