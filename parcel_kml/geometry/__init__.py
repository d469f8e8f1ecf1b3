"""Pure geometry operations on parcel rings.

- area: spherical-excess, drawing-tool and geodesic area in hectares
- centroid: representative point for markers and geocoding
- classification: size tier and KML style per tier
"""

from parcel_kml.geometry.area import (
    area_hectares,
    drawing_area_hectares,
    geodesic_area_hectares,
)
from parcel_kml.geometry.centroid import centroid
from parcel_kml.geometry.classification import SizeTier, TierStyle, style_for, tier

__all__ = [
    "SizeTier",
    "TierStyle",
    "area_hectares",
    "centroid",
    "drawing_area_hectares",
    "geodesic_area_hectares",
    "style_for",
    "tier",
]
