"""Coordinate and text normalization for the KML codec.

Responsibilities:
- Format a ring as KML ``lng,lat,0`` coordinate text (encode boundary)
- Parse KML coordinate text back to a ring, dropping bad tokens (decode boundary)
- Render the HTML description shown in GIS tools for each parcel

This module is the only place where ``(lat, lng)`` is reordered to KML's
``lng,lat`` and back.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from parcel_kml.kml._constants import (
    ALTITUDE,
    LABEL_AREA,
    LABEL_HOLDING,
    LABEL_LOCATION,
    LABEL_PHONE,
    LABEL_REGION,
    LABEL_SOIL_TYPE,
)
from parcel_kml.kml._validation import is_valid_coordinate
from parcel_kml.models.geometry import Point

if TYPE_CHECKING:
    from parcel_kml.core.config import KmlExportConfig
    from parcel_kml.models.geometry import Ring
    from parcel_kml.models.parcel import LandParcel

# ---------------------------------------------------------------------------
# Coordinate text
# ---------------------------------------------------------------------------


def format_coordinates(ring: Ring) -> str:
    """Format a ring as space-separated ``lng,lat,0`` triples in ring order."""
    return " ".join(f"{p.lng},{p.lat},{ALTITUDE}" for p in ring)


def parse_coordinates_text(text: str) -> tuple[Ring, int]:
    """Parse KML coordinate text (``lng,lat[,alt] ...``) to a ring.

    Tokens with fewer than two fields, non-numeric or NaN values, or values
    outside WGS 84 bounds are dropped.

    Returns:
        ``(ring, dropped)`` where ``dropped`` counts rejected tokens.
    """
    points: list[Point] = []
    dropped = 0
    for token in text.split():
        parts = token.split(",")
        if len(parts) < 2:
            dropped += 1
            continue
        try:
            lng = float(parts[0])
            lat = float(parts[1])
        except ValueError:
            dropped += 1
            continue
        if not is_valid_coordinate(lng, lat):
            dropped += 1
            continue
        points.append(Point(lat=lat, lng=lng))
    return tuple(points), dropped


# ---------------------------------------------------------------------------
# Placemark description
# ---------------------------------------------------------------------------


def _field(label: str, value: str) -> str:
    return f"<p><strong>{label}:</strong> {html.escape(value)}</p>"


def build_description_html(parcel: LandParcel, config: KmlExportConfig) -> str:
    """Render the owner/parcel summary placed in the Placemark CDATA block."""
    owner = parcel.owner
    owner_name = owner.display_name if owner is not None and owner.display_name else ""
    lines = [
        f"<h3>{html.escape(owner_name or config.default_owner_label)}</h3>",
        _field(LABEL_HOLDING, parcel.name or config.unknown_value_label),
        _field(LABEL_LOCATION, parcel.location or config.unknown_value_label),
        _field(LABEL_AREA, f"{parcel.area_hectares:.2f} {config.area_unit_label}"),
    ]
    if owner is not None and owner.phone:
        lines.append(_field(LABEL_PHONE, owner.phone))
    if owner is not None and owner.region:
        lines.append(_field(LABEL_REGION, owner.region))
    if parcel.soil_type:
        lines.append(_field(LABEL_SOIL_TYPE, parcel.soil_type))
    return "\n".join(lines)
