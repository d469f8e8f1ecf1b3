"""Size classification policy.

Maps a parcel area to a ``SizeTier`` and each tier to the fixed KML style
used by the encoder.  Colours are KML ``aabbggrr`` hex strings: line
colours are opaque (``ff``) and fill colours are semi-transparent (``66``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from parcel_kml.core.constants import MEDIUM_FARM_MAX_HA, SMALL_FARM_MAX_HA


class SizeTier(enum.Enum):
    """Parcel size band derived from its area in hectares.

    Values:
        SMALL:  ``area <= 20``
        MEDIUM: ``20 < area <= 50``
        LARGE:  ``area > 50``
    """

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True, slots=True)
class TierStyle:
    """KML style attached to a size tier.

    Attributes:
        style_id: ``<Style id>`` value.
        line_color: Opaque ``LineStyle`` colour.
        fill_color: Semi-transparent ``PolyStyle`` colour.
    """

    style_id: str
    line_color: str
    fill_color: str

    @property
    def style_url(self) -> str:
        return f"#{self.style_id}"


TIER_STYLES: dict[SizeTier, TierStyle] = {
    SizeTier.SMALL: TierStyle("smallFarm", "ff34d399", "6634d399"),
    SizeTier.MEDIUM: TierStyle("mediumFarm", "ff10b981", "6610b981"),
    SizeTier.LARGE: TierStyle("largeFarm", "ff059669", "66059669"),
}


def tier(area_hectares: float) -> SizeTier:
    """Classify an area in hectares.

    Non-positive and NaN areas fall in ``SMALL``.
    """
    if area_hectares > MEDIUM_FARM_MAX_HA:
        return SizeTier.LARGE
    if area_hectares > SMALL_FARM_MAX_HA:
        return SizeTier.MEDIUM
    return SizeTier.SMALL


def style_for(size_tier: SizeTier) -> TierStyle:
    return TIER_STYLES[size_tier]
