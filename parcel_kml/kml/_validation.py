"""Validation helpers for the KML codec.

Responsibilities:
- Decode-level failure (no Placemark found anywhere)
- Encode-level failure of one Placemark (text XML cannot carry)
- Per-coordinate checks: finite values inside WGS 84 bounds
"""

from __future__ import annotations

import math

from parcel_kml.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from parcel_kml.core.exceptions import PermanentError, ValidationError
from parcel_kml.kml._constants import PARSE_FAILED_MESSAGE


class KmlParseError(PermanentError):
    """Raised when no Placemark can be extracted from a KML document.

    ``str(exc)`` is the user-facing message; ``detail`` holds the
    technical reason for logs.
    """

    default_stage = "kml_decode"
    default_code = "KML_PARSE_FAILED"

    def __init__(self, detail: str = "", message: str = PARSE_FAILED_MESSAGE) -> None:
        self.detail = detail
        super().__init__(message)


def is_valid_coordinate(lng: float, lat: float) -> bool:
    """Whether a decoded ``(lng, lat)`` pair is finite and inside WGS 84 bounds."""
    if not (math.isfinite(lng) and math.isfinite(lat)):
        return False
    return MIN_LONGITUDE <= lng <= MAX_LONGITUDE and MIN_LATITUDE <= lat <= MAX_LATITUDE


class KmlEncodeError(ValidationError):
    """Raised when a parcel's text cannot be written into a KML document.

    lxml rejects NULL bytes and control characters that XML 1.0 forbids.
    """

    default_stage = "kml_encode"
    default_code = "KML_ENCODE_FAILED"
