"""KML 2.2 interchange for land parcels.

Encodes parcels (with owner metadata) into the portal's KML export and
decodes externally supplied KML back into parcel drafts.

The codec is split into focused stages:
- **_encoder**: lxml document builder (styles, Placemarks, CDATA descriptions)
- **_decoder**: lxml tree walk with a text-scan fallback for malformed files
- **_normalization**: ``lng,lat,0`` coordinate text and description HTML
- **_validation**: decode-level error and coordinate bounds

Failure policy:
- A degenerate parcel or a bad Placemark is skipped, logged, and reported
  through the ``*_with_report`` variants; the batch continues.
- Only a document with no Placemark at all raises ``KmlParseError``.
"""

from __future__ import annotations

from parcel_kml.kml._constants import KML_NAMESPACE, PARSE_FAILED_MESSAGE
from parcel_kml.kml._decoder import DecodeResult, decode, decode_records, decode_with_report
from parcel_kml.kml._encoder import (
    EncodeResult,
    encode,
    encode_parcel,
    encode_records,
    encode_records_with_report,
    encode_with_report,
)
from parcel_kml.kml._normalization import format_coordinates, parse_coordinates_text
from parcel_kml.kml._validation import KmlEncodeError, KmlParseError

__all__ = [
    "KML_NAMESPACE",
    "PARSE_FAILED_MESSAGE",
    "DecodeResult",
    "EncodeResult",
    "KmlEncodeError",
    "KmlParseError",
    "decode",
    "decode_records",
    "decode_with_report",
    "encode",
    "encode_parcel",
    "encode_records",
    "encode_records_with_report",
    "encode_with_report",
    "format_coordinates",
    "parse_coordinates_text",
]
