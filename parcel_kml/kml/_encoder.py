"""KML 2.2 encoder for land parcels.

Builds the export document with lxml: a fixed document header, one
``<Style>`` per size tier, and one ``<Placemark>`` per usable parcel.
A parcel is skipped and reported, never failing the export, when its
ring is degenerate or non-finite, when its text cannot be written as
XML, or (for boundary records) when the record does not match its
schema.  The same input always serialises to the same bytes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from parcel_kml.core.config import DEFAULT_CONFIG
from parcel_kml.geometry.classification import SizeTier, style_for
from parcel_kml.kml._constants import ALTITUDE_MODE, EXTRUDE, KML_NAMESPACE
from parcel_kml.kml._normalization import build_description_html, format_coordinates
from parcel_kml.kml._validation import KmlEncodeError
from parcel_kml.models.geometry import InvalidRingError, validate_ring
from parcel_kml.models.parcel import SkippedItem
from parcel_kml.models.records import RecordValidationError, parse_parcel_record

if TYPE_CHECKING:
    from lxml.etree import _Element

    from parcel_kml.core.config import KmlExportConfig
    from parcel_kml.geometry.classification import TierStyle
    from parcel_kml.models.parcel import LandParcel

logger = logging.getLogger("parcel_kml.kml")


@dataclass(frozen=True, slots=True)
class EncodeResult:
    """Outcome of an export.

    Attributes:
        document: The serialised KML document.
        placemark_count: Number of parcels written as Placemarks.
        skipped: Items left out of the document, with the reason, ordered
            by their position in the input.
    """

    document: str
    placemark_count: int = 0
    skipped: list[SkippedItem] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def encode_with_report(
    parcels: Iterable[LandParcel],
    *,
    config: KmlExportConfig | None = None,
) -> EncodeResult:
    """Encode parcels into a KML document and report skipped parcels.

    Args:
        parcels: Parcels to export, in document order.
        config: Export labels and styling; defaults to ``DEFAULT_CONFIG``.

    Returns:
        An ``EncodeResult``.  An empty input yields a valid document with
        the three tier styles and no Placemarks.
    """
    return _encode_indexed(enumerate(parcels), config or DEFAULT_CONFIG, [])


def encode(parcels: Iterable[LandParcel], *, config: KmlExportConfig | None = None) -> str:
    """Encode parcels into a KML 2.2 document string."""
    return encode_with_report(parcels, config=config).document


def encode_parcel(parcel: LandParcel, *, config: KmlExportConfig | None = None) -> str:
    """Encode a single parcel into its own KML document."""
    return encode([parcel], config=config)


def encode_records_with_report(
    records: Iterable[Mapping[str, object]],
    *,
    config: KmlExportConfig | None = None,
) -> EncodeResult:
    """Encode camelCase parcel records (as served by the REST layer).

    Each record is validated with ``ParcelRecord``; its ``area`` is
    ignored and recomputed from the coordinates.  A record that does not
    match the schema is skipped with code ``RECORD_VALIDATION_FAILED``;
    skip indices refer to positions in ``records``.
    """
    skipped: list[SkippedItem] = []
    indexed: list[tuple[int, LandParcel]] = []
    for index, record in enumerate(records):
        try:
            indexed.append((index, parse_parcel_record(record, index=index).to_parcel()))
        except RecordValidationError as exc:
            name = record.get("name") if isinstance(record, Mapping) else None
            logger.warning("Skipping parcel record %d: %s", index, exc)
            skipped.append(
                SkippedItem(
                    index=index,
                    name=name if isinstance(name, str) else "",
                    code=exc.code,
                    message=exc.message,
                )
            )

    return _encode_indexed(indexed, config or DEFAULT_CONFIG, skipped)


def encode_records(
    records: Iterable[Mapping[str, object]],
    *,
    config: KmlExportConfig | None = None,
) -> str:
    """Encode camelCase parcel records, skipping the malformed ones."""
    return encode_records_with_report(records, config=config).document


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _encode_indexed(
    items: Iterable[tuple[int, LandParcel]],
    config: KmlExportConfig,
    skipped: list[SkippedItem],
) -> EncodeResult:
    from lxml import etree  # type: ignore[attr-defined]

    root: _Element = etree.Element(_tag("kml"), nsmap={None: KML_NAMESPACE})
    document = _sub(root, "Document")
    _sub(document, "name", config.document_name)
    _sub(document, "description", config.document_description)

    for size_tier in SizeTier:
        _append_style(document, style_for(size_tier), config.line_width)

    placemark_count = 0
    for index, parcel in items:
        try:
            validate_ring(parcel.ring, f"parcel '{parcel.id}'")
            placemark = _build_placemark(parcel, config)
        except (InvalidRingError, KmlEncodeError) as exc:
            logger.warning("Skipping parcel '%s' (%r): %s", parcel.id, parcel.name, exc)
            skipped.append(
                SkippedItem(index=index, name=parcel.name, code=exc.code, message=exc.message)
            )
            continue
        document.append(placemark)
        placemark_count += 1

    text = etree.tostring(
        root, xml_declaration=True, encoding="UTF-8", pretty_print=True
    ).decode("utf-8")

    skipped.sort(key=lambda item: item.index)
    logger.info(
        "Encoded %d parcel(s) to KML | skipped=%d",
        placemark_count,
        len(skipped),
    )
    return EncodeResult(document=text, placemark_count=placemark_count, skipped=skipped)


def _tag(name: str) -> str:
    return f"{{{KML_NAMESPACE}}}{name}"


def _sub(parent: _Element, name: str, text: object = None) -> _Element:
    from lxml import etree  # type: ignore[attr-defined]

    elem = etree.SubElement(parent, _tag(name))
    if text is not None:
        elem.text = text  # type: ignore[assignment]
    return elem


def _append_style(document: _Element, style: TierStyle, line_width: int) -> None:
    style_elem = _sub(document, "Style")
    style_elem.set("id", style.style_id)

    line_style = _sub(style_elem, "LineStyle")
    _sub(line_style, "color", style.line_color)
    _sub(line_style, "width", str(line_width))

    poly_style = _sub(style_elem, "PolyStyle")
    _sub(poly_style, "color", style.fill_color)


def _build_placemark(parcel: LandParcel, config: KmlExportConfig) -> _Element:
    """Build a detached ``<Placemark>`` for one parcel.

    Raises:
        KmlEncodeError: If a text field holds characters XML cannot carry.
    """
    from lxml import etree  # type: ignore[attr-defined]

    placemark = etree.Element(_tag("Placemark"), nsmap={None: KML_NAMESPACE})
    try:
        _sub(placemark, "name", parcel.name or config.default_parcel_name)
        _sub(placemark, "description", etree.CDATA(build_description_html(parcel, config)))
    except ValueError as exc:
        msg = f"Parcel '{parcel.id}' has text that cannot be written as XML: {exc}"
        raise KmlEncodeError(msg) from exc
    _sub(placemark, "styleUrl", style_for(parcel.tier).style_url)

    polygon = _sub(placemark, "Polygon")
    _sub(polygon, "extrude", EXTRUDE)
    _sub(polygon, "altitudeMode", ALTITUDE_MODE)
    outer = _sub(polygon, "outerBoundaryIs")
    linear_ring = _sub(outer, "LinearRing")
    _sub(linear_ring, "coordinates", format_coordinates(parcel.ring))
    return placemark
