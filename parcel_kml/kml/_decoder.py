"""KML decoder for land parcels.

Extraction rules, per ``<Placemark>`` block:
- the first ``<name>`` (optional, falls back to the configured import name)
- the first ``<coordinates>`` (required)

A well-formed document is walked with lxml, ignoring namespaces,
attributes and comments.  A document lxml rejects is scanned as text
with the legacy regular expressions, so partial or hand-edited files
still yield whatever Placemarks can be read.

One bad Placemark is skipped and reported; only a document with no
Placemark at all fails with ``KmlParseError``.  Areas are always
recomputed from the decoded ring.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from parcel_kml.core.config import DEFAULT_CONFIG
from parcel_kml.geometry.area import area_hectares
from parcel_kml.kml._normalization import parse_coordinates_text
from parcel_kml.kml._validation import KmlParseError
from parcel_kml.models.geometry import InvalidRingError, strip_closing_point, validate_ring
from parcel_kml.models.parcel import ParcelDraft, SkippedItem
from parcel_kml.models.records import DraftRecord

if TYPE_CHECKING:
    from parcel_kml.core.config import KmlExportConfig
    from parcel_kml.models.geometry import Ring

logger = logging.getLogger("parcel_kml.kml")

_PLACEMARK_RE = re.compile(
    r"<(?:[\w.-]+:)?Placemark\b[^>]*>(.*?)</(?:[\w.-]+:)?Placemark\s*>", re.DOTALL
)
_NAME_RE = re.compile(r"<(?:[\w.-]+:)?name\b[^>]*>(.*?)</(?:[\w.-]+:)?name\s*>", re.DOTALL)
_COORDINATES_RE = re.compile(
    r"<(?:[\w.-]+:)?coordinates\b[^>]*>(.*?)</(?:[\w.-]+:)?coordinates\s*>", re.DOTALL
)
_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Outcome of an import.

    Attributes:
        parcels: Drafts decoded from valid Placemarks, in document order.
        skipped: Placemarks that were dropped, with the reason.
    """

    parcels: list[ParcelDraft] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class _RawPlacemark:
    name: str
    coordinates: str | None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def decode_with_report(
    kml: str | bytes,
    *,
    config: KmlExportConfig | None = None,
) -> DecodeResult:
    """Decode a KML document into parcel drafts and report skipped Placemarks.

    Args:
        kml: KML document text (``str``) or raw file content (``bytes``).
        config: Supplies the fallback name for unnamed Placemarks.

    Raises:
        KmlParseError: If the document is empty or contains no Placemark.
    """
    config = config or DEFAULT_CONFIG

    content = kml.encode("utf-8") if isinstance(kml, str) else kml
    if not content.strip():
        raise KmlParseError("KML document is empty")

    blocks = _scan_tree(content)
    if blocks is None:
        blocks = _scan_text(content.decode("utf-8", errors="replace"))

    if not blocks:
        raise KmlParseError("No <Placemark> element found in KML document")

    result = DecodeResult()
    for index, raw in enumerate(blocks):
        name = raw.name or config.imported_parcel_name
        try:
            ring = _decode_ring(raw, name)
        except InvalidRingError as exc:
            logger.warning("Skipping invalid Placemark '%s': %s", name, exc)
            result.skipped.append(
                SkippedItem(index=index, name=name, code=exc.code, message=exc.message)
            )
            continue
        result.parcels.append(
            ParcelDraft(name=name, ring=ring, area_hectares=area_hectares(ring))
        )

    logger.info(
        "Decoded %d parcel(s) from KML | placemarks=%d | skipped=%d",
        len(result.parcels),
        len(blocks),
        len(result.skipped),
    )
    return result


def decode(kml: str | bytes, *, config: KmlExportConfig | None = None) -> list[ParcelDraft]:
    """Decode a KML document into parcel drafts (no owner, no id)."""
    return decode_with_report(kml, config=config).parcels


def decode_records(
    kml: str | bytes,
    *,
    config: KmlExportConfig | None = None,
) -> list[dict[str, object]]:
    """Decode a KML document into ``{name, coordinates: [{lat, lng}], area}`` dicts."""
    return [DraftRecord.from_draft(draft).model_dump() for draft in decode(kml, config=config)]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _decode_ring(raw: _RawPlacemark, name: str) -> Ring:
    """Parse and validate one Placemark's coordinates.

    Raises:
        InvalidRingError: If there are no coordinates or fewer than three
            valid points remain.
    """
    if raw.coordinates is None:
        msg = f"Placemark '{name}' has no <coordinates> element"
        raise InvalidRingError(msg)

    ring, dropped = parse_coordinates_text(raw.coordinates)
    if dropped:
        logger.warning(
            "Dropped %d malformed coordinate token(s) in Placemark '%s'",
            dropped,
            name,
        )
    return validate_ring(strip_closing_point(ring), f"Placemark '{name}'")


def _scan_tree(content: bytes) -> list[_RawPlacemark] | None:
    """Extract Placemark blocks by walking the lxml tree.

    Returns ``None`` when the content is not well-formed XML.
    """
    from lxml import etree  # type: ignore[attr-defined]

    parser = etree.XMLParser(
        resolve_entities=False, no_network=True, huge_tree=False, remove_comments=True
    )
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        logger.warning("KML is not well-formed XML, falling back to text scan: %s", exc)
        return None

    blocks: list[_RawPlacemark] = []
    for placemark in root.iter("{*}Placemark"):
        name_elem = next(placemark.iter("{*}name"), None)
        coords_elem = next(placemark.iter("{*}coordinates"), None)
        name = "".join(name_elem.itertext()).strip() if name_elem is not None else ""
        coordinates = "".join(coords_elem.itertext()) if coords_elem is not None else None
        blocks.append(_RawPlacemark(name=name, coordinates=coordinates))
    return blocks


def _scan_text(text: str) -> list[_RawPlacemark]:
    """Extract Placemark blocks with regular expressions (malformed input)."""
    blocks: list[_RawPlacemark] = []
    for match in _PLACEMARK_RE.finditer(text):
        body = match.group(1)
        name_match = _NAME_RE.search(body)
        coords_match = _COORDINATES_RE.search(body)
        name = _clean_text(name_match.group(1)) if name_match else ""
        coordinates = coords_match.group(1) if coords_match else None
        blocks.append(_RawPlacemark(name=name, coordinates=coordinates))
    return blocks


def _clean_text(raw: str) -> str:
    return html.unescape(_CDATA_RE.sub(r"\1", raw)).strip()
