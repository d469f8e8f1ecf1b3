"""Tests for the parcel exception taxonomy.

Every domain error must expose a category, a stable code and stage, and
a structured ``to_error_dict()`` payload.
"""

from __future__ import annotations

import pytest

from parcel_kml.capture import CaptureStateError
from parcel_kml.core.config import ConfigValidationError
from parcel_kml.core.exceptions import (
    ContractError,
    ParcelError,
    PermanentError,
    ValidationError,
)
from parcel_kml.kml import PARSE_FAILED_MESSAGE, KmlEncodeError, KmlParseError
from parcel_kml.models.geometry import InvalidRingError
from parcel_kml.models.records import RecordValidationError


class TestCategories:
    @pytest.mark.parametrize(
        ("exc", "category"),
        [
            (ValidationError("x"), "validation"),
            (PermanentError("x"), "permanent"),
            (ContractError("x"), "contract"),
            (ParcelError("x"), "permanent"),
        ],
    )
    def test_category(self, exc: ParcelError, category: str) -> None:
        assert exc.category == category

    def test_explicit_stage_and_code_override_defaults(self) -> None:
        exc = InvalidRingError("bad", stage="kml_encode", code="CUSTOM")
        assert exc.stage == "kml_encode"
        assert exc.code == "CUSTOM"


class TestDomainErrors:
    @pytest.mark.parametrize(
        ("exc", "base", "stage", "code"),
        [
            (InvalidRingError("r"), ValidationError, "geometry", "INVALID_RING"),
            (CaptureStateError("s"), ValidationError, "capture", "CAPTURE_STATE_INVALID"),
            (KmlParseError("d"), PermanentError, "kml_decode", "KML_PARSE_FAILED"),
            (KmlEncodeError("e"), ValidationError, "kml_encode", "KML_ENCODE_FAILED"),
            (RecordValidationError("c"), ContractError, "records", "RECORD_VALIDATION_FAILED"),
            (
                ConfigValidationError("K", 0, "m"),
                ValidationError,
                "config",
                "CONFIG_VALIDATION_FAILED",
            ),
        ],
    )
    def test_codes_and_stages(
        self, exc: ParcelError, base: type[ParcelError], stage: str, code: str
    ) -> None:
        assert isinstance(exc, base)
        assert exc.stage == stage
        assert exc.code == code

    def test_kml_parse_error_message_and_detail(self) -> None:
        exc = KmlParseError("No <Placemark> element found in KML document")
        assert str(exc) == PARSE_FAILED_MESSAGE
        assert exc.detail == "No <Placemark> element found in KML document"

    def test_config_error_message(self) -> None:
        exc = ConfigValidationError("PARCEL_KML_LINE_WIDTH", 0, "must be > 0 (pixels)")
        assert str(exc) == "Invalid configuration PARCEL_KML_LINE_WIDTH=0: must be > 0 (pixels)"


class TestErrorDict:
    def test_stable_keys(self) -> None:
        payload = InvalidRingError("Ring has only 2 point(s)").to_error_dict()
        assert payload == {
            "category": "validation",
            "code": "INVALID_RING",
            "stage": "geometry",
            "message": "Ring has only 2 point(s)",
        }

    def test_kml_parse_error_payload(self) -> None:
        payload = KmlParseError("empty").to_error_dict()
        assert payload["category"] == "permanent"
        assert payload["message"] == PARSE_FAILED_MESSAGE
