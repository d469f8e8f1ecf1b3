"""KML export configuration.

All values have defaults matching the portal's national export (Arabic
labels). The codec never reads the environment itself; callers that want
deployment overrides load them once with ``KmlExportConfig.from_env()``
and pass the result through the ``config=`` keyword.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, so bad configuration is caught at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from parcel_kml.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class KmlExportConfig:
    """Immutable KML export/import configuration.

    Attributes:
        document_name: ``<Document><name>`` of every export.
        document_description: ``<Document><description>`` of every export.
        default_parcel_name: Placemark name used when a parcel has none.
        imported_parcel_name: Draft name used when a Placemark has no ``<name>``.
        default_owner_label: Owner label used when a parcel has no owner.
        unknown_value_label: Shown for a missing parcel name or location.
        area_unit_label: Unit suffix printed after the area.
        line_width: ``LineStyle`` width for every size tier.
    """

    document_name: str = "منصة الفلاح - الأراضي الفلاحية"
    document_description: str = "خريطة الأراضي الفلاحية المسجلة في منصة الفلاح الوطنية"
    default_parcel_name: str = "أرض فلاحية"
    imported_parcel_name: str = "أرض مستوردة من KML"
    default_owner_label: str = "فلاح"
    unknown_value_label: str = "غير محدد"
    area_unit_label: str = "هكتار"
    line_width: int = 3

    @classmethod
    def from_env(cls) -> KmlExportConfig:
        """Load and validate configuration from ``PARCEL_KML_*`` variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                required label is empty.
            ValueError: If ``PARCEL_KML_LINE_WIDTH`` is not an integer.
        """
        defaults = cls()
        config = cls(
            document_name=os.getenv("PARCEL_KML_DOCUMENT_NAME", defaults.document_name),
            document_description=os.getenv(
                "PARCEL_KML_DOCUMENT_DESCRIPTION", defaults.document_description
            ),
            default_parcel_name=os.getenv(
                "PARCEL_KML_DEFAULT_PARCEL_NAME", defaults.default_parcel_name
            ),
            imported_parcel_name=os.getenv(
                "PARCEL_KML_IMPORTED_PARCEL_NAME", defaults.imported_parcel_name
            ),
            default_owner_label=os.getenv(
                "PARCEL_KML_DEFAULT_OWNER_LABEL", defaults.default_owner_label
            ),
            unknown_value_label=os.getenv(
                "PARCEL_KML_UNKNOWN_VALUE_LABEL", defaults.unknown_value_label
            ),
            area_unit_label=os.getenv("PARCEL_KML_AREA_UNIT_LABEL", defaults.area_unit_label),
            line_width=int(os.getenv("PARCEL_KML_LINE_WIDTH", str(defaults.line_width))),
        )
        _validate(config)
        return config


DEFAULT_CONFIG = KmlExportConfig()


def _validate(config: KmlExportConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if config.line_width <= 0:
        raise ConfigValidationError(
            "PARCEL_KML_LINE_WIDTH",
            config.line_width,
            "must be > 0 (pixels)",
        )

    required = {
        "PARCEL_KML_DOCUMENT_NAME": config.document_name,
        "PARCEL_KML_DEFAULT_PARCEL_NAME": config.default_parcel_name,
        "PARCEL_KML_IMPORTED_PARCEL_NAME": config.imported_parcel_name,
        "PARCEL_KML_DEFAULT_OWNER_LABEL": config.default_owner_label,
    }
    for key, value in required.items():
        if not value.strip():
            raise ConfigValidationError(key, value, "must not be empty")
