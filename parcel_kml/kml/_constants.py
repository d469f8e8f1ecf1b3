"""Shared constants for the KML codec."""

from __future__ import annotations

# KML 2.2 namespace
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

# Polygon rendering
EXTRUDE = "1"
ALTITUDE_MODE = "clampToGround"
ALTITUDE = "0"

# User-facing message for a document with no readable Placemark
PARSE_FAILED_MESSAGE = "فشل في تحليل ملف KML"

# Description field labels
LABEL_HOLDING = "المستغلة"
LABEL_LOCATION = "الموقع"
LABEL_AREA = "المساحة"
LABEL_PHONE = "الهاتف"
LABEL_REGION = "الولاية"
LABEL_SOIL_TYPE = "نوع التربة"
