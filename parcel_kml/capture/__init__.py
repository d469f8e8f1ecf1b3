"""Interactive polygon capture sessions."""

from parcel_kml.capture.session import (
    CaptureFeedback,
    CaptureState,
    CaptureStateError,
    PolygonCaptureSession,
)

__all__ = [
    "CaptureFeedback",
    "CaptureState",
    "CaptureStateError",
    "PolygonCaptureSession",
]
