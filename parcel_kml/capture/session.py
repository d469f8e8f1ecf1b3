"""Interactive polygon capture.

A ``PolygonCaptureSession`` wraps one in-progress edit of one parcel
boundary.  It is owned by a single editing flow; editing several parcels
at once means one session per parcel.

State machine::

    EMPTY ──start_draw──▶ DRAWING ──close_ring──▶ FINALIZED
                            ▲  │ add/move/insert/remove/translate │
                            └──┘◀────────────edit────────────────┘
    any ──clear──▶ EMPTY          any ──start_draw──▶ DRAWING (ring discarded)

Only one polygon is active at a time: ``start_draw`` on a session that
already holds a ring discards it instead of merging.  Every mutating call
recomputes the area and centroid and returns them as ``CaptureFeedback``
for live display.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

from parcel_kml.core.exceptions import ValidationError
from parcel_kml.geometry.area import area_hectares
from parcel_kml.geometry.centroid import centroid
from parcel_kml.models.geometry import Point, Ring, as_ring, is_degenerate, validate_ring

logger = logging.getLogger("parcel_kml.capture")


class CaptureStateError(ValidationError):
    """Raised when an operation is not allowed in the session's current state."""

    default_stage = "capture"
    default_code = "CAPTURE_STATE_INVALID"


class CaptureState(enum.Enum):
    """Lifecycle state of a capture session.

    Values:
        EMPTY:     No polygon.
        DRAWING:   Vertices are being added or edited.
        FINALIZED: Ring closed with at least three vertices.
    """

    EMPTY = "empty"
    DRAWING = "drawing"
    FINALIZED = "finalized"


@dataclass(frozen=True, slots=True)
class CaptureFeedback:
    """Live measurements after a mutation.

    Attributes:
        area_hectares: Area of the current ring, ``0.0`` while degenerate.
        centroid: Representative point, ``None`` while degenerate.
        vertex_count: Number of vertices in the current ring.
        state: Session state after the mutation.
    """

    area_hectares: float
    centroid: Point | None
    vertex_count: int
    state: CaptureState


class PolygonCaptureSession:
    """Single-owner editing session for one parcel boundary.

    Args:
        initial_ring: Existing boundary to load.  A usable ring starts the
            session in ``FINALIZED``; otherwise the session starts ``EMPTY``.
        area_fn: Area operation used for feedback; defaults to the
            spherical-excess ``area_hectares``.  Pass
            ``drawing_area_hectares`` to show the drawing tool figure.
    """

    def __init__(
        self,
        initial_ring: Ring | None = None,
        *,
        area_fn: Callable[[Ring], float] = area_hectares,
    ) -> None:
        self._area_fn = area_fn
        self._vertices: list[Point] = []
        self._state = CaptureState.EMPTY
        self._area = 0.0
        self._centroid: Point | None = None

        if initial_ring:
            ring = as_ring(initial_ring)
            if not is_degenerate(ring):
                self._vertices = list(ring)
                self._state = CaptureState.FINALIZED
                self._recompute()

    # -- read-only view -------------------------------------------------

    @property
    def state(self) -> CaptureState:
        return self._state

    @property
    def ring(self) -> Ring:
        return tuple(self._vertices)

    @property
    def area_hectares(self) -> float:
        return self._area

    @property
    def centroid(self) -> Point | None:
        return self._centroid

    @property
    def finalized_ring(self) -> Ring:
        """The closed ring, ready to store on a ``LandParcel``.

        Raises:
            CaptureStateError: If the session is not ``FINALIZED``.
        """
        self._require(CaptureState.FINALIZED, "read the finalized ring")
        return tuple(self._vertices)

    # -- transitions ----------------------------------------------------

    def start_draw(self) -> CaptureFeedback:
        """Begin a new polygon, discarding any current one."""
        if self._vertices:
            logger.info("Discarding %d-vertex ring to start a new draw", len(self._vertices))
        self._vertices = []
        self._state = CaptureState.DRAWING
        return self._recompute()

    def add_vertex(self, point: Point) -> CaptureFeedback:
        self._require(CaptureState.DRAWING, "add a vertex")
        self._vertices.append(point)
        return self._recompute()

    def close_ring(self) -> CaptureFeedback:
        """Finalize the ring.

        Raises:
            InvalidRingError: If fewer than three vertices were captured;
                the session stays in ``DRAWING``.
        """
        self._require(CaptureState.DRAWING, "close the ring")
        validate_ring(tuple(self._vertices), "closing the captured polygon")
        self._state = CaptureState.FINALIZED
        return self._recompute()

    def edit(self) -> CaptureFeedback:
        """Re-open a finalized ring for vertex editing."""
        self._require(CaptureState.FINALIZED, "edit")
        self._state = CaptureState.DRAWING
        return self._recompute()

    def clear(self) -> CaptureFeedback:
        self._vertices = []
        self._state = CaptureState.EMPTY
        return self._recompute()

    # -- vertex editing (DRAWING only) ----------------------------------

    def move_vertex(self, index: int, point: Point) -> CaptureFeedback:
        """Move (drag) one vertex.

        Raises:
            IndexError: If ``index`` does not name an existing vertex.
        """
        self._require(CaptureState.DRAWING, "move a vertex")
        self._check_index(index)
        self._vertices[index] = point
        return self._recompute()

    def insert_vertex(self, index: int, point: Point) -> CaptureFeedback:
        """Insert a vertex before position ``index`` (``len`` appends)."""
        self._require(CaptureState.DRAWING, "insert a vertex")
        if not 0 <= index <= len(self._vertices):
            msg = f"Insert position {index} out of range for {len(self._vertices)} vertices"
            raise IndexError(msg)
        self._vertices.insert(index, point)
        return self._recompute()

    def remove_vertex(self, index: int) -> CaptureFeedback:
        self._require(CaptureState.DRAWING, "remove a vertex")
        self._check_index(index)
        del self._vertices[index]
        return self._recompute()

    def translate(self, d_lat: float, d_lng: float) -> CaptureFeedback:
        """Drag the whole polygon by an offset in degrees."""
        self._require(CaptureState.DRAWING, "move the polygon")
        self._vertices = [Point(lat=p.lat + d_lat, lng=p.lng + d_lng) for p in self._vertices]
        return self._recompute()

    # -- internals ------------------------------------------------------

    def _require(self, state: CaptureState, action: str) -> None:
        if self._state is not state:
            msg = f"Cannot {action} while {self._state.value}; session must be {state.value}"
            raise CaptureStateError(msg)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._vertices):
            msg = f"Vertex index {index} out of range for {len(self._vertices)} vertices"
            raise IndexError(msg)

    def _recompute(self) -> CaptureFeedback:
        ring = tuple(self._vertices)
        self._area = self._area_fn(ring)
        self._centroid = centroid(ring)
        return CaptureFeedback(
            area_hectares=self._area,
            centroid=self._centroid,
            vertex_count=len(ring),
            state=self._state,
        )
