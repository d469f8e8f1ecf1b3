"""Unified parcel exception taxonomy.

Every domain exception inherits from ``ParcelError`` and carries
structured context fields so callers can report failures consistently,
whether a single batch item was skipped or a whole operation failed.

Taxonomy categories
-------------------
- ``ValidationError``: input violations (degenerate rings, bad state).
- ``PermanentError``: unrecoverable failures (unreadable KML document).
- ``ContractError``: boundary records that do not match the schema.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and API responses.
"""

from __future__ import annotations


class ParcelError(Exception):
    """Base exception for all parcel-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Subsystem where the error occurred
            (e.g. ``"kml_decode"``, ``"capture"``).
        code: Machine-readable error code (e.g. ``"KML_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ParcelError):
    """Input or domain-model validation failure."""


class PermanentError(ParcelError):
    """Unrecoverable failure for the current operation."""


class ContractError(ParcelError):
    """Boundary record does not match the expected schema."""
