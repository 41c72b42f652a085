"""Local error taxonomy for synthetic-transit.

The lightcurve generator is pure compute. Numeric boundary drift is clamped
where it happens; the only fault surfaced to callers is invalid orbital or
stellar geometry, which is reported before any computation starts. The
envelope types let downstream applications translate these faults into their
own error formats.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    INVALID_GEOMETRY = "INVALID_GEOMETRY"
    INVALID_DATA = "INVALID_DATA"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


class InvalidGeometryError(ValueError):
    """Raised when a parameter record describes an impossible system.

    Attributes:
        field: Name of the offending parameter (e.g., "period", "rs").
        value: The rejected value.
    """

    def __init__(self, field: str, value: float, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid geometry: {field}={value!r} ({reason})")

    def to_envelope(self) -> ErrorEnvelope:
        return make_error(
            ErrorType.INVALID_GEOMETRY,
            str(self),
            field=self.field,
            value=self.value,
            reason=self.reason,
        )
