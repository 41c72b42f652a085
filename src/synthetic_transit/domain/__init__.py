"""Domain models for synthetic-transit."""

from synthetic_transit.domain.parameters import ModelParameters

__all__ = [
    "ModelParameters",
]
