"""Synthetic small-planet transit lightcurves.

Generates idealized, normalized lightcurves for a planet on a circular orbit
in front of a limb-darkened star (Mandel & Agol 2002, small-planet
approximation, four-coefficient nonlinear limb darkening).
"""

from __future__ import annotations

from synthetic_transit.config import GeneratorOptions
from synthetic_transit.domain.parameters import ModelParameters
from synthetic_transit.errors import ErrorEnvelope, ErrorType, InvalidGeometryError
from synthetic_transit.transit.model import (
    DerivedParameters,
    compute_derived_parameters,
    generate_synthetic,
    generate_synthetic_chunked,
    generate_synthetic_from_params,
    validate_geometry,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ModelParameters",
    "GeneratorOptions",
    "generate_synthetic",
    "generate_synthetic_chunked",
    "generate_synthetic_from_params",
    "validate_geometry",
    "compute_derived_parameters",
    "DerivedParameters",
    "ErrorEnvelope",
    "ErrorType",
    "InvalidGeometryError",
]
