"""Transit lightcurve generation.

Exports:
- Generators: generate_synthetic, generate_synthetic_chunked,
              generate_synthetic_from_params
- Validation: validate_geometry
- Derived quantities: compute_derived_parameters, DerivedParameters
"""

from __future__ import annotations

from synthetic_transit.transit.model import (
    DerivedParameters,
    compute_derived_parameters,
    generate_synthetic,
    generate_synthetic_chunked,
    generate_synthetic_from_params,
    validate_geometry,
)

__all__ = [
    # Generators
    "generate_synthetic",
    "generate_synthetic_chunked",
    "generate_synthetic_from_params",
    # Validation
    "validate_geometry",
    # Derived quantities
    "compute_derived_parameters",
    "DerivedParameters",
]
