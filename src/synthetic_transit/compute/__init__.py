"""Pure-compute building blocks of the transit model.

This package contains ONLY numpy operations - no I/O, no global state.

Exports:
- Geometry: orbital_phase, projected_separation, is_foreground
- Limb darkening: derive_c0, nonlinear_coefficients, omega_normalization,
                  intensity_profile, cumulative_intensity, mean_occulted_intensity
- Occultation: overlap_area, small_planet_flux
"""

from __future__ import annotations

from synthetic_transit.compute.geometry import (
    is_foreground,
    orbital_phase,
    projected_separation,
)
from synthetic_transit.compute.limb_darkening import (
    cumulative_intensity,
    derive_c0,
    intensity_profile,
    mean_occulted_intensity,
    nonlinear_coefficients,
    omega_normalization,
)
from synthetic_transit.compute.occultation import overlap_area, small_planet_flux

__all__ = [
    # Geometry
    "orbital_phase",
    "projected_separation",
    "is_foreground",
    # Limb darkening
    "derive_c0",
    "nonlinear_coefficients",
    "omega_normalization",
    "intensity_profile",
    "cumulative_intensity",
    "mean_occulted_intensity",
    # Occultation
    "overlap_area",
    "small_planet_flux",
]
