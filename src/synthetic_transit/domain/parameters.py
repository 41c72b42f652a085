"""Transit model parameter record.

This module provides:
- ModelParameters: Orbital, stellar and limb-darkening inputs for one system

The record is pure data. Construction performs no physical validation so that
callers can represent (and deliberately evaluate) malformed geometry; the
hardened checks live in `synthetic_transit.transit.model.validate_geometry`.
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from synthetic_transit.constants import (
    AU_IN_SOLAR_RADII,
    JUPITER_RADIUS_IN_SOLAR_RADII,
    SMALL_PLANET_LIMIT,
)


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ModelParameters(FrozenModel):
    """Parameters describing a planet on a circular orbit around a limb-darkened star.

    Units follow the conventions used throughout the package: days for times,
    AU for the orbital separation, degrees for inclination, solar radii for the
    star and Jupiter radii for the planet.

    The identification fields (`id`, `name`, `submodel_id`) and the stellar
    `mstar` / `teff` values are carried for downstream bookkeeping only; the
    lightcurve generator never reads them.

    Limb darkening uses the four-coefficient nonlinear law. The constant term
    c0 = 1 - c1 - c2 - c3 - c4 is always derived, never supplied.
    """

    # Pass-through metadata
    id: int = 0
    name: str = ""
    submodel_id: int = 0
    mstar: float | None = Field(default=None, description="Stellar mass (solar masses)")
    teff: float | None = Field(default=None, description="Effective temperature (K)")

    # Orbit
    period: float = Field(description="Orbital period (days)")
    epoch: float = Field(description="Time of mid-transit (days)")
    a: float = Field(description="Star-planet separation (AU)")
    i: float = Field(description="Orbital inclination (degrees, 90 = edge-on)")

    # Radii
    rs: float = Field(description="Stellar radius (solar radii)")
    rp: float = Field(description="Planetary radius (Jupiter radii)")

    # Nonlinear limb darkening
    c1: float = 0.0
    c2: float = 0.0
    c3: float = 0.0
    c4: float = 0.0

    @property
    def c0(self) -> float:
        """Derived constant limb-darkening term."""
        return 1.0 - self.c1 - self.c2 - self.c3 - self.c4

    def limb_darkening_coefficients(self) -> tuple[float, float, float, float, float]:
        """Return (c0, c1, c2, c3, c4); the tuple always sums to 1."""
        return (self.c0, self.c1, self.c2, self.c3, self.c4)

    @property
    def radius_ratio(self) -> float:
        """Planet-to-star radius ratio p = Rp/Rs in common units.

        Non-positive stellar radii yield inf/nan rather than raising.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.rp * JUPITER_RADIUS_IN_SOLAR_RADII) / np.float64(self.rs))

    @property
    def a_over_rs(self) -> float:
        """Orbital separation in units of the stellar radius."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.a * AU_IN_SOLAR_RADII) / np.float64(self.rs))

    @property
    def impact_parameter(self) -> float:
        """Sky-projected separation at mid-transit, b = (a/Rs) cos(i)."""
        return float(abs(self.a_over_rs * np.cos(np.deg2rad(self.i))))

    @property
    def is_small_planet(self) -> bool:
        """Whether the small-planet approximation holds (p < 0.1)."""
        return bool(self.radius_ratio < SMALL_PLANET_LIMIT)
