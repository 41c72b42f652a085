"""Small-planet occultation flux (Mandel & Agol 2002, eq. 8).

For p = Rp/Rs << 1 the stellar intensity is nearly constant behind the
planet, so the blocked flux is the overlap area times the mean occulted
intensity I*(z). During ingress/egress the stellar limb is treated as a
straight chord and the overlap is a circular segment of the planet:

    F = 1 - I*(z) / (4 pi Omega) * [p^2 arccos((z-1)/p) - (z-1) sqrt(p^2 - (z-1)^2)]

With the arccos argument clamped to [-1, 1] and the sqrt argument clamped
at 0, the bracket becomes pi p^2 once the planet is fully on the disk, so
the same expression covers both regimes and is continuous at z = 1 - p.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from synthetic_transit.compute.limb_darkening import (
    mean_occulted_intensity,
    omega_normalization,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def overlap_area(z: ArrayLike, p: float) -> NDArray[np.float64]:
    """Area of the planet disk lying inside the stellar limb (small-planet form).

    Returns pi p^2 for z <= 1 - p and 0 for z >= 1 + p.
    """
    d = np.asarray(z, dtype=np.float64) - 1.0
    cos_arg = np.clip(d / p, -1.0, 1.0)
    chord = np.sqrt(np.clip(p * p - d * d, 0.0, None))
    return p * p * np.arccos(cos_arg) - d * chord


def small_planet_flux(
    z: ArrayLike,
    p: float,
    coefficients: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Normalized stellar flux for a planet at projected separation z.

    Args:
        z: Projected separations in stellar radii. +inf marks samples where
            the planet cannot occult the star.
        p: Planet-to-star radius ratio
        coefficients: (c0, c1, c2, c3, c4) of the nonlinear law

    Returns:
        Flux normalized to exactly 1.0 where the disks do not overlap.
        NaN separations (or a non-finite radius ratio) propagate as NaN.
    """
    z_arr = np.asarray(z, dtype=np.float64)
    flux = np.ones_like(z_arr)

    if p == 0.0:
        return flux
    if not np.isfinite(p):
        return np.full_like(z_arr, np.nan)

    flux[np.isnan(z_arr)] = np.nan
    overlap = z_arr < 1.0 + p
    if not np.any(overlap):
        return flux

    z_in = z_arr[overlap]
    omega = omega_normalization(coefficients)
    i_star = mean_occulted_intensity(z_in, p, coefficients)
    blocked = i_star * overlap_area(z_in, p) / (4.0 * np.pi * omega)
    # Planets larger than the star can block more than the whole disk
    flux[overlap] = np.maximum(1.0 - blocked, 0.0)
    return flux
