"""Nonlinear limb-darkening law and its closed-form disk integrals.

The stellar intensity profile follows the four-coefficient law of
Claret (2000) as used by Mandel & Agol (2002, eq. 6):

    I(r) = 1 - sum_{n=1}^{4} c_n (1 - mu^{n/2}),    mu = sqrt(1 - r^2)

which, with c0 = 1 - c1 - c2 - c3 - c4, is the same as
I(r) = sum_{n=0}^{4} c_n mu^{n/2}. Every quantity here is normalized so that
I(0) = 1.

Integrating annuli in u = 1 - r^2 gives a closed form for the enclosed
intensity

    G(r) = integral_0^r I(s) 2s ds = sum_n 4 c_n / (n + 4) * (1 - mu^{(n+4)/2})

so G(1) = 4 Omega with Omega = sum_n c_n / (n + 4), and the disk-integrated
flux of the unocculted star is pi * G(1).

References:
- Mandel & Agol 2002, ApJ, 580, L171
- Claret 2000, A&A, 363, 1081
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

# Powers n/2 for n = 0..4
_MU_EXPONENTS = np.arange(5, dtype=np.float64) / 2.0
# Weights 4/(n+4) for n = 0..4
_ENCLOSED_WEIGHTS = 4.0 / (np.arange(5, dtype=np.float64) + 4.0)

# Below z = _CENTRAL_Z_FRACTION * p the full-overlap annulus average is
# replaced by its analytic z -> 0 limit I(p).
_CENTRAL_Z_FRACTION = 1e-6


def derive_c0(c1: float, c2: float, c3: float, c4: float) -> float:
    """Constant term of the nonlinear law, c0 = 1 - c1 - c2 - c3 - c4."""
    return 1.0 - c1 - c2 - c3 - c4


def nonlinear_coefficients(coeffs: Sequence[float]) -> NDArray[np.float64]:
    """Build the full (c0, c1, c2, c3, c4) vector from (c1, c2, c3, c4).

    Raises:
        ValueError: If `coeffs` does not hold exactly four values
    """
    c = np.asarray(coeffs, dtype=np.float64).ravel()
    if c.size != 4:
        raise ValueError(f"Expected 4 limb-darkening coefficients (c1..c4), got {c.size}")
    c0 = derive_c0(float(c[0]), float(c[1]), float(c[2]), float(c[3]))
    return np.concatenate(([c0], c))


def omega_normalization(coefficients: NDArray[np.float64]) -> float:
    """Omega = sum_{n=0}^{4} c_n / (n + 4); equals 1/4 for a uniform disk."""
    return float(np.sum(coefficients / (np.arange(5) + 4.0)))


def intensity_profile(r: ArrayLike, coefficients: NDArray[np.float64]) -> NDArray[np.float64]:
    """Normalized stellar intensity I(r) at radial coordinate r.

    r is clipped to [0, 1], so points off the disk take the limb value c0.
    """
    r_arr = np.clip(np.asarray(r, dtype=np.float64), 0.0, 1.0)
    mu = np.sqrt(1.0 - r_arr**2)
    return np.sum(
        coefficients[:, np.newaxis] * mu.ravel()[np.newaxis, :] ** _MU_EXPONENTS[:, np.newaxis],
        axis=0,
    ).reshape(r_arr.shape)


def cumulative_intensity(r: ArrayLike, coefficients: NDArray[np.float64]) -> NDArray[np.float64]:
    """Enclosed intensity G(r) = integral_0^r I(s) 2s ds, with r clipped to [0, 1]."""
    r_arr = np.clip(np.asarray(r, dtype=np.float64), 0.0, 1.0)
    mu = np.sqrt(1.0 - r_arr**2).ravel()
    terms = 1.0 - mu[np.newaxis, :] ** (_MU_EXPONENTS[:, np.newaxis] + 2.0)
    weighted = (coefficients * _ENCLOSED_WEIGHTS)[:, np.newaxis] * terms
    return np.sum(weighted, axis=0).reshape(r_arr.shape)


def mean_occulted_intensity(
    z: ArrayLike,
    p: float,
    coefficients: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Mean stellar intensity I*(z) behind a small planet.

    Mandel & Agol (2002) average the intensity over the annulus swept by the
    planet:

    - full overlap (z <= 1 - p): I* = (4zp)^-1 integral_{z-p}^{z+p} I(r) 2r dr,
      which tends to I(p) as z -> 0;
    - partial overlap (z > 1 - p): I* = (1 - a)^-1 integral_{r0}^{1} I(r) 2r dr,
      r0 = max(z - p, 0), a = r0^2. Once the planet covers the stellar
      centre the annulus is the whole disk.

    Args:
        z: Projected separations in stellar radii
        p: Planet-to-star radius ratio (> 0)
        coefficients: (c0, c1, c2, c3, c4)

    Returns:
        I*(z), same shape as `z`
    """
    z_arr = np.asarray(z, dtype=np.float64)
    inner = np.abs(z_arr - p)
    g_inner = cumulative_intensity(inner, coefficients)
    partial_inner = np.maximum(z_arr - p, 0.0)
    g_total = 4.0 * omega_normalization(coefficients)

    with np.errstate(divide="ignore", invalid="ignore"):
        full = (cumulative_intensity(z_arr + p, coefficients) - g_inner) / (4.0 * z_arr * p)
        partial = (g_total - cumulative_intensity(partial_inner, coefficients)) / (
            1.0 - partial_inner**2
        )

    central = intensity_profile(np.full_like(z_arr, p), coefficients)
    full = np.where(z_arr < _CENTRAL_Z_FRACTION * p, central, full)
    return np.where(z_arr <= 1.0 - p, full, partial)
