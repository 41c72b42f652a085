"""Orbital phase and sky-projected separation for circular orbits.

All functions are pure numpy operations. Separations are expressed in units
of the stellar radius.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def orbital_phase(
    time: ArrayLike,
    period: float,
    epoch: float,
) -> NDArray[np.float64]:
    """Convert absolute times to orbital phase in [-0.5, 0.5).

    Phase 0 is mid-transit (inferior conjunction).

    Args:
        time: Time array in days
        period: Orbital period in days
        epoch: Reference mid-transit time in days

    Returns:
        Phase array with the same shape as `time`

    Example:
        >>> orbital_phase([0.0, 0.75, 1.5], period=3.0, epoch=0.0)
        array([ 0.  ,  0.25, -0.5 ])
    """
    t = np.asarray(time, dtype=np.float64)
    return ((t - epoch) / period + 0.5) % 1.0 - 0.5


def projected_separation(
    phase: ArrayLike,
    a_rs: float,
    inclination_deg: float,
) -> NDArray[np.float64]:
    """Sky-projected star-planet separation z for a circular orbit.

    z = (a/Rs) * sqrt(sin^2(2 pi phase) + cos^2(i) cos^2(2 pi phase))

    At i = 90 the cosine term vanishes and z = (a/Rs)|sin(2 pi phase)|.

    Args:
        phase: Orbital phase (0 = mid-transit)
        a_rs: Orbital separation in stellar radii
        inclination_deg: Orbital inclination in degrees

    Returns:
        z in units of the stellar radius
    """
    angle = 2.0 * np.pi * np.asarray(phase, dtype=np.float64)
    cos_i = np.cos(np.deg2rad(inclination_deg))
    return a_rs * np.sqrt(np.sin(angle) ** 2 + (cos_i * np.cos(angle)) ** 2)


def is_foreground(phase: ArrayLike) -> NDArray[np.bool_]:
    """True where the planet is on the observer's side of the star.

    Near phase +-0.5 the projected separation is small again, but the planet
    sits behind the star and cannot occult it.
    """
    angle = 2.0 * np.pi * np.asarray(phase, dtype=np.float64)
    return np.cos(angle) > 0.0
