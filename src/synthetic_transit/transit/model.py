"""Synthetic transit lightcurve generation.

This module turns a ModelParameters record and a time array into a flux
array normalized to 1.0 out of transit, using the small-planet approximation
of Mandel & Agol (2002) with nonlinear limb darkening.

Features:
- generate_synthetic: the core time -> flux transform
- generate_synthetic_chunked: same output, evaluated in parallel chunks
- generate_synthetic_from_params: loose-argument entry point with optional
  white noise
- compute_derived_parameters: impact parameter, durations and depths
- validate_geometry: fail-fast checks for impossible systems

Each time sample is independent, so the generator holds no state between
calls and never mutates its inputs.

References:
- Mandel & Agol 2002, ApJ, 580, L171
- Seager & Mallen-Ornelas 2003, ApJ, 585, 1038 (transit durations)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from synthetic_transit.compute.geometry import (
    is_foreground,
    orbital_phase,
    projected_separation,
)
from synthetic_transit.compute.limb_darkening import nonlinear_coefficients
from synthetic_transit.compute.occultation import small_planet_flux
from synthetic_transit.config import (
    DEFAULT_OPTIONS,
    GeneratorOptions,
    default_chunk_size,
    default_max_workers,
)
from synthetic_transit.constants import DAYS_TO_HOURS
from synthetic_transit.domain.parameters import ModelParameters
from synthetic_transit.errors import InvalidGeometryError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)

# =============================================================================
# Validation
# =============================================================================


def _find_invalid_geometry(params: ModelParameters) -> InvalidGeometryError | None:
    positive = (
        ("period", params.period, "orbital period must be positive"),
        ("a", params.a, "orbital separation must be positive"),
        ("rs", params.rs, "stellar radius must be positive"),
    )
    for field, value, reason in positive:
        if not np.isfinite(value) or value <= 0:
            return InvalidGeometryError(field, value, reason)

    if not np.isfinite(params.rp) or params.rp < 0:
        return InvalidGeometryError("rp", params.rp, "planetary radius must be non-negative")

    for field, value in (("epoch", params.epoch), ("i", params.i)):
        if not np.isfinite(value):
            return InvalidGeometryError(field, value, "must be finite")
    return None


def validate_geometry(params: ModelParameters) -> None:
    """Check that a parameter record describes a physically possible system.

    Raises:
        InvalidGeometryError: If period, a or rs is not positive, rp is
            negative, or epoch / inclination is not finite
    """
    error = _find_invalid_geometry(params)
    if error is not None:
        raise error


# =============================================================================
# Core generator
# =============================================================================


@dataclass(frozen=True)
class _PreparedModel:
    """Per-call constants shared by every time sample."""

    period: float
    epoch: float
    a_rs: float
    inclination: float
    p: float
    coefficients: NDArray[np.float64]


def _as_time_array(time: ArrayLike) -> NDArray[np.float64]:
    t = np.asarray(time, dtype=np.float64)
    if t.ndim != 1:
        raise ValueError(f"time must be one-dimensional, got shape {t.shape}")
    return t


def _prepare(params: ModelParameters, options: GeneratorOptions) -> _PreparedModel:
    error = _find_invalid_geometry(params)
    if error is not None:
        if options.validate_geometry:
            raise error
        logger.warning(f"{error}; flux will contain non-finite values")

    p = params.radius_ratio
    if p >= options.small_planet_limit:
        logger.warning(
            f"Radius ratio Rp/Rs={p:.4f} exceeds the small-planet limit "
            f"({options.small_planet_limit}); flux accuracy is degraded."
        )

    return _PreparedModel(
        period=params.period,
        epoch=params.epoch,
        a_rs=params.a_over_rs,
        inclination=params.i,
        p=p,
        coefficients=np.asarray(params.limb_darkening_coefficients(), dtype=np.float64),
    )


def _evaluate(time: NDArray[np.float64], model: _PreparedModel) -> NDArray[np.float64]:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        phase = orbital_phase(time, model.period, model.epoch)
        z = projected_separation(phase, model.a_rs, model.inclination)
        # Planet behind the star: no occultation
        z = np.where(is_foreground(phase) | np.isnan(phase), z, np.inf)
        return small_planet_flux(z, model.p, model.coefficients)


def generate_synthetic(
    time: ArrayLike,
    params: ModelParameters,
    options: GeneratorOptions | None = None,
) -> NDArray[np.float64]:
    """Generate a normalized transit lightcurve.

    Uses eq. 8 of Mandel & Agol (2002):

        F = 1 - I*(z) / (4 pi Omega) [p^2 arccos((z-1)/p) - (z-1) sqrt(p^2 - (z-1)^2)]

    where p = Rp/Rs, z is the projected star-planet separation in stellar
    radii and I*(z) is the mean stellar intensity behind the planet.

    Args:
        time: Observation times in days (any order, any length)
        params: System parameters
        options: Generator options (geometry validation, small-planet limit)

    Returns:
        Flux array with the same length as `time`, 1.0 out of transit

    Raises:
        InvalidGeometryError: If geometry is impossible and validation is on
        ValueError: If `time` is not one-dimensional

    Example:
        >>> params = ModelParameters(period=3.0, epoch=0.0, a=0.03, i=90.0, rs=1.0, rp=0.1)
        >>> flux = generate_synthetic([0.0, 1.5], params)
        >>> # flux[0] < 1.0 at mid-transit, flux[1] == 1.0 half an orbit later
    """
    opts = options or DEFAULT_OPTIONS
    t = _as_time_array(time)
    model = _prepare(params, opts)
    flux = _evaluate(t, model)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Generated {t.size} samples for {params.name or 'unnamed system'}: "
            f"{int(np.sum(flux < 1.0))} in transit (p={model.p:.4f}, a/Rs={model.a_rs:.3f})"
        )
    return flux


def generate_synthetic_chunked(
    time: ArrayLike,
    params: ModelParameters,
    options: GeneratorOptions | None = None,
    *,
    max_workers: int | None = None,
    chunk_size: int | None = None,
) -> NDArray[np.float64]:
    """Generate a lightcurve by evaluating contiguous chunks in a thread pool.

    The result is identical to `generate_synthetic`; only the evaluation is
    split. Defaults come from SYNTHETIC_TRANSIT_MAX_WORKERS and
    SYNTHETIC_TRANSIT_CHUNK_SIZE.

    Args:
        time: Observation times in days
        params: System parameters
        options: Generator options
        max_workers: Thread pool size
        chunk_size: Samples per chunk

    Returns:
        Flux array with the same length and ordering as `time`
    """
    opts = options or DEFAULT_OPTIONS
    size = default_chunk_size() if chunk_size is None else int(chunk_size)
    workers = default_max_workers() if max_workers is None else int(max_workers)
    if size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if workers < 1:
        raise ValueError(f"max_workers must be positive, got {max_workers}")

    t = _as_time_array(time)
    model = _prepare(params, opts)
    if t.size <= size or workers == 1:
        return _evaluate(t, model)

    flux = np.empty_like(t)
    starts = range(0, t.size, size)
    logger.debug(f"Evaluating {t.size} samples in {len(starts)} chunks on {workers} workers")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        future_map = {
            pool.submit(_evaluate, t[start : start + size], model): start for start in starts
        }
        for fut in as_completed(future_map):
            start = future_map[fut]
            chunk = fut.result()
            flux[start : start + chunk.size] = chunk
    return flux


def generate_synthetic_from_params(
    time: ArrayLike,
    period: float,
    midpoint: float,
    coeffs: Sequence[float],
    semi: float,
    r_planet: float,
    r_star: float,
    inclination: float,
    noise: float = 0.0,
    rng: int | np.random.Generator | None = None,
    options: GeneratorOptions | None = None,
) -> NDArray[np.float64]:
    """Generate a lightcurve from loose parameters, optionally with white noise.

    Args:
        time: Observation times in days
        period: Orbital period in days
        midpoint: Mid-transit time in days
        coeffs: Limb-darkening coefficients (c1, c2, c3, c4)
        semi: Orbital separation in AU
        r_planet: Planet radius in Jupiter radii
        r_star: Stellar radius in solar radii
        inclination: Orbital inclination in degrees
        noise: Standard deviation of Gaussian noise added to the flux
        rng: Seed or numpy Generator for the noise draw
        options: Generator options

    Returns:
        Flux array; noiseless samples are normalized to 1.0 out of transit

    Raises:
        ValueError: If `coeffs` does not hold 4 values or `noise` is negative
            or non-finite
    """
    if not np.isfinite(noise) or noise < 0:
        raise ValueError(f"noise must be a non-negative finite number, got {noise}")

    c = nonlinear_coefficients(coeffs)
    params = ModelParameters(
        period=period,
        epoch=midpoint,
        a=semi,
        i=inclination,
        rs=r_star,
        rp=r_planet,
        c1=float(c[1]),
        c2=float(c[2]),
        c3=float(c[3]),
        c4=float(c[4]),
    )
    flux = generate_synthetic(time, params, options)
    if noise > 0:
        generator = np.random.default_rng(rng)
        flux = flux + generator.normal(0.0, noise, size=flux.shape)
    return flux


# =============================================================================
# Derived quantities
# =============================================================================


@dataclass(frozen=True)
class DerivedParameters:
    """Geometric transit quantities implied by a parameter record.

    Attributes:
        radius_ratio: p = Rp/Rs
        a_rs: Orbital separation in stellar radii
        impact_parameter: b = (a/Rs) cos(i)
        transits: Whether the planet disk overlaps the star at conjunction
        duration_hours: Total duration T14 (first to fourth contact)
        full_duration_hours: Flat-bottom duration T23 (0 for grazing transits)
        geometric_depth: p^2, the depth for a uniform disk
        central_depth: 1 - F at mid-transit, including limb darkening
    """

    radius_ratio: float
    a_rs: float
    impact_parameter: float
    transits: bool
    duration_hours: float
    full_duration_hours: float
    geometric_depth: float
    central_depth: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "radius_ratio": round(self.radius_ratio, 6),
            "a_rs": round(self.a_rs, 4),
            "impact_parameter": round(self.impact_parameter, 4),
            "transits": self.transits,
            "duration_hours": round(self.duration_hours, 4),
            "full_duration_hours": round(self.full_duration_hours, 4),
            "geometric_depth": round(self.geometric_depth, 8),
            "central_depth": round(self.central_depth, 8),
        }


def _contact_duration_hours(
    period: float, a_rs: float, sin_i: float, extent: float, b: float
) -> float:
    # Circular orbit: T = P/pi * arcsin(sqrt(extent^2 - b^2) / (a/Rs sin i))
    if extent <= b:
        return 0.0
    with np.errstate(divide="ignore"):
        arg = np.sqrt(extent**2 - b**2) / (a_rs * sin_i)
    return float(period / np.pi * np.arcsin(min(arg, 1.0)) * DAYS_TO_HOURS)


def compute_derived_parameters(params: ModelParameters) -> DerivedParameters:
    """Compute impact parameter, durations and depths for a circular orbit.

    Raises:
        InvalidGeometryError: If the geometry is impossible
    """
    validate_geometry(params)

    p = params.radius_ratio
    a_rs = params.a_over_rs
    b = params.impact_parameter
    sin_i = abs(float(np.sin(np.deg2rad(params.i))))
    coefficients = np.asarray(params.limb_darkening_coefficients(), dtype=np.float64)

    central_flux = float(small_planet_flux(np.array([b]), p, coefficients)[0])

    return DerivedParameters(
        radius_ratio=p,
        a_rs=a_rs,
        impact_parameter=b,
        transits=bool(p > 0 and b < 1.0 + p),
        duration_hours=_contact_duration_hours(params.period, a_rs, sin_i, 1.0 + p, b),
        full_duration_hours=_contact_duration_hours(params.period, a_rs, sin_i, 1.0 - p, b),
        geometric_depth=p * p,
        central_depth=1.0 - central_flux,
    )
