"""Test fixtures for transit lightcurve generation."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from synthetic_transit.domain.parameters import ModelParameters


@pytest.fixture
def hot_jupiter() -> ModelParameters:
    """Edge-on hot Jupiter around a Sun-like star with nonlinear limb darkening.

    Rp/Rs ~ 0.0925, a/Rs ~ 10.75.
    """
    return ModelParameters(
        id=1,
        name="HJ-1b",
        submodel_id=7,
        period=3.0,
        epoch=100.0,
        a=0.05,
        i=90.0,
        rs=1.0,
        rp=0.9,
        mstar=1.0,
        teff=5778.0,
        c1=0.45,
        c2=0.18,
        c3=0.12,
        c4=-0.09,
    )


@pytest.fixture
def grazing_planet() -> ModelParameters:
    """Inclined orbit with impact parameter ~0.98 (partial overlap at mid-transit)."""
    a_rs_target = 10.0
    b_target = 0.98
    a_au = a_rs_target * 1.0 / 215.032
    inc = float(np.rad2deg(np.arccos(b_target / a_rs_target)))
    return ModelParameters(
        period=5.0,
        epoch=0.0,
        a=a_au,
        i=inc,
        rs=1.0,
        rp=0.5,
        c1=0.0,
        c2=0.6,
        c3=0.0,
        c4=-0.1,
    )


@pytest.fixture
def reference_scenario() -> ModelParameters:
    """Short-period system: period=3 d, a=0.03 AU, edge-on, rs=1 R_sun, rp=0.1 R_jup."""
    return ModelParameters(
        period=3.0,
        epoch=0.0,
        a=0.03,
        i=90.0,
        rs=1.0,
        rp=0.1,
        c1=0.3,
        c2=0.2,
        c3=0.1,
        c4=0.05,
    )


@pytest.fixture
def transit_window(hot_jupiter: ModelParameters) -> NDArray[np.float64]:
    """Dense 2-minute cadence grid spanning +-0.2 d around one transit."""
    cadence = 2.0 / 60.0 / 24.0
    return np.arange(hot_jupiter.epoch - 0.2, hot_jupiter.epoch + 0.2, cadence, dtype=np.float64)
