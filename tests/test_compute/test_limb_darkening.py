"""Tests for the nonlinear limb-darkening law and its disk integrals.

Closed forms are checked against direct numerical quadrature (scipy).
"""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.integrate import quad

from synthetic_transit.compute import (
    cumulative_intensity,
    derive_c0,
    intensity_profile,
    mean_occulted_intensity,
    nonlinear_coefficients,
    omega_normalization,
)


@pytest.fixture
def claret_coefficients() -> np.ndarray:
    """Representative Sun-like nonlinear coefficients (c0..c4)."""
    return nonlinear_coefficients([0.45, 0.18, 0.12, -0.09])


@pytest.fixture
def uniform_coefficients() -> np.ndarray:
    return nonlinear_coefficients([0.0, 0.0, 0.0, 0.0])


def _annulus_integral(coefficients: np.ndarray, lo: float, hi: float) -> float:
    value, _ = quad(
        lambda r: float(intensity_profile(r, coefficients)) * 2.0 * r,
        lo,
        hi,
        epsabs=1e-14,
        epsrel=1e-12,
        limit=200,
    )
    return value


class TestCoefficients:
    def test_c0_complements_to_one(self) -> None:
        c1, c2, c3, c4 = 0.3, -0.2, 0.55, 0.01
        assert derive_c0(c1, c2, c3, c4) + c1 + c2 + c3 + c4 == pytest.approx(1.0, abs=1e-15)

    def test_nonlinear_coefficients_vector(self) -> None:
        c = nonlinear_coefficients((0.1, 0.2, 0.3, 0.15))
        assert c.shape == (5,)
        assert c[0] == pytest.approx(0.25)
        assert np.sum(c) == pytest.approx(1.0)

    @pytest.mark.parametrize("coeffs", [[0.1, 0.2, 0.3], [0.1, 0.2, 0.3, 0.4, 0.5], []])
    def test_wrong_length_raises(self, coeffs: list[float]) -> None:
        with pytest.raises(ValueError, match="Expected 4"):
            nonlinear_coefficients(coeffs)


class TestOmega:
    def test_uniform_disk(self, uniform_coefficients: np.ndarray) -> None:
        assert omega_normalization(uniform_coefficients) == pytest.approx(0.25)

    def test_quadratic_equivalent(self) -> None:
        """Quadratic law u1, u2 maps to c2 = u1 + 2 u2, c4 = -u2; Omega = (1 - u1/3 - u2/6)/4."""
        u1, u2 = 0.4, 0.25
        c = nonlinear_coefficients([0.0, u1 + 2 * u2, 0.0, -u2])
        assert omega_normalization(c) == pytest.approx((1 - u1 / 3 - u2 / 6) / 4)

    def test_matches_disk_integral(self, claret_coefficients: np.ndarray) -> None:
        """4 Omega equals integral_0^1 I(r) 2r dr."""
        total = _annulus_integral(claret_coefficients, 0.0, 1.0)
        assert 4.0 * omega_normalization(claret_coefficients) == pytest.approx(total, rel=1e-7)


class TestIntensityProfile:
    def test_unity_at_centre(self, claret_coefficients: np.ndarray) -> None:
        assert float(intensity_profile(0.0, claret_coefficients)) == pytest.approx(1.0)

    def test_limb_value_is_c0(self, claret_coefficients: np.ndarray) -> None:
        assert float(intensity_profile(1.0, claret_coefficients)) == pytest.approx(
            claret_coefficients[0]
        )

    def test_clipped_beyond_limb(self, claret_coefficients: np.ndarray) -> None:
        assert_allclose(
            intensity_profile([1.0, 1.5], claret_coefficients),
            claret_coefficients[0],
        )

    def test_darkens_towards_limb(self, claret_coefficients: np.ndarray) -> None:
        r = np.linspace(0.0, 1.0, 200)
        assert np.all(np.diff(intensity_profile(r, claret_coefficients)) <= 0.0)

    def test_preserves_shape(self, claret_coefficients: np.ndarray) -> None:
        r = np.linspace(0.0, 1.0, 12).reshape(3, 4)
        assert intensity_profile(r, claret_coefficients).shape == (3, 4)


class TestCumulativeIntensity:
    @pytest.mark.parametrize("r", [0.0, 0.1, 0.5, 0.9, 0.999, 1.0])
    def test_matches_quadrature(self, claret_coefficients: np.ndarray, r: float) -> None:
        expected = _annulus_integral(claret_coefficients, 0.0, r)
        assert float(cumulative_intensity(r, claret_coefficients)) == pytest.approx(
            expected, rel=1e-7, abs=1e-14
        )

    def test_total_is_four_omega(self, claret_coefficients: np.ndarray) -> None:
        total = float(cumulative_intensity(1.0, claret_coefficients))
        assert total == pytest.approx(4.0 * omega_normalization(claret_coefficients))

    def test_uniform_is_r_squared(self, uniform_coefficients: np.ndarray) -> None:
        r = np.linspace(0.0, 1.0, 11)
        assert_allclose(cumulative_intensity(r, uniform_coefficients), r**2, atol=1e-15)


class TestMeanOccultedIntensity:
    P = 0.08

    def test_uniform_disk_is_one(self, uniform_coefficients: np.ndarray) -> None:
        z = np.array([0.0, 0.2, 0.5, 0.9, 0.95, 1.0, 1.05])
        assert_allclose(mean_occulted_intensity(z, self.P, uniform_coefficients), 1.0, rtol=1e-12)

    @pytest.mark.parametrize("z", [0.05, 0.3, 0.7, 0.9])
    def test_full_overlap_matches_quadrature(
        self, claret_coefficients: np.ndarray, z: float
    ) -> None:
        expected = _annulus_integral(claret_coefficients, abs(z - self.P), z + self.P) / (
            4.0 * z * self.P
        )
        actual = float(mean_occulted_intensity(np.array([z]), self.P, claret_coefficients)[0])
        assert actual == pytest.approx(expected, rel=1e-7)

    @pytest.mark.parametrize("z", [0.93, 1.0, 1.05])
    def test_partial_overlap_matches_quadrature(
        self, claret_coefficients: np.ndarray, z: float
    ) -> None:
        a = (z - self.P) ** 2
        expected = _annulus_integral(claret_coefficients, z - self.P, 1.0) / (1.0 - a)
        actual = float(mean_occulted_intensity(np.array([z]), self.P, claret_coefficients)[0])
        assert actual == pytest.approx(expected, rel=1e-7)

    def test_planet_covering_centre_averages_whole_disk(
        self, claret_coefficients: np.ndarray
    ) -> None:
        """With z < p beyond the full-overlap region the annulus spans 0..1."""
        z = np.array([0.0, 0.5, 1.0])
        i_star = mean_occulted_intensity(z, 1.2, claret_coefficients)
        assert_allclose(i_star, 4.0 * omega_normalization(claret_coefficients), rtol=1e-12)

    def test_centre_limit(self, claret_coefficients: np.ndarray) -> None:
        """As z -> 0 the annulus average tends to I(p)."""
        at_zero = mean_occulted_intensity(np.array([0.0]), self.P, claret_coefficients)[0]
        near_zero = mean_occulted_intensity(np.array([1e-4]), self.P, claret_coefficients)[0]
        i_p = float(intensity_profile(self.P, claret_coefficients))

        assert at_zero == pytest.approx(i_p, rel=1e-14)
        assert near_zero == pytest.approx(i_p, rel=1e-6)
        assert np.isfinite(at_zero)

    def test_continuous_at_full_overlap_boundary(self, claret_coefficients: np.ndarray) -> None:
        eps = 1e-9
        edge = 1.0 - self.P
        inside, outside = mean_occulted_intensity(
            np.array([edge - eps, edge + eps]), self.P, claret_coefficients
        )
        assert inside == pytest.approx(outside, rel=1e-6)

    def test_decreases_towards_limb(self, claret_coefficients: np.ndarray) -> None:
        z = np.linspace(0.0, 1.0 + self.P - 1e-6, 500)
        i_star = mean_occulted_intensity(z, self.P, claret_coefficients)
        assert np.all(np.diff(i_star) <= 1e-12)
