"""Tests for the Gamma and error functions."""

import math

import pytest

from hypothesis_explorer.core.statistics.special import gamma, log_gamma, erf, safe_exp


class TestGamma:
    """Tests for the Lanczos Gamma function."""

    @pytest.mark.parametrize(
        "z, expected",
        [
            (1.0, 1.0),
            (2.0, 1.0),
            (5.0, 24.0),
            (10.0, 362880.0),
            (0.5, math.sqrt(math.pi)),
            (1.5, 0.5 * math.sqrt(math.pi)),
            (2.5, 0.75 * math.sqrt(math.pi)),
        ],
    )
    def test_known_values(self, z, expected):
        assert gamma(z) == pytest.approx(expected, rel=1e-10)

    def test_factorial_sanity(self):
        assert gamma(5) == pytest.approx(24.0, abs=1e-6)
        assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), abs=1e-6)

    def test_reflection_for_small_arguments(self):
        # Gamma(-0.5) = -2 sqrt(pi), Gamma(0.25) = 3.6256...
        assert gamma(-0.5) == pytest.approx(-2.0 * math.sqrt(math.pi), rel=1e-10)
        assert gamma(0.25) == pytest.approx(3.625609908221908, rel=1e-10)

    def test_matches_stdlib(self):
        for z in (0.1, 0.7, 3.3, 12.5, 40.0):
            assert gamma(z) == pytest.approx(math.gamma(z), rel=1e-10)

    def test_pole_at_zero_is_infinite(self):
        assert gamma(0.0) == math.inf

    def test_near_pole_is_huge(self):
        # sin(-pi) is not exactly zero in floating point
        assert abs(gamma(-1.0)) > 1e12

    def test_overflow_returns_inf(self):
        assert math.isfinite(gamma(171.0))
        assert gamma(180.0) == math.inf
        assert gamma(math.inf) == math.inf

    def test_non_finite_inputs_do_not_raise(self):
        assert math.isnan(gamma(math.nan))
        assert math.isnan(gamma(-math.inf))


class TestLogGamma:
    """Tests for log|Gamma|."""

    def test_matches_log_of_gamma(self):
        for z in (0.25, 0.5, 1.0, 3.5, 10.0, 50.0):
            assert log_gamma(z) == pytest.approx(math.log(gamma(z)), abs=1e-9)

    def test_large_argument_stays_finite(self):
        # Gamma(500) overflows, its log does not
        assert gamma(500.0) == math.inf
        assert log_gamma(500.0) == pytest.approx(math.lgamma(500.0), rel=1e-12)

    def test_pole(self):
        assert log_gamma(0.0) == math.inf


class TestErf:
    """Tests for the A&S 7.1.26 error function."""

    @pytest.mark.parametrize("x", [0.0, 0.1, 0.5, 1.0, 1.5, 2.0, 3.0, 5.0])
    def test_matches_stdlib_within_published_bound(self, x):
        assert erf(x) == pytest.approx(math.erf(x), abs=1.5e-7)

    @pytest.mark.parametrize("x", [0.05, 0.7, 1.3, 2.9])
    def test_antisymmetric(self, x):
        assert erf(-x) == -erf(x)

    def test_range(self):
        for x in (-10.0, -1.0, 0.0, 1.0, 10.0):
            assert -1.0 <= erf(x) <= 1.0

    def test_infinite_limits(self):
        assert erf(math.inf) == 1.0
        assert erf(-math.inf) == -1.0


def test_safe_exp_does_not_overflow():
    assert safe_exp(1000.0) == math.inf
    assert safe_exp(0.0) == 1.0
