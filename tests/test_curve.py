"""Tests for UI-free density curve geometry.

These tests verify the plot window, curve sampling and shaded region polygons
without any rendering backend.
"""

import math

import numpy as np
import pytest

from hypothesis_explorer.core.geometry import (
    plot_window,
    density_curve,
    region_polygon,
    rejection_region_polygons,
)
from hypothesis_explorer.core.models import TestOptions
from hypothesis_explorer.core.statistics import pdf, ppf, run_test


class TestPlotWindow:
    """Tests for plot_window."""

    def test_normal(self):
        x_min, x_max, peak = plot_window("normal", 0)
        assert (x_min, x_max) == (-5.0, 5.0)
        assert peak == pytest.approx(1.1 / math.sqrt(2.0 * math.pi))

    def test_t(self):
        x_min, x_max, peak = plot_window("t", 4)
        assert (x_min, x_max) == (-5.0, 5.0)
        assert peak == pytest.approx(1.1 * pdf(0.0, 4, "t"))

    def test_chi_square_uses_mode(self):
        x_min, x_max, peak = plot_window("chi", 10)
        assert x_min == 0.0
        assert x_max == pytest.approx(ppf(0.9995, 10, "chi"))
        assert 25.0 < x_max < 40.0
        assert peak == pytest.approx(1.1 * pdf(8.0, 10, "chi"))

    @pytest.mark.parametrize("df", [1, 2])
    def test_chi_square_small_df_peak_positive(self, df):
        _, _, peak = plot_window("chi", df)
        assert peak > 0.0


class TestDensityCurve:
    """Tests for density_curve."""

    def test_shape_and_values(self):
        xs, ys = density_curve("t", 5, num_points=101)
        assert isinstance(xs, np.ndarray)
        assert xs.shape == ys.shape == (101,)
        assert xs[0] == pytest.approx(-5.0)
        assert xs[-1] == pytest.approx(5.0)
        assert np.all(ys >= 0.0)
        # Peak at the center
        assert ys[50] == pytest.approx(ys.max())

    def test_explicit_range(self):
        xs, ys = density_curve("normal", 0, num_points=11, x_min=0.0, x_max=1.0)
        assert xs[0] == 0.0
        assert xs[-1] == 1.0
        assert ys[0] == pytest.approx(pdf(0.0, 0, "normal"))

    def test_minimum_points(self):
        xs, _ = density_curve("normal", 0, num_points=0)
        assert len(xs) == 2

    def test_chi_square_starts_at_zero_density(self):
        xs, ys = density_curve("chi", 6, num_points=50)
        assert xs[0] == 0.0
        assert ys[0] == 0.0
        assert np.all(np.isfinite(ys))


class TestRegionPolygon:
    """Tests for region_polygon."""

    def test_closed_on_baseline(self):
        poly = region_polygon("normal", 0, 1.0, 3.0, num_points=20)
        assert poly[0] == poly[-1]
        assert poly[0] == (1.0, 0.0)
        assert poly[-2] == (3.0, 0.0)
        # baseline start + 20 samples + baseline end + closing point
        assert len(poly) == 23

    def test_clamped_to_window(self):
        poly = region_polygon("normal", 0, -math.inf, -2.0)
        xs = [p[0] for p in poly]
        assert min(xs) == -5.0
        assert max(xs) == -2.0

    def test_empty_when_outside_window(self):
        assert region_polygon("normal", 0, 6.0, 9.0) == []
        assert region_polygon("normal", 0, 2.0, 1.0) == []


class TestRejectionRegions:
    """Tests for rejection_region_polygons."""

    def test_two_sided_has_two_regions(self):
        res = run_test("z_prop", 100, 0.55, 0.5)
        polys = rejection_region_polygons(res)
        assert len(polys) == 2
        assert max(p[0] for p in polys[0]) == pytest.approx(res.critical_lower)
        assert min(p[0] for p in polys[1]) == pytest.approx(res.critical_upper)

    def test_right_tailed_has_one_region(self):
        res = run_test("chi", 25, 0.028, 0.02, options=TestOptions(tail="right"))
        polys = rejection_region_polygons(res)
        assert len(polys) == 1
        assert all(x >= res.critical_upper for x, _ in polys[0])
