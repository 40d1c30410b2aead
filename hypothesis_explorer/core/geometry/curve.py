"""Density curve sampling for graph rendering.

This module produces the numbers a graph layer needs to draw a distribution:
the plot window, the sampled density curve, and closed polygons for shading
rejection regions. Drawing itself is left to the caller.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np

from ..models.family import Family
from ..results.test_result import HypothesisTestResult
from ..statistics.distributions import FamilyTag, pdf, ppf

# Upper plot limit for chi-square, as a cumulative probability
CHI_PLOT_QUANTILE = 0.9995

# Plot limits for the symmetric families
SYMMETRIC_PLOT_LIMIT = 5.0

# Vertical headroom above the density peak
PEAK_HEADROOM = 1.1


def plot_window(family: FamilyTag, df: float) -> Tuple[float, float, float]:
    """
    Compute the plot window for a distribution.

    Chi-square spans [0, ppf(0.9995)] and peaks at its mode df - 2 (0.2 is
    used for df <= 2, where the density is largest at or near 0). Student's t
    and the normal span [-5, 5] and peak at 0.

    Args:
        family: family tag
        df: degrees of freedom (ignored for normal)

    Returns:
        (x_min, x_max, peak_y) with peak_y including 10% headroom
    """
    fam = Family.parse(family)

    if fam is Family.CHI:
        x_min = 0.0
        x_max = ppf(CHI_PLOT_QUANTILE, df, fam)
        mode_x = df - 2.0 if df > 2.0 else 0.2
        peak_y = pdf(mode_x, df, fam) * PEAK_HEADROOM
    else:
        x_min = -SYMMETRIC_PLOT_LIMIT
        x_max = SYMMETRIC_PLOT_LIMIT
        peak_y = pdf(0.0, df, fam) * PEAK_HEADROOM

    return x_min, x_max, peak_y


def density_curve(
    family: FamilyTag,
    df: float,
    num_points: int = 200,
    x_min: Optional[float] = None,
    x_max: Optional[float] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the density on an evenly spaced grid.

    Args:
        family: family tag
        df: degrees of freedom (ignored for normal)
        num_points: number of samples (at least 2)
        x_min: left end of the grid, defaults to the plot window
        x_max: right end of the grid, defaults to the plot window

    Returns:
        (xs, ys) arrays; samples with a non-finite density are dropped
    """
    if num_points < 2:
        num_points = 2

    if x_min is None or x_max is None:
        win_min, win_max, _ = plot_window(family, df)
        x_min = win_min if x_min is None else x_min
        x_max = win_max if x_max is None else x_max

    xs = np.linspace(x_min, x_max, num_points)
    ys = np.array([pdf(float(x), df, family) for x in xs])

    mask = np.isfinite(ys)
    return xs[mask], ys[mask]


def region_polygon(
    family: FamilyTag,
    df: float,
    start: float,
    end: float,
    num_points: int = 50,
) -> List[Tuple[float, float]]:
    """
    Generate a closed polygon under the density between start and end.

    The range is clamped to the plot window. The polygon runs along the
    baseline (y = 0) at both ends and follows the density in between.

    Args:
        family: family tag
        df: degrees of freedom (ignored for normal)
        start: left end of the region
        end: right end of the region
        num_points: number of density samples along the top edge

    Returns:
        List of (x, y) tuples forming a closed polygon (first == last),
        or an empty list if the clamped range is empty.
    """
    win_min, win_max, _ = plot_window(family, df)
    s = max(win_min, start)
    e = min(win_max, end)
    if not s < e:
        return []

    xs, ys = density_curve(family, df, num_points=num_points, x_min=s, x_max=e)

    points = [(s, 0.0)]
    points.extend((float(x), float(y)) for x, y in zip(xs, ys))
    points.append((e, 0.0))

    # Close the polygon
    points.append(points[0])

    return points


def rejection_region_polygons(
    result: HypothesisTestResult,
    num_points: int = 50,
) -> List[List[Tuple[float, float]]]:
    """
    Polygons shading the rejection region(s) of a test result.

    Returns:
        one polygon per critical value (left region first); regions lying
        entirely outside the plot window are omitted
    """
    df = result.degrees_of_freedom
    family = result.family

    polygons = []
    if result.critical_lower is not None:
        poly = region_polygon(family, df, -math.inf, result.critical_lower, num_points)
        if poly:
            polygons.append(poly)
    if result.critical_upper is not None:
        poly = region_polygon(family, df, result.critical_upper, math.inf, num_points)
        if poly:
            polygons.append(poly)
    return polygons
