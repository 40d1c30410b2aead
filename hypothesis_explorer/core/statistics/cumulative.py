"""hypothesis_explorer.core.statistics.cumulative

Cumulative distribution functions.

Implemented:
- Chi-square CDF by composite Simpson integration (100 subintervals)
- Student's t CDF by composite Simpson integration from the center (200 subintervals)
- Standard normal CDF in closed form via the error function

The node counts are fixed; there is no adaptive refinement. Typical accuracy
is 1e-4 to 1e-5 for the degrees of freedom a one-sample test produces.
Very large arguments widen the node spacing and silently degrade accuracy.

Chi-square:
  The density behaves like t^(k/2 - 1) near 0 and is unbounded for k < 2.
  The integral is therefore taken in u = sqrt(t), where

      integral_0^x f(t) dt = integral_0^sqrt(x) 2 u f(u^2) du

  and the integrand 2 u^(k-1) e^(-u^2/2) / (2^(k/2) Gamma(k/2)) is bounded for
  k >= 1. The first node is sampled at a small positive epsilon instead of 0,
  where the u^(k-1) factor would otherwise be evaluated as 0 * inf.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from .densities import chi_pdf, t_pdf
from .special import erf

CHI_INTERVALS = 100
T_INTERVALS = 200

# First integration node for chi-square, in u = sqrt(t) units (t = 1e-16)
CHI_START = 1e-8

_SQRT_TWO = math.sqrt(2.0)


def _clip_probability(p: float) -> float:
    # Clip due to polynomial / integration error
    if p < 0.0:
        return 0.0
    if p > 1.0:
        return 1.0
    return p


def simpson(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    intervals: int,
    first: Optional[float] = None,
) -> float:
    """Composite Simpson's rule on [lower, upper].

    Weights are 1 at both endpoints, 4 at odd interior nodes and 2 at even
    interior nodes; the result is (h/3) * sum.

    Args:
        func: integrand
        lower: lower limit
        upper: upper limit
        intervals: number of subintervals (even)
        first: sample to use at ``lower`` instead of ``func(lower)``

    Returns:
        approximate integral
    """
    h = (upper - lower) / intervals
    total = (func(lower) if first is None else first) + func(upper)
    for i in range(1, intervals):
        weight = 4.0 if i % 2 else 2.0
        total += weight * func(lower + i * h)
    return (h / 3.0) * total


def chi_cdf(x: float, k: float) -> float:
    """CDF of the chi-square distribution.

    Args:
        x: value
        k: degrees of freedom (>0)

    Returns:
        P(X <= x), 0 for x <= 0
    """
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0

    def integrand(u: float) -> float:
        return 2.0 * u * chi_pdf(u * u, k)

    upper = math.sqrt(x)
    area = simpson(integrand, 0.0, upper, CHI_INTERVALS, first=integrand(CHI_START))
    return _clip_probability(area)


def t_cdf(x: float, v: float) -> float:
    """CDF of Student's t distribution.

    The density is symmetric about 0, so only the one-sided integral from the
    center to |x| is computed and added to (or taken from) 0.5.

    Args:
        x: value
        v: degrees of freedom (>0)

    Returns:
        P(T <= x), exactly 0.5 at x == 0
    """
    if x == 0.0:
        return 0.5

    integral = simpson(lambda s: t_pdf(s, v), 0.0, abs(x), T_INTERVALS)
    if x > 0.0:
        return _clip_probability(0.5 + integral)
    return _clip_probability(0.5 - integral)


def normal_cdf(x: float) -> float:
    """CDF of the standard normal distribution: 0.5 * (1 + erf(x / sqrt(2)))."""
    return _clip_probability(0.5 * (1.0 + erf(x / _SQRT_TWO)))
