"""hypothesis_explorer.core.statistics.quantile

Quantile (inverse CDF, critical value) solvers.

None of the three CDFs has an elementary closed-form inverse, so quantiles are
found by plain bisection over a fixed bracket with a fixed iteration count.
No convergence check is made; 50 halvings resolve the bracket far below the
accuracy of the underlying CDF approximations.

Targets outside (0, 1) return sentinel bounds instead of +/- infinity. Callers
must read the sentinels as "no finite solution", not as precise quantiles.

Known limitation: the [-10, 10] bracket for t and normal is too narrow for
Student's t with very few degrees of freedom (df = 1 has its 0.99 quantile at
~31.8) and for extreme probabilities. The solver then returns a value pinned
at the bracket edge.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from .cumulative import chi_cdf, normal_cdf, t_cdf

logger = logging.getLogger(__name__)

BISECTION_ITERATIONS = 50

# Symmetric bracket and sentinels for t / normal
SYMMETRIC_LOWER = -10.0
SYMMETRIC_UPPER = 10.0

# Chi-square bracket floor
CHI_UPPER_FLOOR = 100.0


def bisect(
    cdf: Callable[[float], float],
    target: float,
    low: float,
    high: float,
    iterations: int = BISECTION_ITERATIONS,
) -> float:
    """Find x in [low, high] with cdf(x) ~= target by bisection.

    Only ``cdf(mid) < target`` moves ``low`` up; exact ties shrink ``high``.

    Args:
        cdf: non-decreasing function on [low, high]
        target: probability to invert
        low: lower bracket end
        high: upper bracket end
        iterations: number of halvings

    Returns:
        the last midpoint
    """
    mid = 0.5 * (low + high)
    for _ in range(iterations):
        mid = 0.5 * (low + high)
        if cdf(mid) < target:
            low = mid
        else:
            high = mid
    return mid


def chi_upper_sentinel(k: float) -> float:
    """Value returned by :func:`chi_ppf` for p >= 1: max(100, k + 6 sqrt(2k))."""
    if not k > 0.0:
        return CHI_UPPER_FLOOR
    return max(CHI_UPPER_FLOOR, k + 6.0 * math.sqrt(2.0 * k))


def chi_ppf(p: float, k: float) -> float:
    """Quantile of the chi-square distribution.

    Args:
        p: probability
        k: degrees of freedom (>0)

    Returns:
        x such that chi_cdf(x, k) ~= p; 0 for p <= 0 and
        ``chi_upper_sentinel(k)`` for p >= 1
    """
    if p <= 0.0:
        logger.debug("chi_ppf: p=%r <= 0, returning lower support bound", p)
        return 0.0
    if p >= 1.0:
        logger.debug("chi_ppf: p=%r >= 1, returning upper sentinel", p)
        return chi_upper_sentinel(k)

    high = max(CHI_UPPER_FLOOR, k + 10.0)
    return bisect(lambda x: chi_cdf(x, k), p, 0.0, high)


def _symmetric_ppf(cdf: Callable[[float], float], p: float) -> float:
    if p <= 0.0:
        logger.debug("ppf: p=%r <= 0, returning lower sentinel", p)
        return SYMMETRIC_LOWER
    if p >= 1.0:
        logger.debug("ppf: p=%r >= 1, returning upper sentinel", p)
        return SYMMETRIC_UPPER
    return bisect(cdf, p, SYMMETRIC_LOWER, SYMMETRIC_UPPER)


def t_ppf(p: float, v: float) -> float:
    """Quantile of Student's t distribution, searched on [-10, 10]."""
    return _symmetric_ppf(lambda x: t_cdf(x, v), p)


def normal_ppf(p: float) -> float:
    """Standard normal quantile, searched on [-10, 10]."""
    return _symmetric_ppf(normal_cdf, p)
