"""hypothesis_explorer.core.statistics.densities

Probability density functions for the chi-square, Student's t and standard
normal distributions.

Every function is total: out-of-support arguments give 0 and nothing raises.
Chi-square and t densities are evaluated in log space and exponentiated once,
so that Gamma-function ratios stay finite for large degrees of freedom.
"""

from __future__ import annotations

import math

from .special import log_gamma, safe_exp

_LOG_TWO = math.log(2.0)
_INV_SQRT_TWO_PI = 1.0 / math.sqrt(2.0 * math.pi)


def chi_pdf(x: float, k: float) -> float:
    """PDF of the chi-square distribution.

        f(x; k) = x^(k/2 - 1) e^(-x/2) / (2^(k/2) Gamma(k/2))

    Args:
        x: value
        k: degrees of freedom (>0)

    Returns:
        density at x, 0 when x <= 0 or k <= 0
    """
    if x <= 0.0 or k <= 0.0 or math.isinf(x):
        return 0.0
    half = 0.5 * k
    log_pdf = (half - 1.0) * math.log(x) - 0.5 * x - half * _LOG_TWO - log_gamma(half)
    return safe_exp(log_pdf)


def t_pdf(x: float, v: float) -> float:
    """PDF of Student's t distribution.

        f(x; v) = Gamma((v+1)/2) / (sqrt(v pi) Gamma(v/2)) * (1 + x^2/v)^(-(v+1)/2)

    Args:
        x: value
        v: degrees of freedom (>0)

    Returns:
        density at x, 0 when v <= 0
    """
    if v <= 0.0:
        return 0.0
    log_norm = log_gamma(0.5 * (v + 1.0)) - 0.5 * math.log(v * math.pi) - log_gamma(0.5 * v)
    log_kernel = -0.5 * (v + 1.0) * math.log1p(x * x / v)
    return safe_exp(log_norm + log_kernel)


def normal_pdf(x: float) -> float:
    """PDF of the standard normal distribution."""
    return _INV_SQRT_TWO_PI * math.exp(-0.5 * x * x)
