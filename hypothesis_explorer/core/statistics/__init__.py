"""Statistics utilities for hypothesis testing.

This package contains small, dependency-free statistical helpers:
- Special functions (Gamma, log-Gamma, error function)
- A uniform pdf / cdf / ppf surface over chi-square, Student's t and normal
- One-sample hypothesis tests (statistics, p-values, critical values)

No SciPy dependency is required. The family-specific density, cumulative and
quantile functions are deliberately not re-exported; use pdf / cdf / ppf with
a family tag.
"""

from .special import gamma, log_gamma, erf
from .distributions import pdf, cdf, ppf, check_arguments
from .tests import (
    chi_square_variance_statistic,
    t_mean_statistic,
    z_mean_statistic,
    z_proportion_statistic,
    degrees_of_freedom,
    p_value,
    tail_area,
    critical_value_for_area,
    critical_values,
    run_test,
)

__all__ = [
    "gamma",
    "log_gamma",
    "erf",
    "pdf",
    "cdf",
    "ppf",
    "check_arguments",
    "chi_square_variance_statistic",
    "t_mean_statistic",
    "z_mean_statistic",
    "z_proportion_statistic",
    "degrees_of_freedom",
    "p_value",
    "tail_area",
    "critical_value_for_area",
    "critical_values",
    "run_test",
]
