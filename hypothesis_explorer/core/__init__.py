"""
Core module for hypothesis testing.

This module contains pure Python implementations with no UI dependencies.
It can be used standalone for testing or integration with any front end.
"""

from .models import (
    Family,
    TestKind,
    Tail,
    TestOptions,
)

from .results import HypothesisTestResult

from .statistics import (
    gamma,
    erf,
    pdf,
    cdf,
    ppf,
    check_arguments,
    p_value,
    critical_values,
    run_test,
)

from .geometry import (
    plot_window,
    density_curve,
    region_polygon,
    rejection_region_polygons,
)

__all__ = [
    # Models
    "Family",
    "TestKind",
    "Tail",
    "TestOptions",

    # Results
    "HypothesisTestResult",

    # Distributions
    "gamma",
    "erf",
    "pdf",
    "cdf",
    "ppf",
    "check_arguments",

    # Tests
    "p_value",
    "critical_values",
    "run_test",

    # Geometry
    "plot_window",
    "density_curve",
    "region_polygon",
    "rejection_region_polygons",
]
