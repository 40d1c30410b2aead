"""
Hypothesis Explorer - distribution core for interactive hypothesis tests

Density, cumulative and quantile functions for the chi-square, Student's t
and standard normal distributions, plus one-sample test helpers, computed
with elementary floating-point arithmetic only.

Conventions:
- Family tags: "chi", "t", "normal" (or the Family enum)
- Degrees of freedom: supplied by the caller, max(1, n - 1) for chi-square / t
- Normal: standard normal only; callers standardize before calling
- Distribution functions never raise; degenerate input gives sentinel values
"""

__version__ = "1.0.0"
__author__ = "Hypothesis Explorer"

from .core.models import Family, TestKind, Tail, TestOptions
from .core.results import HypothesisTestResult
from .core.statistics import pdf, cdf, ppf, run_test

__all__ = [
    # Version
    "__version__",

    # Models
    "Family",
    "TestKind",
    "Tail",
    "TestOptions",

    # Results
    "HypothesisTestResult",

    # Distributions
    "pdf",
    "cdf",
    "ppf",
    "run_test",
]
