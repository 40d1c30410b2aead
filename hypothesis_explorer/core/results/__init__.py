"""
Result classes for hypothesis tests.

This module provides output data structures:
- HypothesisTestResult: Statistic, p-value, critical values and decision
"""

from .test_result import HypothesisTestResult

__all__ = [
    "HypothesisTestResult",
]
