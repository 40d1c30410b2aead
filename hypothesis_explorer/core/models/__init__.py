"""
Data models for hypothesis testing.

This module provides the core data structures:
- Family: Distribution family tag (chi-square, Student's t, normal)
- TestKind: Supported one-sample tests
- Tail: Side(s) of the rejection region
- TestOptions: Configuration for a test
"""

from .family import Family
from .test_kind import TestKind, Tail
from .options import TestOptions

__all__ = [
    "Family",
    "TestKind",
    "Tail",
    "TestOptions",
]
