"""
Hypothesis test kinds and tails.

Test kinds:
- CHI_VARIANCE: chi-square test for a population variance / standard deviation
- T_MEAN: one-sample t test for a mean (population sigma unknown)
- Z_MEAN: one-sample z test for a mean (population sigma known)
- Z_PROPORTION: one-proportion z test

Tails follow the alternative hypothesis H1:
- LEFT: H1 uses "<"
- RIGHT: H1 uses ">"
- TWO: H1 uses "≠"
"""

from enum import Enum
from typing import Dict, Union

from .family import Family


class Tail(Enum):
    """Rejection region side(s) for a hypothesis test."""
    LEFT = "left"
    RIGHT = "right"
    TWO = "two"

    @property
    def operator(self) -> str:
        """Comparison operator used in the alternative hypothesis."""
        return _TAIL_OPERATORS[self]

    @classmethod
    def parse(cls, value: Union["Tail", str]) -> "Tail":
        """
        Convert a tail name or H1 operator to a Tail.

        Accepts "left"/"right"/"two" (also "both", "two-sided") and the
        operators "<", ">", "≠", "!=".

        Raises:
            ValueError: for anything else
        """
        if isinstance(value, Tail):
            return value
        key = str(value).strip().lower()
        for tail, op in _TAIL_OPERATORS.items():
            if key == op:
                return tail
        if key in ("both", "two-sided", "two_sided", "two-tailed", "!="):
            return cls.TWO
        return cls(key)


_TAIL_OPERATORS: Dict[Tail, str] = {
    Tail.LEFT: "<",
    Tail.RIGHT: ">",
    Tail.TWO: "≠",
}


class TestKind(Enum):
    """Supported one-sample hypothesis tests."""
    CHI_VARIANCE = "chi"
    T_MEAN = "t_mean"
    Z_MEAN = "z_mean"
    Z_PROPORTION = "z_prop"

    # Keep pytest from collecting this enum as a test class
    __test__ = False

    @property
    def family(self) -> Family:
        """Distribution of the test statistic under H0."""
        if self is TestKind.CHI_VARIANCE:
            return Family.CHI
        if self is TestKind.T_MEAN:
            return Family.T
        return Family.NORMAL

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def statistic_symbol(self) -> str:
        """Symbol of the test statistic (χ², t or z)."""
        return {Family.CHI: "χ²", Family.T: "t", Family.NORMAL: "z"}[self.family]

    @property
    def is_symmetric(self) -> bool:
        return self.family.is_symmetric

    def degrees_of_freedom(self, n: int) -> int:
        """
        Degrees of freedom for a sample of size n.

        max(1, n - 1) for chi-square and t tests, 0 for z tests (unused).
        """
        if self.family.needs_df:
            return max(1, int(n) - 1)
        return 0


_TITLES = {
    TestKind.CHI_VARIANCE: "Chi-Square Variance Test",
    TestKind.T_MEAN: "One-Sample t-Test (Mean)",
    TestKind.Z_MEAN: "One-Sample Z-Test (Mean)",
    TestKind.Z_PROPORTION: "One-Proportion Z-Test",
}
