"""
Test options for hypothesis tests.

This module defines the configuration of a single hypothesis test: the
significance level, the side(s) of the rejection region, and how the
chi-square inputs are interpreted.
"""

from dataclasses import dataclass
from typing import Dict, Any

from .test_kind import Tail


@dataclass
class TestOptions:
    """
    Configuration options for a hypothesis test.

    Attributes:
        confidence_level: Confidence level 1 - alpha (default: 0.95)
        tail: Side(s) of the rejection region (default: two-sided)
        variance_input: If True, chi-square sample/population values are
            variances; if False they are standard deviations (default: False)
    """

    confidence_level: float = 0.95
    tail: Tail = Tail.TWO
    variance_input: bool = False

    __test__ = False

    def __post_init__(self):
        """Validate options after initialization."""
        if not 0 < self.confidence_level < 1:
            raise ValueError("confidence_level must be between 0 and 1")

        # Convert string to enum if needed
        if not isinstance(self.tail, Tail):
            self.tail = Tail.parse(self.tail)

    @property
    def alpha(self) -> float:
        """
        Significance level (complement of confidence level).

        Returns:
            Alpha value for the test
        """
        return 1.0 - self.confidence_level

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "confidence_level": self.confidence_level,
            "tail": self.tail.value,
            "variance_input": self.variance_input,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TestOptions':
        """
        Create TestOptions from a dictionary.

        An "alpha" key is accepted in place of "confidence_level".

        Args:
            data: Dictionary with option values

        Returns:
            New TestOptions instance
        """
        if "confidence_level" in data:
            confidence = data["confidence_level"]
        elif "alpha" in data:
            confidence = 1.0 - float(data["alpha"])
        else:
            confidence = 0.95

        return cls(
            confidence_level=confidence,
            tail=data.get("tail", Tail.TWO),
            variance_input=data.get("variance_input", False),
        )

    @classmethod
    def default(cls) -> 'TestOptions':
        """
        Create options with default values.

        Returns:
            TestOptions with default settings
        """
        return cls()

    def __repr__(self) -> str:
        return (
            f"TestOptions("
            f"conf={self.confidence_level}, "
            f"tail={self.tail.value}, "
            f"variance_input={self.variance_input})"
        )
