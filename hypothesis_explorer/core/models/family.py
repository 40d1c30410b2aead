"""
Distribution family tag.

The family tag is the only thing callers pass to select a distribution:
- CHI: chi-square, one parameter (degrees of freedom)
- T: Student's t, one parameter (degrees of freedom)
- NORMAL: standard normal, no parameter (callers standardize beforehand)
"""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class Family(Enum):
    """Enumeration of supported distribution families."""
    CHI = "chi"
    T = "t"
    NORMAL = "normal"

    @property
    def needs_df(self) -> bool:
        """True if the family is parameterized by degrees of freedom."""
        return self is not Family.NORMAL

    @property
    def is_symmetric(self) -> bool:
        """True if the density is symmetric about 0."""
        return self is not Family.CHI

    @classmethod
    def parse(cls, tag: Union["Family", str, None]) -> "Family":
        """
        Convert a family tag to a Family.

        Accepts the enum itself, the canonical tags ("chi", "t", "normal") and
        common spellings ("chi-square", "chi2", "student-t", "z", ...).
        Unknown tags fall back to NORMAL, the z-test default.

        Args:
            tag: Family or string tag

        Returns:
            Family member
        """
        if isinstance(tag, Family):
            return tag

        key = str(tag).strip().lower() if tag is not None else ""
        family = _ALIASES.get(key)
        if family is None:
            logger.warning("Unknown distribution family %r, using normal", tag)
            return cls.NORMAL
        return family


_ALIASES = {
    "chi": Family.CHI,
    "chi2": Family.CHI,
    "chi-square": Family.CHI,
    "chi_square": Family.CHI,
    "chisquare": Family.CHI,
    "chi-squared": Family.CHI,
    "t": Family.T,
    "student": Family.T,
    "student-t": Family.T,
    "student_t": Family.T,
    "normal": Family.NORMAL,
    "norm": Family.NORMAL,
    "z": Family.NORMAL,
}
