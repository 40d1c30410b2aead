"""hypothesis_explorer.core.statistics.distributions

Uniform pdf / cdf / ppf surface over the supported distribution families.

Callers select the distribution with a family tag ("chi", "t", "normal" or a
:class:`Family`); degrees of freedom are ignored for the normal family. This
is the only entry point presentation code should use: the family-specific
functions are an implementation detail, so adding or removing a family only
touches the dispatch table below.

The functions never raise. Degenerate inputs (non-positive df, p outside
[0, 1], huge x) give sentinel or silently degraded values. Callers that need
loud failures can run :func:`check_arguments` first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from ..models.family import Family
from .cumulative import chi_cdf, normal_cdf, t_cdf
from .densities import chi_pdf, normal_pdf, t_pdf
from .quantile import chi_ppf, normal_ppf, t_ppf

FamilyTag = Union[Family, str]


@dataclass(frozen=True)
class _Distribution:
    """pdf / cdf / ppf of one family, all taking (value, df)."""

    pdf: Callable[[float, float], float]
    cdf: Callable[[float, float], float]
    ppf: Callable[[float, float], float]


_DISTRIBUTIONS: Dict[Family, _Distribution] = {
    Family.CHI: _Distribution(pdf=chi_pdf, cdf=chi_cdf, ppf=chi_ppf),
    Family.T: _Distribution(pdf=t_pdf, cdf=t_cdf, ppf=t_ppf),
    Family.NORMAL: _Distribution(
        pdf=lambda x, df: normal_pdf(x),
        cdf=lambda x, df: normal_cdf(x),
        ppf=lambda p, df: normal_ppf(p),
    ),
}


def _lookup(family: FamilyTag) -> _Distribution:
    return _DISTRIBUTIONS[Family.parse(family)]


def pdf(x: float, df: float, family: FamilyTag) -> float:
    """Probability density of ``family`` at x.

    Args:
        x: value
        df: degrees of freedom (ignored for normal)
        family: family tag

    Returns:
        density (>= 0, 0 outside the support)
    """
    return _lookup(family).pdf(x, df)


def cdf(x: float, df: float, family: FamilyTag) -> float:
    """Cumulative probability P(X <= x) of ``family``, in [0, 1]."""
    return _lookup(family).cdf(x, df)


def ppf(p: float, df: float, family: FamilyTag) -> float:
    """Quantile of ``family``: x such that cdf(x) ~= p.

    p <= 0 and p >= 1 return fixed sentinel bounds rather than infinities.
    """
    return _lookup(family).ppf(p, df)


def check_arguments(df: float, family: FamilyTag, p: Optional[float] = None) -> Family:
    """Validate arguments before calling the facade.

    Args:
        df: degrees of freedom
        family: family tag
        p: probability to be passed to :func:`ppf`, if any

    Returns:
        the parsed Family

    Raises:
        ValueError: if df is not a positive finite number for chi-square / t,
            or p is outside [0, 1]
    """
    fam = Family.parse(family)
    if fam.needs_df and not (math.isfinite(df) and df > 0):
        raise ValueError(f"df must be positive and finite for {fam.value}, got {df}")
    if p is not None and not (0.0 <= p <= 1.0):
        raise ValueError(f"p must be in [0,1], got {p}")
    return fam
