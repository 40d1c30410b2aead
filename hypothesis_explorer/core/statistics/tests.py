"""hypothesis_explorer.core.statistics.tests

One-sample hypothesis tests built on the distribution facade.

Includes:
- Test statistics for the chi-square variance, t mean, z mean and z proportion tests
- p-values for left, right and two-sided alternatives
- Critical values and the critical value <-> tail area binding
- A one-call test runner returning a HypothesisTestResult

Unlike the distribution functions, these helpers validate their inputs and
raise ValueError.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from .distributions import FamilyTag, cdf, check_arguments, ppf
from ..models.test_kind import TestKind, Tail
from ..models.options import TestOptions
from ..results.test_result import HypothesisTestResult


def _check_n(n: float) -> None:
    if not n >= 1:
        raise ValueError("n must be at least 1")


def _check_alpha(alpha: float) -> None:
    if not (0.0 < alpha < 1.0):
        raise ValueError("alpha must be in (0,1)")


# ----------------------------
# Test statistics
# ----------------------------


def chi_square_variance_statistic(
    n: float,
    sample: float,
    population: float,
    variance_input: bool = False,
) -> float:
    """Chi-square statistic for a variance test.

        chi2 = (n - 1) s^2 / sigma^2

    Args:
        n: sample size
        sample: sample standard deviation s (or variance s^2)
        population: hypothesized sigma (or variance sigma^2)
        variance_input: if True, sample and population are variances

    Returns:
        test statistic
    """
    _check_n(n)
    if population <= 0:
        raise ValueError("population spread must be positive")
    if sample < 0:
        raise ValueError("sample spread cannot be negative")

    if variance_input:
        s_sq, sigma_sq = float(sample), float(population)
    else:
        s_sq, sigma_sq = float(sample) ** 2, float(population) ** 2
    return (float(n) - 1.0) * s_sq / sigma_sq


def t_mean_statistic(n: float, sample_mean: float, population_mean: float, sample_sd: float) -> float:
    """t statistic for a mean: (x_bar - mu) / (s / sqrt(n))."""
    _check_n(n)
    if sample_sd <= 0:
        raise ValueError("sample_sd must be positive")
    return (sample_mean - population_mean) / (sample_sd / math.sqrt(n))


def z_mean_statistic(n: float, sample_mean: float, population_mean: float, population_sd: float) -> float:
    """z statistic for a mean with known sigma: (x_bar - mu) / (sigma / sqrt(n))."""
    _check_n(n)
    if population_sd <= 0:
        raise ValueError("population_sd must be positive")
    return (sample_mean - population_mean) / (population_sd / math.sqrt(n))


def z_proportion_statistic(n: float, sample_proportion: float, population_proportion: float) -> float:
    """z statistic for a proportion: (p_hat - p) / sqrt(p (1 - p) / n).

    Args:
        n: sample size
        sample_proportion: observed proportion p_hat
        population_proportion: hypothesized proportion p, strictly in (0, 1)

    Returns:
        test statistic
    """
    _check_n(n)
    if not (0.0 < population_proportion < 1.0):
        raise ValueError("population_proportion must be in (0,1)")
    se = math.sqrt(population_proportion * (1.0 - population_proportion) / n)
    return (sample_proportion - population_proportion) / se


def degrees_of_freedom(kind: Union[TestKind, str], n: float) -> int:
    """Degrees of freedom: max(1, n - 1) for chi-square and t tests, 0 for z tests."""
    return TestKind(kind).degrees_of_freedom(n)


# ----------------------------
# p-values and critical values
# ----------------------------


def p_value(statistic: float, df: float, family: FamilyTag, tail: Union[Tail, str]) -> float:
    """p-value of a test statistic.

    left:  P(X <= stat)
    right: P(X >= stat)
    two:   2 * min of the two tails

    Returns:
        p-value clipped to [0, 1]
    """
    tail = Tail.parse(tail)
    check_arguments(df, family)

    p_low = cdf(statistic, df, family)
    p_high = 1.0 - p_low

    if tail is Tail.LEFT:
        p = p_low
    elif tail is Tail.RIGHT:
        p = p_high
    else:
        p = 2.0 * min(p_low, p_high)

    return max(0.0, min(1.0, p))


def tail_area(critical_value: float, df: float, family: FamilyTag, side: Union[Tail, str]) -> float:
    """Area beyond a critical value.

    Left side: P(X <= cv). Right side: P(X >= cv).
    """
    side = Tail.parse(side)
    if side is Tail.TWO:
        raise ValueError("side must be left or right")
    check_arguments(df, family)

    area = cdf(critical_value, df, family)
    return area if side is Tail.LEFT else 1.0 - area


def critical_value_for_area(area: float, df: float, family: FamilyTag, side: Union[Tail, str]) -> float:
    """Critical value cutting off ``area`` in the given tail.

    Left side: ppf(area). Right side: ppf(1 - area).
    """
    side = Tail.parse(side)
    if side is Tail.TWO:
        raise ValueError("side must be left or right")
    check_arguments(df, family, p=area)

    target = area if side is Tail.LEFT else 1.0 - area
    return ppf(target, df, family)


def critical_values(
    df: float,
    family: FamilyTag,
    alpha: float,
    tail: Union[Tail, str],
) -> Tuple[Optional[float], Optional[float]]:
    """Critical values of a test at significance level alpha.

    Two-sided tests split alpha equally between the tails.

    Returns:
        (lower, upper); the side without a rejection region is None
    """
    _check_alpha(alpha)
    tail = Tail.parse(tail)

    if tail is Tail.LEFT:
        return critical_value_for_area(alpha, df, family, Tail.LEFT), None
    if tail is Tail.RIGHT:
        return None, critical_value_for_area(alpha, df, family, Tail.RIGHT)

    half = alpha / 2.0
    lower = critical_value_for_area(half, df, family, Tail.LEFT)
    upper = critical_value_for_area(half, df, family, Tail.RIGHT)
    return lower, upper


# ----------------------------
# Test runner
# ----------------------------


def run_test(
    kind: Union[TestKind, str],
    n: float,
    sample: float,
    population: float,
    spread: Optional[float] = None,
    options: Optional[TestOptions] = None,
) -> HypothesisTestResult:
    """Run a one-sample hypothesis test.

    Args:
        kind: test to run
        n: sample size
        sample: sample statistic (s or s^2 for chi-square, x_bar for means,
            p_hat for proportions)
        population: hypothesized value (sigma or sigma^2, mu, p)
        spread: s for the t test, sigma for the z mean test; unused otherwise
        options: significance level, tail and chi-square input mode

    Returns:
        HypothesisTestResult (with p-value, critical values and decision)
    """
    kind = TestKind(kind)
    if options is None:
        options = TestOptions.default()

    if kind is TestKind.CHI_VARIANCE:
        stat = chi_square_variance_statistic(n, sample, population, options.variance_input)
    elif kind is TestKind.Z_PROPORTION:
        stat = z_proportion_statistic(n, sample, population)
    else:
        if spread is None:
            raise ValueError(f"spread is required for {kind.value}")
        if kind is TestKind.T_MEAN:
            stat = t_mean_statistic(n, sample, population, spread)
        else:
            stat = z_mean_statistic(n, sample, population, spread)

    df = kind.degrees_of_freedom(n)
    alpha = options.alpha
    family = kind.family

    p = p_value(stat, df, family, options.tail)
    lower, upper = critical_values(df, family, alpha, options.tail)

    return HypothesisTestResult(
        kind=kind,
        statistic=float(stat),
        degrees_of_freedom=df,
        tail=options.tail,
        alpha=alpha,
        p_value=p,
        critical_lower=lower,
        critical_upper=upper,
        reject=bool(p < alpha),
    )
