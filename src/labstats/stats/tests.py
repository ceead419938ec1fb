"""Statistical tests (paired, one-sample, Welch, Pearson correlation)."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from labstats.stats.effects import cohen_d, cohen_dz, hedges_g, one_sample_d
from labstats.stats.results import (
    CorrelationResult,
    OneSampleTTestResult,
    PairedTTestResult,
    WelchTTestResult,
)
from labstats.stats.special import p_two_sided
from labstats.stats.summary import NumericSummary, safe_divide, summarize
from labstats.stats.validation import (
    MIN_N_CORRELATION,
    MIN_N_ONE_SAMPLE,
    MIN_N_PAIRED,
    MIN_N_WELCH,
    as_sample,
    require_finite_reference,
    require_min_n,
    require_same_length,
)

ArrayLike = Sequence[float] | np.ndarray


def _p_value(t: float, df: float) -> float:
    """Two-sided p-value, NaN when the statistic is degenerate."""
    if not np.isfinite(t) or not np.isfinite(df) or df <= 0:
        return np.nan
    return p_two_sided(t, df)


def paired_ttest(a: ArrayLike, b: ArrayLike) -> PairedTTestResult:
    """Perform a paired-samples t-test on a - b.

    Args:
        a: First measurement per subject
        b: Second measurement per subject (same order as a)

    Returns:
        PairedTTestResult with t, df = n - 1, p and Cohen's dz

    Raises:
        InvalidParameterError: If lengths differ or values are not finite
        InsufficientDataError: If fewer than 3 pairs are given
    """
    a = as_sample(a, "a")
    b = as_sample(b, "b")
    require_same_length(a, b, "Paired t-test")
    require_min_n(a, MIN_N_PAIRED, "pairs", "Paired t-test")

    diff = summarize(a - b)
    t = safe_divide(diff.mean, diff.se)
    df = float(diff.n - 1)

    return PairedTTestResult(
        summary_a=summarize(a),
        summary_b=summarize(b),
        summary_diff=diff,
        statistic=t,
        df=df,
        p_value=_p_value(t, df),
        cohen_dz=cohen_dz(diff),
    )


def one_sample_ttest(x: ArrayLike, mu0: float = 0.0) -> OneSampleTTestResult:
    """Perform a one-sample t-test of mean(x) against mu0.

    Args:
        x: Sample values
        mu0: Reference value (default: 0)

    Returns:
        OneSampleTTestResult with t, df = n - 1, p and Cohen's d
    """
    mu0 = require_finite_reference(mu0)
    x = as_sample(x, "x")
    require_min_n(x, MIN_N_ONE_SAMPLE, "x", "One-sample t-test")

    s = summarize(x)
    diff = s.mean - mu0
    t = safe_divide(diff, s.se)
    df = float(s.n - 1)

    return OneSampleTTestResult(
        summary=s,
        mu0=mu0,
        mean_difference=diff,
        statistic=t,
        df=df,
        p_value=_p_value(t, df),
        cohen_d=one_sample_d(s, mu0),
    )


def welch_df(a: NumericSummary, b: NumericSummary) -> float:
    """Welch-Satterthwaite degrees of freedom."""
    va = a.variance / a.n
    vb = b.variance / b.n
    num = (va + vb) ** 2
    den = va**2 / (a.n - 1) + vb**2 / (b.n - 1)
    return safe_divide(num, den)


def welch_ttest(a: ArrayLike, b: ArrayLike) -> WelchTTestResult:
    """Perform Welch's t-test (unequal variances).

    Args:
        a: First group values
        b: Second group values

    Returns:
        WelchTTestResult with t, Welch-Satterthwaite df, p, Cohen's d and Hedges' g
    """
    a = as_sample(a, "a")
    b = as_sample(b, "b")
    require_min_n(a, MIN_N_WELCH, "group a", "Welch t-test")
    require_min_n(b, MIN_N_WELCH, "group b", "Welch t-test")

    sa = summarize(a)
    sb = summarize(b)
    se = float(np.sqrt(sa.variance / sa.n + sb.variance / sb.n))
    t = safe_divide(sa.mean - sb.mean, se)
    df = welch_df(sa, sb)

    return WelchTTestResult(
        summary_a=sa,
        summary_b=sb,
        statistic=t,
        df=df,
        p_value=_p_value(t, df),
        cohen_d=cohen_d(sa, sb),
        hedges_g=hedges_g(sa, sb),
    )


def pearson_r(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson product-moment correlation, clipped to [-1, 1]."""
    dx = x - np.mean(x)
    dy = y - np.mean(y)
    r = safe_divide(np.sum(dx * dy), np.sqrt(np.sum(dx * dx) * np.sum(dy * dy)))
    if np.isfinite(r):
        r = float(np.clip(r, -1.0, 1.0))
    return r


def pearson_correlation(x: ArrayLike, y: ArrayLike) -> CorrelationResult:
    """Pearson correlation with a t-based two-sided test of r = 0.

    Args:
        x: First variable
        y: Second variable (same order as x)

    Returns:
        CorrelationResult with r, t = r * sqrt(df / (1 - r^2)), df = n - 2 and p
    """
    x = as_sample(x, "x")
    y = as_sample(y, "y")
    require_same_length(x, y, "Pearson correlation")
    require_min_n(x, MIN_N_CORRELATION, "pairs", "Pearson correlation")

    r = pearson_r(x, y)
    df = float(len(x) - 2)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = float(np.float64(r) * np.sqrt(np.divide(df, 1.0 - np.float64(r) ** 2)))

    return CorrelationResult(
        summary_x=summarize(x),
        summary_y=summarize(y),
        r=r,
        statistic=t,
        df=df,
        p_value=_p_value(t, df),
    )
