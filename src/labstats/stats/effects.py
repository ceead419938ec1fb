"""Effect size calculations for t-tests."""

from __future__ import annotations

import numpy as np

from labstats.stats.summary import NumericSummary, safe_divide


def cohen_dz(diff: NumericSummary) -> float:
    """Calculate Cohen's dz for paired differences.

    Args:
        diff: Summary of the paired differences

    Returns:
        mean(diff) / sd(diff); non-finite if the differences are constant
    """
    return safe_divide(diff.mean, diff.sd)


def one_sample_d(x: NumericSummary, mu0: float) -> float:
    """Calculate Cohen's d against a reference value.

    Args:
        x: Summary of the sample
        mu0: Reference value

    Returns:
        (mean(x) - mu0) / sd(x)
    """
    return safe_divide(x.mean - mu0, x.sd)


def pooled_sd(a: NumericSummary, b: NumericSummary) -> float:
    """Pooled standard deviation of two independent samples."""
    df = a.n + b.n - 2
    if df <= 0:
        return np.nan
    sp2 = ((a.n - 1) * a.variance + (b.n - 1) * b.variance) / df
    return float(np.sqrt(sp2))


def cohen_d(a: NumericSummary, b: NumericSummary) -> float:
    """Calculate Cohen's d effect size.

    Args:
        a: Summary of the first group
        b: Summary of the second group

    Returns:
        Cohen's d (pooled standard deviation)

    Notes:
        Returns a non-finite value if both groups have zero variance
    """
    return safe_divide(a.mean - b.mean, pooled_sd(a, b))


def hedges_correction(n_a: int, n_b: int) -> float:
    """Small-sample correction factor J = 1 - 3 / (4 (n_a + n_b) - 9)."""
    return 1.0 - 3.0 / (4.0 * (n_a + n_b) - 9.0)


def hedges_g(a: NumericSummary, b: NumericSummary) -> float:
    """Calculate Hedges' g effect size (small-sample corrected Cohen's d).

    Args:
        a: Summary of the first group
        b: Summary of the second group

    Returns:
        Hedges' g
    """
    d = cohen_d(a, b)
    if not np.isfinite(d):
        return d
    return d * hedges_correction(a.n, b.n)
