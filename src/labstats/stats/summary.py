"""Descriptive summary of a single numeric sample."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from labstats.errors import InsufficientDataError

ROUNDING_ULPS = 8


@dataclass(frozen=True)
class NumericSummary:
    """Count, mean, sample standard deviation and standard error.

    Attributes:
        n: Number of observations
        mean: Arithmetic mean
        sd: Sample standard deviation (denominator n - 1)
        se: Standard error of the mean, sd / sqrt(n)
    """

    n: int
    mean: float
    sd: float
    se: float

    @property
    def variance(self) -> float:
        return self.sd**2


def summarize(x: np.ndarray) -> NumericSummary:
    """Summarize a sample.

    Args:
        x: 1-D array of finite values

    Returns:
        NumericSummary

    Raises:
        InsufficientDataError: If fewer than 2 observations are given
    """
    x = np.asarray(x, dtype=float)
    n = len(x)
    if n < 2:
        raise InsufficientDataError(
            f"At least 2 observations are required for a standard deviation, got {n}",
            n=n,
            minimum=2,
        )

    m = float(np.mean(x))
    # Two-pass variance around the computed mean
    var = float(np.sum((x - m) ** 2) / (n - 1))
    sd = float(np.sqrt(var))
    # Rounding residue of a constant sample is zero spread
    if sd <= ROUNDING_ULPS * np.finfo(float).eps * float(np.max(np.abs(x))):
        sd = 0.0

    return NumericSummary(n=n, mean=m, sd=sd, se=sd / float(np.sqrt(n)))


def safe_divide(num: float, den: float) -> float:
    """Divide, returning inf/nan for a zero denominator instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(num), np.float64(den)))
