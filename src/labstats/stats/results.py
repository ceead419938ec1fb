"""Result records returned by the test procedures."""

from __future__ import annotations

from dataclasses import dataclass

from labstats.stats.summary import NumericSummary


@dataclass(frozen=True)
class PairedTTestResult:
    """Paired-samples t-test on a - b."""

    summary_a: NumericSummary
    summary_b: NumericSummary
    summary_diff: NumericSummary
    statistic: float
    df: float
    p_value: float
    cohen_dz: float

    test_name = "Paired t-test"


@dataclass(frozen=True)
class OneSampleTTestResult:
    """One-sample t-test of mean(x) against mu0."""

    summary: NumericSummary
    mu0: float
    mean_difference: float
    statistic: float
    df: float
    p_value: float
    cohen_d: float

    test_name = "One-sample t-test"


@dataclass(frozen=True)
class WelchTTestResult:
    """Welch's unequal-variance t-test on two independent groups."""

    summary_a: NumericSummary
    summary_b: NumericSummary
    statistic: float
    df: float
    p_value: float
    cohen_d: float
    hedges_g: float

    test_name = "Welch t-test"

    @property
    def mean_difference(self) -> float:
        return self.summary_a.mean - self.summary_b.mean


@dataclass(frozen=True)
class CorrelationResult:
    """Pearson correlation with t-based significance."""

    summary_x: NumericSummary
    summary_y: NumericSummary
    r: float
    statistic: float
    df: float
    p_value: float

    test_name = "Pearson correlation"

    @property
    def n(self) -> int:
        return self.summary_x.n
