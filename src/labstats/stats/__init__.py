"""Statistical computation engine.

Summary statistics, Student-t p-values computed from first principles, and
four hypothesis-test procedures:

- Paired t-test (Cohen's dz)
- One-sample t-test (Cohen's d)
- Welch's unequal-variance t-test (Cohen's d, Hedges' g)
- Pearson correlation with t-based significance

Public API:
-----------
from labstats.stats import paired_ttest, welch_ttest

result = paired_ttest([1.2, 2.3, 3.1], [1.0, 2.0, 2.5])
print(result.statistic, result.df, result.p_value)
"""

from labstats.stats.results import (
    CorrelationResult,
    OneSampleTTestResult,
    PairedTTestResult,
    WelchTTestResult,
)
from labstats.stats.special import (
    log_gamma,
    p_two_sided,
    regularized_incomplete_beta,
    student_t_cdf,
)
from labstats.stats.summary import NumericSummary, summarize
from labstats.stats.tests import (
    one_sample_ttest,
    paired_ttest,
    pearson_correlation,
    welch_ttest,
)

__all__ = [
    "NumericSummary",
    "summarize",
    "log_gamma",
    "regularized_incomplete_beta",
    "student_t_cdf",
    "p_two_sided",
    "paired_ttest",
    "one_sample_ttest",
    "welch_ttest",
    "pearson_correlation",
    "PairedTTestResult",
    "OneSampleTTestResult",
    "WelchTTestResult",
    "CorrelationResult",
]
