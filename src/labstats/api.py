"""Public API: pick a test, run it, and format the result."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from labstats.config import AnalysisConfig, AnalysisMode
from labstats.data.columns import ColumnKind, ColumnThresholds
from labstats.data.loaders import (
    LoadedTable,
    grouped_vectors,
    load_table,
    numeric_pair,
    numeric_vector,
)
from labstats.errors import InvalidParameterError
from labstats.report.formatter import build_report
from labstats.report.schemas import AnalysisReport
from labstats.stats.tests import (
    one_sample_ttest,
    paired_ttest,
    pearson_correlation,
    welch_ttest,
)

logger = logging.getLogger(__name__)


def choose_mode(table: LoadedTable, col_a: str, col_b: Optional[str] = None) -> AnalysisMode:
    """Pick an analysis mode from the selected columns.

    Args:
        table: Loaded table
        col_a: First selected column
        col_b: Second selected column, if any

    Returns:
        ONE_SAMPLE if only one column is selected, INDEPENDENT if the second
        column is categorical, PAIRED if both are numeric

    Raises:
        InvalidParameterError: If a column is unknown or cannot be analysed
    """
    kind_a = table.kind_of(col_a)
    if kind_a != ColumnKind.NUMERIC:
        raise InvalidParameterError(f"Column '{col_a}' is {kind_a.value}, expected numeric")

    if col_b is None:
        return AnalysisMode.ONE_SAMPLE

    kind_b = table.kind_of(col_b)
    if kind_b == ColumnKind.CATEGORICAL:
        return AnalysisMode.INDEPENDENT
    if kind_b == ColumnKind.NUMERIC:
        return AnalysisMode.PAIRED
    raise InvalidParameterError(f"Column '{col_b}' is {kind_b.value} and cannot be analysed")


def run_analysis(
    table: LoadedTable,
    col_a: str,
    col_b: Optional[str] = None,
    mode: AnalysisMode | str = AnalysisMode.AUTO,
    mu0: float = 0.0,
    groups: Optional[List[str]] = None,
) -> AnalysisReport:
    """Run one analysis on a loaded table.

    Args:
        table: Loaded table
        col_a: First column (outcome column for independent-samples tests)
        col_b: Second column, or grouping column for independent-samples tests
        mode: Analysis mode; "auto" picks one with choose_mode()
        mu0: Reference value for the one-sample test
        groups: Optional pair of group labels for independent-samples tests

    Returns:
        AnalysisReport with sentence and chart series

    Example:
        >>> table = load_table(Path("lab.csv"))
        >>> report = run_analysis(table, "LVF", "RVF")
        >>> print(report.sentence)
    """
    mode = AnalysisMode.parse(mode)
    if mode == AnalysisMode.AUTO:
        mode = choose_mode(table, col_a, col_b)
        logger.info(f"Selected {mode.value} analysis for {col_a!r} / {col_b!r}")

    if mode != AnalysisMode.ONE_SAMPLE and col_b is None:
        raise InvalidParameterError(f"mode '{mode.value}' requires a second column")

    if mode == AnalysisMode.PAIRED:
        a, b = numeric_pair(table, col_a, col_b)
        result = paired_ttest(a, b)
        report = build_report(result, [col_a, col_b])
    elif mode == AnalysisMode.ONE_SAMPLE:
        x = numeric_vector(table, col_a)
        result = one_sample_ttest(x, mu0)
        report = build_report(result, [col_a])
    elif mode == AnalysisMode.INDEPENDENT:
        (label_a, a), (label_b, b) = grouped_vectors(table, col_a, col_b, groups)
        result = welch_ttest(a, b)
        report = build_report(result, [label_a, label_b])
    else:
        x, y = numeric_pair(table, col_a, col_b)
        result = pearson_correlation(x, y)
        report = build_report(result, [col_a, col_b], pairs=(x, y))

    logger.info(f"{report.test}: t = {report.formatted['t']}, p = {report.formatted['p']}")
    return report


def run_analysis_from_config(config: AnalysisConfig) -> AnalysisReport:
    """Run an analysis from an AnalysisConfig object."""
    table = load_table(config.data_csv, config.thresholds)
    return run_analysis(
        table,
        col_a=config.col_a,
        col_b=config.col_b,
        mode=config.mode,
        mu0=config.mu0,
        groups=config.groups,
    )


def analyze_file(
    data_csv: Path | str,
    col_a: str,
    col_b: Optional[str] = None,
    mode: AnalysisMode | str = AnalysisMode.AUTO,
    mu0: float = 0.0,
    groups: Optional[List[str]] = None,
    thresholds: Optional[ColumnThresholds] = None,
) -> AnalysisReport:
    """Load a CSV export and run one analysis on it.

    Args:
        data_csv: Path to the CSV export
        col_a: First column
        col_b: Second or grouping column
        mode: Analysis mode (default: auto)
        mu0: Reference value for the one-sample test
        groups: Optional pair of group labels
        thresholds: Column classification thresholds

    Returns:
        AnalysisReport
    """
    config = AnalysisConfig(
        data_csv=Path(data_csv),
        col_a=col_a,
        col_b=col_b,
        mode=mode,
        mu0=mu0,
        groups=groups,
        thresholds=thresholds or ColumnThresholds(),
    )
    return run_analysis_from_config(config)
