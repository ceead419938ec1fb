"""APA-style formatting of test results and chart-ready series.

Numbers are printed with two decimals, p-values with three decimals and no
leading zero, and any non-finite value as the literal string "NA".
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

import numpy as np

from labstats.report.schemas import AnalysisReport, ChartKind, ChartPoint, ChartSeries
from labstats.stats.results import (
    CorrelationResult,
    OneSampleTTestResult,
    PairedTTestResult,
    WelchTTestResult,
)
from labstats.stats.summary import NumericSummary

NA = "NA"
P_FLOOR = 0.001

TestResult = Union[PairedTTestResult, OneSampleTTestResult, WelchTTestResult, CorrelationResult]


def _is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def finite_or_none(value: Optional[float]) -> Optional[float]:
    """Return value as float, or None if missing or non-finite."""
    return float(value) if _is_finite(value) else None


def format_number(value: Optional[float], decimals: int = 2) -> str:
    """Fixed-precision number, "NA" for non-finite values."""
    if not _is_finite(value):
        return NA
    return f"{value:.{decimals}f}"


def format_df(df: Optional[float]) -> str:
    """Degrees of freedom: integers without decimals, otherwise two decimals."""
    if not _is_finite(df):
        return NA
    if float(df).is_integer():
        return str(int(df))
    return format_number(df)


def format_p(p: Optional[float]) -> str:
    """APA p-value text.

    Examples:
        0.0009 -> "< .001"
        0.042  -> ".042"
        0.5    -> ".500"
    """
    if not _is_finite(p):
        return NA
    if p < P_FLOOR:
        return "< .001"
    text = f"{p:.3f}"
    if text.startswith("0"):
        text = text[1:]
    return text


def p_clause(p: Optional[float]) -> str:
    """p-value with its relation sign, e.g. "p = .042" or "p < .001"."""
    text = format_p(p)
    if text.startswith("<"):
        return f"p {text}"
    return f"p = {text}"


def format_reference(value: float) -> str:
    if _is_finite(value) and float(value).is_integer():
        return str(int(value))
    return format_number(value)


def _describe(label: str, s: NumericSummary, with_n: bool = False) -> str:
    text = f"{label} (M = {format_number(s.mean)}, SD = {format_number(s.sd)}"
    if with_n:
        text += f", n = {s.n}"
    return text + ")"


def _yielded(stat_name: str, result: TestResult, effects: Sequence[tuple[str, float]]) -> str:
    parts = [
        f"{stat_name}({format_df(result.df)}) = {format_number(result.statistic)}",
        p_clause(result.p_value),
    ]
    parts += [f"{name} = {format_number(value)}" for name, value in effects]
    return "The analysis yielded " + ", ".join(parts) + "."


def paired_sentence(result: PairedTTestResult, label_a: str, label_b: str) -> str:
    return (
        f"A paired-samples t-test compared {_describe(label_a, result.summary_a)} "
        f"and {_describe(label_b, result.summary_b)}. "
        + _yielded("t", result, [("dz", result.cohen_dz)])
    )


def one_sample_sentence(result: OneSampleTTestResult, label: str) -> str:
    return (
        f"A one-sample t-test evaluated whether {_describe(label, result.summary)} "
        f"differed from {format_reference(result.mu0)}. "
        + _yielded("t", result, [("d", result.cohen_d)])
    )


def welch_sentence(result: WelchTTestResult, label_a: str, label_b: str) -> str:
    return (
        "A Welch independent-samples t-test compared "
        f"{_describe(label_a, result.summary_a, with_n=True)} "
        f"and {_describe(label_b, result.summary_b, with_n=True)}. "
        + _yielded("t", result, [("d", result.cohen_d), ("g", result.hedges_g)])
    )


def correlation_sentence(result: CorrelationResult, label_x: str, label_y: str) -> str:
    return (
        f"A Pearson correlation assessed the relationship between {label_x} and {label_y} "
        f"(n = {result.n}). "
        + _yielded("t", result, [("r", result.r)])
    )


def _bar_point(label: str, s: NumericSummary) -> ChartPoint:
    return ChartPoint(
        name=label,
        y=finite_or_none(s.mean),
        error=finite_or_none(s.se),
        summary=f"M = {format_number(s.mean)}, SE = {format_number(s.se)}, n = {s.n}",
    )


def bar_chart(
    items: Sequence[tuple[str, NumericSummary]],
    reference: Optional[float] = None,
) -> ChartSeries:
    """Bar chart of means with standard-error bars."""
    return ChartSeries(
        kind=ChartKind.BAR,
        y_label="Mean",
        points=[_bar_point(label, s) for label, s in items],
        reference=finite_or_none(reference),
    )


def scatter_chart(
    x: Sequence[float], y: Sequence[float], label_x: str, label_y: str
) -> ChartSeries:
    """Scatter chart of raw (x, y) pairs."""
    points = [
        ChartPoint(x=finite_or_none(xi), y=finite_or_none(yi), summary=f"({format_number(xi)}, {format_number(yi)})")
        for xi, yi in zip(np.asarray(x, dtype=float), np.asarray(y, dtype=float))
    ]
    return ChartSeries(kind=ChartKind.SCATTER, x_label=label_x, y_label=label_y, points=points)


def build_report(
    result: TestResult,
    labels: Sequence[str],
    pairs: Optional[tuple[Sequence[float], Sequence[float]]] = None,
) -> AnalysisReport:
    """Render a test result into a sentence, display strings and a chart.

    Args:
        result: Output of one of the test procedures
        labels: Variable or group names in the order they were compared
            (one label for a one-sample test, two otherwise)
        pairs: Raw (x, y) vectors; required for correlation scatter charts

    Returns:
        AnalysisReport

    Raises:
        ValueError: If the number of labels does not match the test, or raw
            pairs are missing for a correlation
    """
    labels = [str(label) for label in labels]
    expected = 1 if isinstance(result, OneSampleTTestResult) else 2
    if len(labels) != expected:
        raise ValueError(f"{result.test_name} needs {expected} label(s), got {len(labels)}")

    if isinstance(result, PairedTTestResult):
        mode = "paired"
        n = result.summary_diff.n
        effects = {"dz": result.cohen_dz}
        sentence = paired_sentence(result, labels[0], labels[1])
        chart = bar_chart([(labels[0], result.summary_a), (labels[1], result.summary_b)])
    elif isinstance(result, OneSampleTTestResult):
        mode = "one-sample"
        n = result.summary.n
        effects = {"d": result.cohen_d}
        sentence = one_sample_sentence(result, labels[0])
        chart = bar_chart([(labels[0], result.summary)], reference=result.mu0)
    elif isinstance(result, WelchTTestResult):
        mode = "independent"
        n = result.summary_a.n + result.summary_b.n
        effects = {"d": result.cohen_d, "g": result.hedges_g}
        sentence = welch_sentence(result, labels[0], labels[1])
        chart = bar_chart([(labels[0], result.summary_a), (labels[1], result.summary_b)])
    elif isinstance(result, CorrelationResult):
        if pairs is None:
            raise ValueError("Raw (x, y) pairs are required to chart a correlation")
        mode = "correlation"
        n = result.n
        effects = {"r": result.r}
        sentence = correlation_sentence(result, labels[0], labels[1])
        chart = scatter_chart(pairs[0], pairs[1], labels[0], labels[1])
    else:
        raise TypeError(f"Unsupported result type: {type(result).__name__}")

    formatted = {
        "t": format_number(result.statistic),
        "df": format_df(result.df),
        "p": format_p(result.p_value),
    }
    formatted.update({name: format_number(value) for name, value in effects.items()})

    return AnalysisReport(
        test=result.test_name,
        mode=mode,
        variables=labels,
        n=n,
        statistic=finite_or_none(result.statistic),
        df=finite_or_none(result.df),
        p_value=finite_or_none(result.p_value),
        effect_sizes={name: finite_or_none(value) for name, value in effects.items()},
        formatted=formatted,
        sentence=sentence,
        chart=chart,
    )
