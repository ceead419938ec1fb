"""Result formatting: APA sentences, chart series and plots."""

from labstats.report.formatter import (
    build_report,
    format_df,
    format_number,
    format_p,
    p_clause,
)
from labstats.report.schemas import AnalysisReport, ChartKind, ChartPoint, ChartSeries

__all__ = [
    "build_report",
    "format_number",
    "format_df",
    "format_p",
    "p_clause",
    "AnalysisReport",
    "ChartKind",
    "ChartPoint",
    "ChartSeries",
]
