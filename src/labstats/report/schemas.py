"""Report JSON schemas for test results and chart series.

This module defines Pydantic models that carry a formatted test result and
its chart-ready series to whatever renders them (CLI, plotting, a web UI).
Non-finite numbers are stored as None.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ChartKind(str, Enum):
    """Type of chart."""

    BAR = "bar"
    SCATTER = "scatter"


class ChartPoint(BaseModel):
    """One bar or one scatter point."""

    name: Optional[str] = Field(
        default=None,
        description="Category label for bar charts (variable or group name)"
    )
    x: Optional[float] = Field(
        default=None,
        description="X value for scatter charts"
    )
    y: Optional[float] = Field(
        ...,
        description="Bar height (mean) or scatter Y value"
    )
    error: Optional[float] = Field(
        default=None,
        description="Half-width of the error bar (standard error)"
    )
    summary: Optional[str] = Field(
        default=None,
        description="Short human-readable summary, e.g. 'M = 3.00, SE = 0.71, n = 5'"
    )


class ChartSeries(BaseModel):
    """Chart-ready data for a single test."""

    kind: ChartKind = Field(..., description="'bar' or 'scatter'")
    x_label: str = Field(default="", description="X axis label")
    y_label: str = Field(default="", description="Y axis label")
    points: list[ChartPoint] = Field(default_factory=list)
    reference: Optional[float] = Field(
        default=None,
        description="Reference value drawn as a horizontal line (one-sample test)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "kind": "bar",
                "x_label": "",
                "y_label": "Mean",
                "points": [
                    {"name": "LVF", "y": 3.0, "error": 0.71, "summary": "M = 3.00, SE = 0.71, n = 5"},
                    {"name": "RVF", "y": 4.0, "error": 0.71, "summary": "M = 4.00, SE = 0.71, n = 5"},
                ],
            }
        }


class AnalysisReport(BaseModel):
    """Complete output of one analysis."""

    test: str = Field(..., description="Name of the procedure that was run")
    mode: str = Field(..., description="Analysis mode: paired, one-sample, independent, correlation")
    variables: list[str] = Field(..., description="Variable or group labels in the order compared")
    n: int = Field(..., description="Number of rows (or pairs) used after dropping incomplete rows")
    statistic: Optional[float] = Field(default=None, description="t statistic")
    df: Optional[float] = Field(default=None, description="Degrees of freedom")
    p_value: Optional[float] = Field(default=None, description="Two-sided p-value")
    effect_sizes: dict[str, Optional[float]] = Field(
        default_factory=dict,
        description="Effect sizes keyed by name (dz, d, g, r)"
    )
    formatted: dict[str, str] = Field(
        default_factory=dict,
        description="Display strings for t, df, p and each effect size"
    )
    sentence: str = Field(..., description="APA-style result sentence")
    chart: ChartSeries

    class Config:
        json_schema_extra = {
            "example": {
                "test": "Paired t-test",
                "mode": "paired",
                "variables": ["LVF", "RVF"],
                "n": 5,
                "statistic": -3.16,
                "df": 4.0,
                "p_value": 0.034,
                "effect_sizes": {"dz": -1.41},
                "formatted": {"t": "-3.16", "df": "4", "p": ".034", "dz": "-1.41"},
                "sentence": "A paired-samples t-test compared ...",
                "chart": {"kind": "bar", "points": []},
            }
        }
