"""Column type classification for uploaded tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np
import pandas as pd


class ColumnKind(str, Enum):
    """Inferred role of a column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    UNUSABLE = "unusable"


@dataclass(frozen=True)
class ColumnThresholds:
    """
    Thresholds for column classification.

    Attributes
    ----------
    min_non_empty : int
        Minimum number of non-empty cells for a column to be usable
    numeric_ratio : float
        Minimum fraction of non-empty cells that must parse as finite numbers
        for the column to count as numeric
    max_categories : int
        Maximum number of distinct values for a categorical column
    """

    min_non_empty: int = 3
    numeric_ratio: float = 0.8
    max_categories: int = 10

    def __post_init__(self):
        if self.min_non_empty < 1:
            raise ValueError(f"min_non_empty must be >= 1, got {self.min_non_empty}")
        if not 0 < self.numeric_ratio <= 1:
            raise ValueError(f"numeric_ratio must be in (0, 1], got {self.numeric_ratio}")
        if self.max_categories < 2:
            raise ValueError(f"max_categories must be >= 2, got {self.max_categories}")


def non_empty(values: pd.Series) -> pd.Series:
    """Drop missing cells and cells that are blank after stripping."""
    values = values.dropna()
    if not pd.api.types.is_numeric_dtype(values):
        stripped = values.astype(str).str.strip()
        values = values[stripped != ""]
    return values


def coerce_numeric(values: pd.Series) -> pd.Series:
    """
    Convert a column to float, mapping unparseable cells to NaN.

    Parameters
    ----------
    values : pd.Series
        Raw column

    Returns
    -------
    pd.Series
        Float series; infinities are treated as missing
    """
    if not pd.api.types.is_numeric_dtype(values):
        values = values.astype(str).str.strip()
    numeric = pd.to_numeric(values, errors="coerce").astype(float)
    return numeric.where(np.isfinite(numeric))


def classify_column(values: pd.Series, thresholds: Optional[ColumnThresholds] = None) -> ColumnKind:
    """
    Classify one column as numeric, categorical or unusable.

    Parameters
    ----------
    values : pd.Series
        Raw column values
    thresholds : ColumnThresholds, optional
        Classification thresholds (defaults used if None)

    Returns
    -------
    ColumnKind
        NUMERIC if at least ``numeric_ratio`` of the non-empty cells are finite
        numbers; CATEGORICAL if it has between 2 and ``max_categories``
        distinct values; UNUSABLE otherwise (including columns with fewer than
        ``min_non_empty`` non-empty cells)
    """
    thresholds = thresholds or ColumnThresholds()

    present = non_empty(values)
    n_present = len(present)
    if n_present < thresholds.min_non_empty:
        return ColumnKind.UNUSABLE

    n_numeric = int(coerce_numeric(present).notna().sum())
    if n_numeric / n_present >= thresholds.numeric_ratio:
        return ColumnKind.NUMERIC

    n_distinct = present.astype(str).str.strip().nunique()
    if 2 <= n_distinct <= thresholds.max_categories:
        return ColumnKind.CATEGORICAL

    return ColumnKind.UNUSABLE


def classify_columns(
    df: pd.DataFrame, thresholds: Optional[ColumnThresholds] = None
) -> Dict[str, ColumnKind]:
    """Classify every column of a dataframe, preserving column order."""
    return {str(col): classify_column(df[col], thresholds) for col in df.columns}
