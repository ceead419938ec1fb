"""Data loading functions for labstats.

This module loads a spreadsheet export (CSV) once, classifies its columns, and
extracts the aligned numeric vectors the test procedures consume. Rows with a
missing or non-numeric value in any required column are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from labstats.data.columns import (
    ColumnKind,
    ColumnThresholds,
    classify_columns,
    coerce_numeric,
    non_empty,
)
from labstats.errors import InvalidParameterError

logger = logging.getLogger(__name__)

# Excel on Windows saves CSV as cp1252; latin-1 accepts any byte sequence
CSV_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


@dataclass
class LoadedTable:
    """
    Container for a loaded table and its column classification.

    Parameters
    ----------
    frame : pd.DataFrame
        Raw table with stripped column names
    kinds : Dict[str, ColumnKind]
        Column name -> inferred kind, in column order
    source : Path, optional
        File the table was read from

    Examples
    --------
    >>> table = load_table(Path("lab.csv"))
    >>> table.numeric_columns
    ['LVF', 'RVF', 'Lateralization Index']
    """

    frame: pd.DataFrame
    kinds: Dict[str, ColumnKind] = field(default_factory=dict)
    source: Optional[Path] = None

    def __post_init__(self):
        """Validate that every column has a kind."""
        missing = [c for c in self.frame.columns if c not in self.kinds]
        if missing:
            raise ValueError(f"Columns without a kind: {missing}")

    @property
    def n_rows(self) -> int:
        """Number of rows."""
        return len(self.frame)

    @property
    def numeric_columns(self) -> List[str]:
        """Columns classified as numeric."""
        return [c for c, k in self.kinds.items() if k == ColumnKind.NUMERIC]

    @property
    def categorical_columns(self) -> List[str]:
        """Columns classified as categorical."""
        return [c for c, k in self.kinds.items() if k == ColumnKind.CATEGORICAL]

    def kind_of(self, column: str) -> ColumnKind:
        """
        Look up the kind of a column.

        Raises
        ------
        InvalidParameterError
            If the column does not exist
        """
        if column not in self.kinds:
            raise InvalidParameterError(
                f"Column '{column}' not found. Available: {list(self.kinds)[:10]}"
            )
        return self.kinds[column]


def table_from_frame(
    df: pd.DataFrame,
    thresholds: Optional[ColumnThresholds] = None,
    source: Optional[Path] = None,
) -> LoadedTable:
    """
    Build a LoadedTable from an in-memory dataframe.

    Parameters
    ----------
    df : pd.DataFrame
        Raw table
    thresholds : ColumnThresholds, optional
        Column classification thresholds
    source : Path, optional
        Originating file, kept for messages

    Returns
    -------
    LoadedTable
    """
    df = df.copy()
    df.columns = [str(c).strip() for c in df.columns]
    if df.columns.duplicated().any():
        dupes = sorted(set(df.columns[df.columns.duplicated()]))
        raise InvalidParameterError(f"Duplicate column names: {dupes}")

    kinds = classify_columns(df, thresholds)
    return LoadedTable(frame=df, kinds=kinds, source=source)


def _read_csv_with_encoding(path: Path) -> pd.DataFrame:
    """Read a CSV, trying each of CSV_ENCODINGS in turn until one decodes."""
    last_error: Optional[Exception] = None
    for encoding in CSV_ENCODINGS:
        try:
            return pd.read_csv(path, skipinitialspace=True, encoding=encoding)
        except UnicodeDecodeError as exc:
            logger.debug(f"{path} is not {encoding}: {exc}")
            last_error = exc
        except pd.errors.EmptyDataError as exc:
            raise InvalidParameterError(f"Data file is empty: {path}") from exc
        except pd.errors.ParserError as exc:
            raise InvalidParameterError(f"Data file is not a well-formed CSV: {path}: {exc}") from exc

    raise InvalidParameterError(
        f"Could not decode {path} with any of {list(CSV_ENCODINGS)}"
    ) from last_error


def load_table(path: Path, thresholds: Optional[ColumnThresholds] = None) -> LoadedTable:
    """
    Load a CSV export and classify its columns.

    Parameters
    ----------
    path : Path
        Path to a .csv file (Excel: File -> Save As -> CSV)
    thresholds : ColumnThresholds, optional
        Column classification thresholds

    Returns
    -------
    LoadedTable

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    InvalidParameterError
        If the file is empty, malformed or cannot be decoded
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    logger.info(f"Loading table from {path}")
    df = _read_csv_with_encoding(path)

    table = table_from_frame(df, thresholds, source=path)
    logger.info(
        f"Loaded {table.n_rows} rows: {len(table.numeric_columns)} numeric, "
        f"{len(table.categorical_columns)} categorical columns"
    )
    return table


def _require_numeric(table: LoadedTable, column: str) -> None:
    kind = table.kind_of(column)
    if kind != ColumnKind.NUMERIC:
        raise InvalidParameterError(f"Column '{column}' is {kind.value}, expected numeric")


def _log_dropped(n_total: int, n_kept: int, columns: Sequence[str]) -> None:
    if n_kept < n_total:
        logger.info(
            f"Dropped {n_total - n_kept} of {n_total} rows with missing or non-numeric "
            f"values in {list(columns)}"
        )


def numeric_vector(table: LoadedTable, column: str) -> np.ndarray:
    """
    Extract one numeric column, dropping rows where it is not a finite number.

    Returns
    -------
    np.ndarray
        Float64 vector
    """
    _require_numeric(table, column)
    values = coerce_numeric(table.frame[column]).dropna()
    _log_dropped(table.n_rows, len(values), [column])
    return values.to_numpy(dtype=float)


def numeric_pair(table: LoadedTable, col_a: str, col_b: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Extract two aligned numeric columns.

    A row is kept only if both columns hold finite numbers, so the returned
    vectors are parallel (same length, same row order).

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
    """
    if col_a == col_b:
        raise InvalidParameterError(f"Two different columns are required, got '{col_a}' twice")
    _require_numeric(table, col_a)
    _require_numeric(table, col_b)

    both = pd.DataFrame(
        {"a": coerce_numeric(table.frame[col_a]), "b": coerce_numeric(table.frame[col_b])}
    ).dropna()
    _log_dropped(table.n_rows, len(both), [col_a, col_b])
    return both["a"].to_numpy(dtype=float), both["b"].to_numpy(dtype=float)


def _label_text(value) -> str:
    """Render a group label, writing integral numbers without a decimal part."""
    if isinstance(value, (int, float, np.number)) and float(value).is_integer():
        return str(int(value))
    return str(value).strip()


def _numeric_label(text: str) -> str:
    """Normalize a user-given label for a number-coded grouping column ("2.0" -> "2")."""
    try:
        return _label_text(float(text))
    except ValueError:
        return text


def grouped_vectors(
    table: LoadedTable,
    value_col: str,
    group_col: str,
    groups: Optional[Sequence[str]] = None,
) -> Tuple[Tuple[str, np.ndarray], Tuple[str, np.ndarray]]:
    """
    Split a numeric column into two independent groups.

    Parameters
    ----------
    table : LoadedTable
        Loaded table
    value_col : str
        Numeric outcome column
    group_col : str
        Grouping column
    groups : Sequence[str], optional
        The two group labels to compare, in order. If None, the grouping
        column must contain exactly two distinct values (order of appearance)

    Returns
    -------
    Tuple
        ((label_a, values_a), (label_b, values_b))

    Raises
    ------
    InvalidParameterError
        If the grouping does not resolve to exactly two distinct groups
    """
    if value_col == group_col:
        raise InvalidParameterError("Value and grouping columns must differ")
    _require_numeric(table, value_col)
    if table.kind_of(group_col) == ColumnKind.UNUSABLE:
        raise InvalidParameterError(f"Column '{group_col}' cannot be used for grouping")

    raw_labels = non_empty(table.frame[group_col])
    numeric_labels = pd.api.types.is_numeric_dtype(raw_labels)
    # A missing cell makes pandas read integer codes as float
    labels = raw_labels.map(_label_text)
    values = coerce_numeric(table.frame[value_col])
    sub = pd.DataFrame({"group": labels, "value": values}).dropna()
    _log_dropped(table.n_rows, len(sub), [value_col, group_col])

    present = list(pd.unique(sub["group"]))
    if groups is None:
        if len(present) != 2:
            raise InvalidParameterError(
                f"Grouping column '{group_col}' must have exactly 2 groups, found {len(present)}: "
                f"{present[:10]}"
            )
        selected = present
    else:
        selected = [str(g).strip() for g in groups]
        if numeric_labels:
            selected = [_numeric_label(g) for g in selected]
        if len(selected) != 2 or selected[0] == selected[1]:
            raise InvalidParameterError(f"Exactly 2 distinct groups are required, got {list(groups)}")
        unknown = [g for g in selected if g not in present]
        if unknown:
            raise InvalidParameterError(
                f"Groups {unknown} not found in column '{group_col}'. Available: {present[:10]}"
            )

    return tuple(
        (g, sub.loc[sub["group"] == g, "value"].to_numpy(dtype=float)) for g in selected
    )
