"""
Data loading layer for labstats.

Loads a CSV export once, classifies its columns (numeric, categorical,
unusable) and hands the test procedures plain float vectors.

Example usage:
    from labstats.data import load_table, numeric_pair

    table = load_table(Path("lab.csv"))
    lvf, rvf = numeric_pair(table, "LVF", "RVF")
"""

from labstats.data.columns import (
    ColumnKind,
    ColumnThresholds,
    classify_column,
    classify_columns,
    coerce_numeric,
)
from labstats.data.loaders import (
    LoadedTable,
    grouped_vectors,
    load_table,
    numeric_pair,
    numeric_vector,
    table_from_frame,
)

__all__ = [
    # Column classification
    "ColumnKind",
    "ColumnThresholds",
    "classify_column",
    "classify_columns",
    "coerce_numeric",
    # Loaders
    "LoadedTable",
    "load_table",
    "table_from_frame",
    "numeric_vector",
    "numeric_pair",
    "grouped_vectors",
]
