"""Tests for table loading and vector extraction."""

import pytest
import numpy as np
import pandas as pd

from labstats.data.columns import ColumnKind
from labstats.data.loaders import (
    LoadedTable,
    grouped_vectors,
    load_table,
    numeric_pair,
    numeric_vector,
    table_from_frame,
)
from labstats.errors import InvalidParameterError


def test_load_table_strips_headers(lab_csv):
    table = load_table(lab_csv)

    assert list(table.frame.columns) == ["Subject", "LVF", "RVF", "Lateralization Index", "Condition"]
    assert table.n_rows == 6
    assert table.source == lab_csv


def test_load_table_kinds(lab_csv):
    table = load_table(lab_csv)

    assert table.numeric_columns == ["LVF", "RVF", "Lateralization Index"]
    assert "Condition" in table.categorical_columns
    assert table.kind_of("LVF") == ColumnKind.NUMERIC


def test_load_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_table(tmp_path / "nope.csv")


def test_load_table_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(InvalidParameterError):
        load_table(path)


def test_load_table_cp1252_export(tmp_path):
    """Excel's Windows CSV export is cp1252, not UTF-8."""
    path = tmp_path / "excel.csv"
    path.write_bytes("Subject,RT µs,Café\ns1,1.5,2.5\ns2,2.5,3.0\ns3,3.5,4.5\n".encode("cp1252"))

    table = load_table(path)

    assert list(table.frame.columns) == ["Subject", "RT µs", "Café"]
    assert table.numeric_columns == ["RT µs", "Café"]


def test_load_table_utf8_bom(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_text("LVF,RVF\n1,2\n3,4\n5,6\n", encoding="utf-8-sig")

    table = load_table(path)

    assert list(table.frame.columns) == ["LVF", "RVF"]


def test_load_table_malformed_rows(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("a,b\n1,2\n3,4,5,6\n", encoding="utf-8")

    with pytest.raises(InvalidParameterError, match="well-formed"):
        load_table(path)


def test_kind_of_unknown_column(lab_frame):
    table = table_from_frame(lab_frame)

    with pytest.raises(InvalidParameterError, match="not found"):
        table.kind_of("LI")


def test_duplicate_columns_rejected():
    df = pd.DataFrame([[1, 2], [3, 4]], columns=["a ", "a"])

    with pytest.raises(InvalidParameterError, match="Duplicate"):
        table_from_frame(df)


def test_loaded_table_requires_kinds():
    with pytest.raises(ValueError):
        LoadedTable(frame=pd.DataFrame({"a": [1, 2, 3]}), kinds={})


def test_numeric_pair_drops_incomplete_rows(lab_csv):
    table = load_table(lab_csv)

    lvf, rvf = numeric_pair(table, "LVF", "RVF")

    assert len(lvf) == len(rvf) == 5
    np.testing.assert_allclose(lvf, [512, 498, 530, 505, 520])
    np.testing.assert_allclose(rvf, [540, 530, 529, 561, 548])


def test_numeric_pair_rejects_categorical(lab_csv):
    table = load_table(lab_csv)

    with pytest.raises(InvalidParameterError, match="expected numeric"):
        numeric_pair(table, "LVF", "Condition")


def test_numeric_pair_requires_distinct_columns(lab_csv):
    table = load_table(lab_csv)

    with pytest.raises(InvalidParameterError):
        numeric_pair(table, "LVF", "LVF")


def test_numeric_vector(lab_csv):
    table = load_table(lab_csv)

    li = numeric_vector(table, "Lateralization Index")
    lvf = numeric_vector(table, "LVF")

    assert len(li) == 6
    assert len(lvf) == 5
    assert li.dtype == float


def test_grouped_vectors_order_of_appearance(lab_csv):
    table = load_table(lab_csv)

    (label_a, a), (label_b, b) = grouped_vectors(table, "LVF", "Condition")

    assert (label_a, label_b) == ("A", "B")
    np.testing.assert_allclose(a, [512, 530])
    np.testing.assert_allclose(b, [498, 505, 520])


def test_grouped_vectors_explicit_groups(lab_csv):
    table = load_table(lab_csv)

    (label_a, a), (label_b, _) = grouped_vectors(table, "RVF", "Condition", groups=["B", "A"])

    assert (label_a, label_b) == ("B", "A")
    np.testing.assert_allclose(a, [530, 561, 548])


def test_grouped_vectors_unknown_group(lab_csv):
    table = load_table(lab_csv)

    with pytest.raises(InvalidParameterError, match="not found"):
        grouped_vectors(table, "RVF", "Condition", groups=["A", "C"])


def test_grouped_vectors_needs_two_groups(lab_csv):
    table = load_table(lab_csv)

    with pytest.raises(InvalidParameterError, match="exactly 2 groups"):
        grouped_vectors(table, "RVF", "Subject")


def test_grouped_vectors_duplicate_groups(lab_csv):
    table = load_table(lab_csv)

    with pytest.raises(InvalidParameterError):
        grouped_vectors(table, "RVF", "Condition", groups=["A", "A"])


def test_grouped_vectors_number_coded_groups():
    """Integer group codes read as float because of a blank cell keep their integer labels."""
    df = pd.DataFrame(
        {
            "score": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0],
            "arm": [1, 2, 1, np.nan, 2, 1, 2],
        }
    )
    table = table_from_frame(df)
    assert table.frame["arm"].dtype == float

    (label_a, a), (label_b, b) = grouped_vectors(table, "score", "arm")
    assert (label_a, label_b) == ("1", "2")
    np.testing.assert_array_equal(a, [1.0, 3.0, 6.0])
    np.testing.assert_array_equal(b, [2.0, 5.0, 7.0])

    (label_a, _), (label_b, _) = grouped_vectors(table, "score", "arm", groups=["2", "1.0"])
    assert (label_a, label_b) == ("2", "1")
