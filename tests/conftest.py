"""Pytest configuration and fixtures."""

import pytest
import numpy as np
import pandas as pd
from pathlib import Path

LAB_CSV = """Subject, LVF,RVF ,Lateralization Index,Condition
s1,512,540,-0.027,A
s2,498,530,-0.031,B
s3,530,529,0.001,A
s4,505,561,-0.053,B
s5,n/a,550,0.0,A
s6,520,548,-0.026,B
"""


@pytest.fixture
def lab_csv(tmp_path) -> Path:
    """Write a small lateralization-lab export with one incomplete row."""
    path = tmp_path / "lab.csv"
    path.write_text(LAB_CSV, encoding="utf-8")
    return path


@pytest.fixture
def lab_frame():
    """Same data as lab_csv, in memory."""
    return pd.DataFrame(
        {
            "Subject": ["s1", "s2", "s3", "s4", "s5", "s6"],
            "LVF": [512, 498, 530, 505, np.nan, 520],
            "RVF": [540, 530, 529, 561, 550, 548],
            "Lateralization Index": [-0.027, -0.031, 0.001, -0.053, 0.0, -0.026],
            "Condition": ["A", "B", "A", "B", "A", "B"],
        }
    )


@pytest.fixture
def random_pair():
    """Generate two correlated normal samples."""
    rng = np.random.default_rng(42)
    x = rng.normal(10.0, 2.0, 40)
    y = 0.6 * x + rng.normal(3.0, 1.5, 40)
    return x, y


@pytest.fixture
def temp_outdir(tmp_path):
    """Provide temporary output directory."""
    outdir = tmp_path / "derived"
    outdir.mkdir()
    return outdir
