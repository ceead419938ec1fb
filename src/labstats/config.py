"""Configuration dataclasses for labstats analyses."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from labstats.data.columns import ColumnThresholds
from labstats.errors import InvalidParameterError


class AnalysisMode(str, Enum):
    """Which test to run."""

    AUTO = "auto"
    PAIRED = "paired"
    ONE_SAMPLE = "one-sample"
    INDEPENDENT = "independent"
    CORRELATION = "correlation"

    @classmethod
    def parse(cls, value: "AnalysisMode | str") -> "AnalysisMode":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError as exc:
            valid = [m.value for m in cls]
            raise InvalidParameterError(f"mode must be one of {valid}, got {value!r}") from exc


@dataclass
class AnalysisConfig:
    """Configuration for a single analysis run.

    Attributes:
        data_csv: Path to the uploaded CSV export
        col_a: First column (outcome column for independent-samples tests)
        col_b: Second column, or grouping column for independent-samples
            tests; None for a one-sample test
        mode: Analysis mode (default: auto)
        mu0: Reference value for the one-sample test (default: 0)
        groups: Optional pair of group labels to compare
        thresholds: Column classification thresholds
    """

    data_csv: Path
    col_a: str
    col_b: Optional[str] = None
    mode: AnalysisMode = AnalysisMode.AUTO
    mu0: float = 0.0
    groups: Optional[List[str]] = None
    thresholds: ColumnThresholds = field(default_factory=ColumnThresholds)

    def __post_init__(self):
        """Validate configuration."""
        self.data_csv = Path(self.data_csv)
        self.mode = AnalysisMode.parse(self.mode)

        if not self.data_csv.exists():
            raise FileNotFoundError(f"Data CSV not found: {self.data_csv}")

        try:
            self.mu0 = float(self.mu0)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(f"mu0 must be a number, got {self.mu0!r}") from exc
        if not math.isfinite(self.mu0):
            raise InvalidParameterError(f"mu0 must be finite, got {self.mu0}")

        if self.mode in (AnalysisMode.PAIRED, AnalysisMode.INDEPENDENT, AnalysisMode.CORRELATION):
            if self.col_b is None:
                raise InvalidParameterError(f"mode '{self.mode.value}' requires a second column")

        if self.groups is not None and len(self.groups) != 2:
            raise InvalidParameterError(f"groups must name exactly 2 groups, got {self.groups}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dict with Path objects as strings."""
        d = asdict(self)
        d["data_csv"] = str(self.data_csv)
        d["mode"] = self.mode.value
        return d
