"""
labstats: Automatic hypothesis testing and APA-style reporting for lab data.

This package provides:
- Numerically careful summary statistics and exact Student-t p-values
- Paired, one-sample, Welch and Pearson correlation tests with effect sizes
- APA-style result sentences and chart-ready series
- CSV loading with explicit column classification
- CLI tools
"""

__version__ = "0.1.0"

from labstats.api import analyze_file, choose_mode, run_analysis
from labstats.config import AnalysisConfig, AnalysisMode
from labstats.errors import InsufficientDataError, InvalidParameterError, LabStatsError

__all__ = [
    "__version__",
    "analyze_file",
    "run_analysis",
    "choose_mode",
    "AnalysisConfig",
    "AnalysisMode",
    "LabStatsError",
    "InsufficientDataError",
    "InvalidParameterError",
]
