"""Error taxonomy for labstats.

InsufficientDataError and InvalidParameterError are raised before any
statistic is computed. Degenerate computations (zero variance, perfect
correlation) are not errors: they produce non-finite fields that the
report formatter renders as "NA".
"""

from __future__ import annotations


class LabStatsError(Exception):
    """Base class for all labstats errors."""


class InsufficientDataError(LabStatsError, ValueError):
    """Sample size is below the minimum required by a procedure."""

    def __init__(self, message: str, n: int | None = None, minimum: int | None = None):
        super().__init__(message)
        self.n = n
        self.minimum = minimum


class InvalidParameterError(LabStatsError, ValueError):
    """A user-supplied value, column or option cannot be used."""
