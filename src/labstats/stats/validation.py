"""Input checks run before any statistic is computed."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from labstats.errors import InsufficientDataError, InvalidParameterError

MIN_N_PAIRED = 3
MIN_N_ONE_SAMPLE = 3
MIN_N_WELCH = 2
MIN_N_CORRELATION = 4


def as_sample(values: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    """Convert values to a 1-D float array of finite numbers.

    Args:
        values: Input values
        name: Argument name, used in error messages

    Returns:
        Float64 array

    Raises:
        InvalidParameterError: If values are not numeric, not 1-D, or not finite
    """
    try:
        x = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be a sequence of numbers") from exc

    if x.ndim != 1:
        raise InvalidParameterError(f"{name} must be one-dimensional, got shape {x.shape}")
    if not np.all(np.isfinite(x)):
        raise InvalidParameterError(f"{name} contains missing or non-finite values")
    return x


def require_min_n(x: np.ndarray, minimum: int, name: str, procedure: str) -> None:
    """Raise InsufficientDataError if len(x) < minimum."""
    n = len(x)
    if n < minimum:
        raise InsufficientDataError(
            f"{procedure} requires at least {minimum} observations in {name}, got {n}",
            n=n,
            minimum=minimum,
        )


def require_same_length(a: np.ndarray, b: np.ndarray, procedure: str) -> None:
    if len(a) != len(b):
        raise InvalidParameterError(
            f"{procedure} requires equal-length samples, got {len(a)} and {len(b)}"
        )


def require_finite_reference(mu0: float) -> float:
    """Validate the reference value of a one-sample test."""
    try:
        mu0 = float(mu0)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"Reference value must be a number, got {mu0!r}") from exc
    if not math.isfinite(mu0):
        raise InvalidParameterError(f"Reference value must be finite, got {mu0}")
    return mu0
