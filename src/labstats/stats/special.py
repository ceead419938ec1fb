"""Special functions behind the Student-t p-value.

Log-gamma via the Lanczos approximation, the regularized incomplete beta
function via a modified Lentz continued fraction, and the Student-t CDF built
on top of it. No external statistics library is used.
"""

from __future__ import annotations

import logging
import math

from labstats.errors import InvalidParameterError

logger = logging.getLogger(__name__)

# Lanczos approximation, g = 7
LANCZOS_G = 7.0
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

BETACF_MAX_ITER = 200
BETACF_EPS = 3e-12
BETACF_FPMIN = 1e-30

_HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)


def log_gamma(z: float) -> float:
    """Natural log of |Gamma(z)|.

    Args:
        z: Argument (not a non-positive integer)

    Returns:
        log|Gamma(z)|

    Raises:
        InvalidParameterError: If z is a pole (zero or a negative integer)

    Notes:
        Uses the reflection formula for z < 0.5.
    """
    if z <= 0 and float(z).is_integer():
        raise InvalidParameterError(f"log_gamma is undefined at the pole z = {z}")
    if z < 0.5:
        return math.log(math.pi) - math.log(abs(math.sin(math.pi * z))) - log_gamma(1.0 - z)

    z -= 1.0
    x = LANCZOS_COEFFICIENTS[0]
    for i in range(1, len(LANCZOS_COEFFICIENTS)):
        x += LANCZOS_COEFFICIENTS[i] / (z + i)
    t = z + LANCZOS_G + 0.5
    return _HALF_LOG_2PI + (z + 0.5) * math.log(t) - t + math.log(x)


def betacf(a: float, b: float, x: float) -> float:
    """Continued fraction for the incomplete beta function (modified Lentz).

    Args:
        a: First shape parameter (> 0)
        b: Second shape parameter (> 0)
        x: Point in (0, 1)

    Returns:
        Value of the continued fraction; converges fastest for
        x < (a + 1) / (a + b + 2)
    """
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0

    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < BETACF_FPMIN:
        d = BETACF_FPMIN
    d = 1.0 / d
    h = d

    for m in range(1, BETACF_MAX_ITER + 1):
        m2 = 2 * m

        # Even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < BETACF_FPMIN:
            d = BETACF_FPMIN
        c = 1.0 + aa / c
        if abs(c) < BETACF_FPMIN:
            c = BETACF_FPMIN
        d = 1.0 / d
        h *= d * c

        # Odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < BETACF_FPMIN:
            d = BETACF_FPMIN
        c = 1.0 + aa / c
        if abs(c) < BETACF_FPMIN:
            c = BETACF_FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta

        if abs(delta - 1.0) < BETACF_EPS:
            return h

    logger.warning(
        f"betacf did not converge in {BETACF_MAX_ITER} iterations (a={a}, b={b}, x={x})"
    )
    return h


def regularized_incomplete_beta(a: float, b: float, x: float) -> float:
    """Regularized incomplete beta function I_x(a, b).

    Args:
        a: First shape parameter (> 0)
        b: Second shape parameter (> 0)
        x: Upper integration limit, clamped to [0, 1]

    Returns:
        I_x(a, b) in [0, 1]; exactly 0 at x = 0 and exactly 1 at x = 1
    """
    if math.isnan(x):
        return math.nan
    x = min(max(x, 0.0), 1.0)
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0

    bt = math.exp(
        log_gamma(a + b)
        - log_gamma(a)
        - log_gamma(b)
        + a * math.log(x)
        + b * math.log(1.0 - x)
    )

    if x < (a + 1.0) / (a + b + 2.0):
        return bt * betacf(a, b, x) / a
    return 1.0 - bt * betacf(b, a, 1.0 - x) / b


def student_t_cdf(t: float, df: float) -> float:
    """Cumulative distribution function of Student's t.

    Args:
        t: Test statistic
        df: Degrees of freedom (> 0, need not be an integer)

    Returns:
        P(T <= t)

    Raises:
        InvalidParameterError: If df is not a positive number
    """
    if not df > 0:
        raise InvalidParameterError(f"Degrees of freedom must be positive, got {df}")
    if math.isnan(t):
        return math.nan

    x = df / (df + t * t)
    ib = regularized_incomplete_beta(df / 2.0, 0.5, x)
    if t >= 0:
        return 1.0 - 0.5 * ib
    return 0.5 * ib


def p_two_sided(t: float, df: float) -> float:
    """Two-sided p-value for a t statistic.

    Args:
        t: Test statistic
        df: Degrees of freedom

    Returns:
        2 * (1 - CDF(|t|)), clamped to [0, 1]; NaN if t is NaN
    """
    cdf = student_t_cdf(abs(t), df)
    if math.isnan(cdf):
        return math.nan
    return min(max(2.0 * (1.0 - cdf), 0.0), 1.0)
