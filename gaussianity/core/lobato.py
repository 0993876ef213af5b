"""
Lobato-Velasco Statistic Engine.

Skewness-kurtosis statistic studentized by variance estimators that stay
consistent under serial dependence (Lobato & Velasco, 2004).

    G = n * ( mu3^2 / (6 F3) + (mu4 - 3 mu2^2)^2 / (24 F4) )

    F3 = | 2 sum_j gamma_j (gamma_j + gamma_{hn+1-j})^2 + mu2^3 |
    F4 = | 2 sum_j gamma_j (gamma_j + gamma_{hn+1-j})^3 + mu2^4 |

with hn = ceil(c * sqrt(n) - 1) sample autocovariance lags.

Under H0 (stationary Gaussian process) G ~ chi-squared with 2 df.

References:
    Lobato, I., & Velasco, C. (2004). A simple test of normality in time
    series. Econometric Theory, 20(4), 671-689.

    Nieto-Reyes, A., Cuesta-Albertos, J. & Gamboa, F. (2014). A
    random-projection based test of Gaussianity for stationary processes.
    Computational Statistics & Data Analysis, 75, 124-141.
"""

import logging
import math
from typing import Tuple

import numpy as np

from gaussianity.core._stats import central_moments
from gaussianity.validation import InvalidInputError, validate_bandwidth, validate_values

logger = logging.getLogger(__name__)

# Autocovariance at a lag with degenerate arithmetic is defined as zero.
DEGENERATE_LAG_AUTOCOVARIANCE = 0.0


class NumericDomainError(ArithmeticError):
    """The series is constant or a variance estimator is zero or non-finite, so G is undefined."""


def lag_count(n: int, c: float = 1.0) -> int:
    """
    Number of autocovariance lags hn = ceil(c * sqrt(n) - 1).

    Clamped to 1 when a small c (or n) would give zero or fewer lags.
    """
    hn = math.ceil(c * math.sqrt(n) - 1)
    if hn < 1:
        logger.debug("lag count %d for n=%d, c=%g clamped to 1", hn, n, c)
        return 1
    return hn


def autocovariances(y: np.ndarray, hn: int, mu1: float) -> np.ndarray:
    """
    Biased sample autocovariances at lags 1..hn.

    Each lag j pairs the first n-j observations with the last n-j and divides
    by n. Lags with n-j <= 0 and lags whose arithmetic degenerates to NaN are
    DEGENERATE_LAG_AUTOCOVARIANCE.
    """
    n = len(y)
    centered = y - mu1
    gamma = np.full(hn, DEGENERATE_LAG_AUTOCOVARIANCE, dtype=np.float64)
    for j in range(1, min(hn, n - 1) + 1):
        gamma[j - 1] = np.dot(centered[:n - j], centered[j:]) / n
    gamma[np.isnan(gamma)] = DEGENERATE_LAG_AUTOCOVARIANCE
    return gamma


def variance_estimators(gamma: np.ndarray, mu2: float) -> Tuple[float, float]:
    """
    F3 and F4: serial-dependence-consistent variances of mu3 and mu4 - 3 mu2^2.

    Each lag is folded with its mirror lag (gamma read back to front).
    """
    folded = gamma + gamma[::-1]
    f3 = abs(2.0 * np.sum(gamma * folded ** 2) + mu2 ** 3)
    f4 = abs(2.0 * np.sum(gamma * folded ** 3) + mu2 ** 4)
    return float(f3), float(f4)


def compute_statistic(y, c: float = 1.0) -> float:
    """
    Compute the Lobato and Velasco statistic.

    Args:
        y: Series values (1D, finite, n >= 2)
        c: Positive bandwidth scalar controlling the number of lags

    Returns:
        G, non-negative; asymptotically chi-squared(2) under Gaussianity

    Raises:
        InvalidInputError: c not positive, y not numeric, infinite, or shorter than 2
        MissingValueError: y contains NaN entries
        NumericDomainError: y is constant, or F3 or F4 is zero
    """
    c = validate_bandwidth(c)

    try:
        y = np.asarray(y, dtype=np.float64).ravel()
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"y must be a numeric sequence: {e}") from e
    validate_values(y)
    n = len(y)

    # mean of a constant is not always exact, leaving mu2 a rounding residue
    if np.ptp(y) == 0:
        raise NumericDomainError("y is constant; skewness and kurtosis are undefined")

    moments = central_moments(y)
    hn = lag_count(n, c)
    gamma = autocovariances(y, hn, moments.mu1)
    f3, f4 = variance_estimators(gamma, moments.mu2)

    logger.debug(
        "lobato: n=%d hn=%d mu2=%.6g mu3=%.6g mu4=%.6g F3=%.6g F4=%.6g",
        n, hn, moments.mu2, moments.mu3, moments.mu4, f3, f4,
    )

    if f3 == 0 or f4 == 0 or not (math.isfinite(f3) and math.isfinite(f4)):
        raise NumericDomainError(
            f"variance estimators are degenerate (F3={f3}, F4={f4}); "
            "the series is constant or numerically degenerate"
        )

    excess = moments.mu4 - 3.0 * moments.mu2 ** 2
    return float(n * (moments.mu3 ** 2 / (6.0 * f3) + excess ** 2 / (24.0 * f4)))
