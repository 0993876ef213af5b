"""
Stationarity Check
==================

Unit-root diagnostics run before the Gaussianity test.

Methods:
    - adf:  Augmented Dickey-Fuller. H0 = unit root.
            p < alpha -> reject H0 -> stationary
    - kpss: KPSS. H0 = level stationary.
            p < alpha -> reject H0 -> non-stationary

Usage:
    from gaussianity.core.stationarity import check_stationarity
    result = check_stationarity(values, method='adf')
    result['stationary']
"""

import logging
import warnings
from typing import Any, Dict

import numpy as np
from statsmodels.tools.sm_exceptions import InterpolationWarning
from statsmodels.tsa.stattools import adfuller, kpss

from gaussianity.config import DEFAULT_CONFIG, UNIT_ROOT_METHODS

logger = logging.getLogger(__name__)


def check_stationarity(
    y: np.ndarray,
    method: str = 'adf',
    alpha: float = DEFAULT_CONFIG.alpha,
    min_samples: int = DEFAULT_CONFIG.min_samples.stationarity,
) -> Dict[str, Any]:
    """
    Test a series for a unit root.

    Args:
        y: Signal values (1D, finite)
        method: 'adf' or 'kpss'
        alpha: Significance level
        min_samples: Shorter series are not tested

    Returns:
        dict with:
            stationary: False only when the test finds a unit root
            method: Test used
            statistic: Test statistic
            pvalue: Test p-value
            lags: Lags used
            reason: Present when the series was not tested
    """
    if method not in UNIT_ROOT_METHODS:
        raise ValueError(f"Unknown unit root method {method!r}, expected one of {UNIT_ROOT_METHODS}")

    y = np.asarray(y, dtype=np.float64).ravel()
    n = len(y)

    if n < min_samples:
        logger.debug("stationarity: n=%d < %d, not tested", n, min_samples)
        return _untested(method, f"Insufficient data (need >= {min_samples} points)")

    # Constant signal is trivially stationary
    if np.ptp(y) == 0:
        return {
            'stationary': True,
            'method': method,
            'statistic': -np.inf if method == 'adf' else 0.0,
            'pvalue': 0.0 if method == 'adf' else 1.0,
            'lags': 0,
        }

    if method == 'adf':
        # adf_result: (stat, pvalue, lags, nobs, critical_values, icbest)
        adf_result = adfuller(y, autolag='AIC')
        stat, pvalue, lags = adf_result[0], adf_result[1], adf_result[2]
        stationary = pvalue < alpha
    else:
        # p-values are read off a table and clipped at its ends
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', InterpolationWarning)
            stat, pvalue, lags, _ = kpss(y, regression='c', nlags='auto')
        stationary = pvalue >= alpha

    logger.debug("stationarity: %s stat=%.4f p=%.4f lags=%d", method, stat, pvalue, lags)

    return {
        'stationary': bool(stationary),
        'method': method,
        'statistic': float(stat),
        'pvalue': float(pvalue),
        'lags': int(lags),
    }


def _untested(method: str, reason: str) -> Dict[str, Any]:
    """Result for a series too short to test."""
    return {
        'stationary': True,
        'method': method,
        'statistic': np.nan,
        'pvalue': np.nan,
        'lags': 0,
        'reason': reason,
    }
