"""
Gaussianity: Lobato and Velasco's test of normality for stationary time series.

Public API:
    from gaussianity import run_test, compute_statistic
    result = run_test(y, c=1)
    G = compute_statistic(y, c=1)

Layers:
    gaussianity.core        Engines: arrays in, numbers out (statistic, diagnostics)
    gaussianity.run         Runner: validate, diagnose, compute, p-value
    gaussianity.validation  Input adapter and input errors
    gaussianity.config      Defaults and YAML configuration
    gaussianity.io          File readers (parquet, CSV)
"""

from gaussianity.core.lobato import compute_statistic, NumericDomainError
from gaussianity.result import TestResult
from gaussianity.run import run_test, NonStationaryWarning
from gaussianity.validation import (
    TimeSeries,
    ValidationError,
    InvalidInputError,
    MissingValueError,
)

__all__ = [
    'run_test',
    'compute_statistic',
    'TestResult',
    'TimeSeries',
    'ValidationError',
    'InvalidInputError',
    'MissingValueError',
    'NumericDomainError',
    'NonStationaryWarning',
]
