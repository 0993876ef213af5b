"""
Gaussianity Validation Module

Validates caller input before any statistic is computed.

Exports:
    - as_series: Adapt array-likes into a validated TimeSeries
    - validate_values: Check a float vector for missing/infinite entries
    - validate_bandwidth: Check the lag-window scalar c
    - TimeSeries: Values plus optional sampling frequency and label
    - ValidationError: Base class for input failures
    - InvalidInputError: Raised when input is not a numeric sequence
    - MissingValueError: Raised when input has missing values
"""

from .input_validation import (
    as_series,
    validate_values,
    validate_frequency,
    validate_bandwidth,
    TimeSeries,
    ValidationError,
    InvalidInputError,
    MissingValueError,
)

__all__ = [
    'as_series',
    'validate_values',
    'validate_frequency',
    'validate_bandwidth',
    'TimeSeries',
    'ValidationError',
    'InvalidInputError',
    'MissingValueError',
]
