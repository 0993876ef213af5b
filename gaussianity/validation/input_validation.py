"""
Input Validation

Converts caller input into the one concrete series type the engine accepts.
All input errors are raised here, before any numeric work.

PRINCIPLE: "Dispatch on input shape at the boundary, never inside the engine"

Usage:
    from gaussianity.validation import as_series

    series = as_series([0.1, -0.4, 0.7], frequency=1, name='returns')
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, List, Optional

import numpy as np


class ValidationError(Exception):
    """
    Base class for rejected series or parameters.

    errors holds every problem found; str() lists each as an ERROR line.
    """

    def __init__(self, errors: List[str], warnings: List[str] = None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        self.warnings = warnings or []

        message = "Input validation failed:\n" + "\n".join(
            f"  ERROR: {e}" for e in self.errors
        )
        if self.warnings:
            message += "\n" + "\n".join(f"  WARNING: {w}" for w in self.warnings)

        super().__init__(message)


class InvalidInputError(ValidationError):
    """Input is not a numeric sequence, or a parameter is out of its domain."""


class MissingValueError(ValidationError):
    """Input contains missing (None / NaN) entries."""


@dataclass(frozen=True)
class TimeSeries:
    """
    Univariate series with an optional sampling frequency.

    frequency > 1 marks a seasonal series (12 = monthly, 4 = quarterly).
    """

    values: np.ndarray
    frequency: int = 1
    name: Optional[str] = None

    def __post_init__(self):
        try:
            values = np.array(self.values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"TimeSeries values must be numeric: {e}") from e
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    def __len__(self) -> int:
        return len(self.values)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def _coerce_values(data: Any) -> np.ndarray:
    """Turn an array-like into a 1-D float64 array, or raise."""
    if data is None or isinstance(data, (str, bytes, dict)) or np.isscalar(data):
        raise InvalidInputError(
            f"y must be a numeric sequence or a time series, got {type(data).__name__}"
        )

    try:
        arr = np.asarray(data)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"y could not be read as a sequence: {e}") from e

    if arr.ndim != 1:
        raise InvalidInputError(f"y must be one-dimensional, got shape {arr.shape}")

    if arr.dtype == object:
        present = [v for v in arr if not _is_missing(v)]
        for v in present:
            if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, float, np.number)):
                raise InvalidInputError(
                    f"y must be numeric, found element of type {type(v).__name__}"
                )
        if len(present) != len(arr):
            missing = len(arr) - len(present)
            raise MissingValueError(f"The time series contains {missing} missing values")
        return arr.astype(np.float64)

    if arr.dtype.kind not in 'iuf':
        raise InvalidInputError(f"y must be numeric, got dtype {arr.dtype}")

    return arr.astype(np.float64)


def validate_values(values: np.ndarray) -> np.ndarray:
    """
    Check a float vector for missing, infinite and too-short input.

    Returns the same array for chaining.
    """
    nan_mask = np.isnan(values)
    if nan_mask.any():
        raise MissingValueError(
            f"The time series contains {int(nan_mask.sum())} missing values"
        )
    if np.isinf(values).any():
        raise InvalidInputError("The time series contains infinite values")
    if len(values) < 2:
        raise InvalidInputError(f"y needs at least 2 observations, got {len(values)}")
    return values


def validate_bandwidth(c: Any) -> float:
    """Bandwidth c must be a finite positive real."""
    if isinstance(c, (bool, np.bool_)) or not isinstance(c, Real):
        raise InvalidInputError(f"c must be a positive real value, got {c!r}")
    if not (math.isfinite(c) and c > 0):
        raise InvalidInputError(f"c must be a positive real value, got {c!r}")
    return float(c)


def validate_frequency(frequency: Any) -> int:
    if isinstance(frequency, (bool, np.bool_)) or not isinstance(frequency, Integral):
        raise InvalidInputError(f"frequency must be a positive integer, got {frequency!r}")
    if frequency < 1:
        raise InvalidInputError(f"frequency must be a positive integer, got {frequency}")
    return int(frequency)


def as_series(
    data: Any,
    frequency: Optional[int] = None,
    name: Optional[str] = None,
) -> TimeSeries:
    """
    Adapt caller input into a validated TimeSeries.

    Args:
        data: list, tuple, numpy array, pandas/polars Series or TimeSeries
        frequency: Sampling frequency; overrides the one carried by data
        name: Data label; overrides the input's own name

    Returns:
        TimeSeries with finite float64 values and n >= 2

    Raises:
        InvalidInputError: data is not a numeric sequence
        MissingValueError: data contains None or NaN entries
    """
    if isinstance(data, TimeSeries):
        values = data.values
        frequency = data.frequency if frequency is None else frequency
        name = data.name if name is None else name
    else:
        values = _coerce_values(data)
        if name is None:
            label = getattr(data, 'name', None)
            if isinstance(label, str) and label:
                name = label

    frequency = validate_frequency(1 if frequency is None else frequency)
    validate_values(values)

    return TimeSeries(values=values, frequency=frequency, name=name or 'y')
