"""
Gaussianity Core: compute engines (arrays in, numbers/dicts out, no file I/O).

    lobato        Lobato-Velasco statistic
    stationarity  Unit-root diagnostics (ADF, KPSS)
    seasonal      Seasonal unit-root diagnostics (OCSB, STL strength)
"""

from gaussianity.core.lobato import (
    compute_statistic,
    lag_count,
    autocovariances,
    variance_estimators,
    NumericDomainError,
)
from gaussianity.core._stats import central_moments, MomentSet
from gaussianity.core.stationarity import check_stationarity
from gaussianity.core.seasonal import check_seasonality

__all__ = [
    'compute_statistic',
    'lag_count',
    'autocovariances',
    'variance_estimators',
    'central_moments',
    'MomentSet',
    'NumericDomainError',
    'check_stationarity',
    'check_seasonality',
]
