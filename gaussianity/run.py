"""
Gaussianity Test Runner
=======================

Validates input, runs the stationarity diagnostics, computes the
Lobato-Velasco statistic and maps it to a chi-squared(2) p-value.
Pure orchestration: computation lives in gaussianity.core.

H0: the series is a stationary Gaussian process.

Usage:
    from gaussianity import run_test
    result = run_test(values, c=1)

    python -m gaussianity data.parquet --column returns
    python -m gaussianity sales.csv --column units --frequency 12
"""

import argparse
import logging
import sys
import warnings
from typing import Any, List, Optional

from scipy import stats

from gaussianity.config import DEFAULT_CONFIG, GaussianityConfig, load_config
from gaussianity.core.lobato import compute_statistic, NumericDomainError
from gaussianity.core.seasonal import check_seasonality
from gaussianity.core.stationarity import check_stationarity
from gaussianity.result import TestResult
from gaussianity.validation import as_series, validate_bandwidth, ValidationError

logger = logging.getLogger(__name__)

METHOD = "Lobato and Velasco's test"
DEGREES_OF_FREEDOM = 2


class NonStationaryWarning(RuntimeWarning):
    """The series looks non-stationary; the test assumes stationarity."""


def _diagnose(series, cfg: GaussianityConfig) -> List[str]:
    """Advisory messages from the stationarity and seasonality checks."""
    advisories = []

    unit_root = check_stationarity(
        series.values,
        method=cfg.unit_root,
        alpha=cfg.alpha,
        min_samples=cfg.min_samples.stationarity,
    )
    if 'reason' in unit_root:
        logger.debug("%s: stationarity not checked: %s", series.name, unit_root['reason'])
    if not unit_root['stationary']:
        advisories.append(
            f"{series.name} has a unit root, {METHOD} requires a stationary process"
        )

    if series.frequency > 1:
        seasonal = check_seasonality(
            series.values,
            period=series.frequency,
            method=cfg.seasonal,
            max_lag=cfg.ocsb_max_lag,
            threshold=cfg.seas_threshold,
        )
        if 'reason' in seasonal:
            logger.debug("%s: seasonality not checked: %s", series.name, seasonal['reason'])
        if seasonal['seasonal']:
            advisories.append(
                f"{series.name} has a seasonal unit root, {METHOD} requires a stationary process"
            )

    return advisories


def run_test(
    y: Any,
    c: Optional[float] = None,
    *,
    frequency: Optional[int] = None,
    data_name: Optional[str] = None,
    config: Optional[GaussianityConfig] = None,
) -> TestResult:
    """
    Lobato and Velasco's test of Gaussianity for a stationary series.

    Args:
        y: Numeric sequence, pandas/polars Series or TimeSeries
        c: Positive bandwidth scalar (default: config.bandwidth, i.e. 1)
        frequency: Sampling frequency; > 1 enables the seasonal check
        data_name: Label for the result (default: the input's name, else 'y')
        config: Diagnostic settings (default: DEFAULT_CONFIG)

    Returns:
        TestResult with statistic, df = 2, p-value and advisory warnings

    Raises:
        InvalidInputError: y is not a numeric sequence or c is not positive
        MissingValueError: y contains missing values
        NumericDomainError: the statistic is undefined (constant series)

    Warns:
        NonStationaryWarning: unit root or seasonal unit root detected
    """
    cfg = config or DEFAULT_CONFIG
    c = cfg.bandwidth if c is None else c

    series = as_series(y, frequency=frequency, name=data_name)
    c = validate_bandwidth(c)

    advisories = _diagnose(series, cfg)
    for message in advisories:
        warnings.warn(message, NonStationaryWarning, stacklevel=2)

    statistic = compute_statistic(series.values, c=c)
    p_value = float(stats.chi2.sf(statistic, DEGREES_OF_FREEDOM))

    logger.debug("%s: lobato=%.6g p=%.6g", series.name, statistic, p_value)

    return TestResult(
        statistic=statistic,
        df=DEGREES_OF_FREEDOM,
        p_value=p_value,
        alternative=f"{series.name} is not Gaussian",
        method=METHOD,
        data_name=series.name,
        warnings=tuple(advisories),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Reads one column from a file and prints the test result."""
    from gaussianity.io.reader import read_series

    parser = argparse.ArgumentParser(
        description="Lobato and Velasco's test of Gaussianity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
H0: the series is a stationary Gaussian process.

Usage:
  python -m gaussianity data.parquet --column returns
  python -m gaussianity sales.csv --column units --frequency 12 -c 2
"""
    )
    parser.add_argument('path', help='parquet or CSV file')
    parser.add_argument('--column', help='Column to test (optional for single-column files)')
    parser.add_argument('--frequency', type=int, default=1, help='Sampling frequency (default: 1)')
    parser.add_argument('-c', '--bandwidth', type=float, help='Bandwidth scalar c (default: 1)')
    parser.add_argument('--config', help='gaussianity.yaml, or a directory containing one')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log diagnostics')
    parser.add_argument('-q', '--quiet', action='store_true', help='Log errors only')

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    try:
        cfg = load_config(args.config) if args.config else DEFAULT_CONFIG
        series = read_series(args.path, column=args.column, frequency=args.frequency)
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', NonStationaryWarning)
            result = run_test(series, c=args.bandwidth, config=cfg)
    except (ValidationError, NumericDomainError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result.summary())
    return 0


if __name__ == '__main__':
    sys.exit(main())
