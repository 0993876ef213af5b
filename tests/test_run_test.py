"""
Tests for the Gaussianity test runner.

End-to-end scenarios:
    1. Stationary AR(0.3) series -> finite statistic, p in [0, 1], no warnings
    2. Missing value -> MissingValueError before any numeric work
    3. Seasonal, trending series and seasonal random walk -> two advisory
       warnings, result still returned
"""

import warnings

import numpy as np
import polars as pl
import pytest

import gaussianity.run as runner
from gaussianity import (
    run_test,
    compute_statistic,
    TestResult,
    TimeSeries,
    InvalidInputError,
    MissingValueError,
    NumericDomainError,
    NonStationaryWarning,
)
from gaussianity.config import GaussianityConfig


def _ar1(n=100, phi=0.3, seed=42, burn=50):
    np.random.seed(seed)
    e = np.random.randn(n + burn)
    y = np.zeros(n + burn)
    for t in range(1, n + burn):
        y[t] = phi * y[t - 1] + e[t]
    return y[burn:]


def _seasonal_trend(n=240, period=12, seed=0):
    """Random walk with drift plus a strong seasonal pattern."""
    np.random.seed(seed)
    t = np.arange(n)
    trend = np.cumsum(2.0 + np.random.randn(n))
    return trend + 8.0 * np.sin(2 * np.pi * t / period) + 0.5 * np.random.randn(n)


def _seasonal_walk(n=300, period=12, seed=5):
    """y[t] = y[t - period] + e[t]: unit root and seasonal unit root."""
    np.random.seed(seed)
    e = np.random.randn(n)
    walk = e.copy()
    for t in range(period, n):
        walk[t] = walk[t - period] + e[t]
    return walk


class TestStationaryScenario:

    def test_ar_process(self):
        y = _ar1()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            result = run_test(y)

        assert not [w for w in caught if issubclass(w.category, NonStationaryWarning)]
        assert result.warnings == ()
        assert np.isfinite(result.statistic)
        assert result.statistic >= 0
        assert 0.0 <= result.p_value <= 1.0

    def test_result_fields(self):
        result = run_test(_ar1(), data_name='ar')
        assert isinstance(result, TestResult)
        assert result.df == 2
        assert result.method == "Lobato and Velasco's test"
        assert result.data_name == 'ar'
        assert result.alternative == 'ar is not Gaussian'

    def test_statistic_matches_engine(self):
        y = _ar1()
        result = run_test(y, c=2)
        assert result.statistic == compute_statistic(y, c=2)

    def test_p_value_is_chi2_upper_tail(self):
        result = run_test(_ar1())
        assert result.p_value == pytest.approx(np.exp(-result.statistic / 2))

    def test_default_label(self):
        assert run_test(_ar1()).data_name == 'y'

    def test_label_from_series_name(self):
        result = run_test(pl.Series('returns', _ar1()))
        assert result.data_name == 'returns'
        assert result.alternative == 'returns is not Gaussian'

    def test_bandwidth_from_config(self):
        y = _ar1()
        result = run_test(y, config=GaussianityConfig(bandwidth=3.0))
        assert result.statistic == compute_statistic(y, c=3.0)

    def test_result_is_immutable(self):
        result = run_test(_ar1())
        with pytest.raises(Exception):
            result.statistic = 0.0


class TestPValueRange:

    @pytest.mark.parametrize("seed", range(6))
    def test_df_and_p_value(self, seed):
        np.random.seed(seed)
        y = np.random.standard_t(df=3 + seed, size=80 + 20 * seed)
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', NonStationaryWarning)
            result = run_test(y, c=0.5 + seed / 2)
        assert result.df == 2
        assert 0.0 <= result.p_value <= 1.0

    def test_non_gaussian_rejected(self):
        np.random.seed(3)
        y = np.random.standard_exponential(500)
        result = run_test(y)
        assert result.p_value < 1e-6


class TestFatalErrors:

    def test_missing_value_before_numeric_work(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("numeric work started")

        monkeypatch.setattr(runner, 'compute_statistic', fail)
        monkeypatch.setattr(runner, 'check_stationarity', fail)
        monkeypatch.setattr(runner, 'check_seasonality', fail)

        y = list(_ar1())
        y[10] = float('nan')
        with pytest.raises(MissingValueError):
            run_test(y)

        y[10] = None
        with pytest.raises(MissingValueError):
            run_test(y)

    def test_not_numeric(self):
        with pytest.raises(InvalidInputError):
            run_test("not a series")

    def test_bad_bandwidth(self):
        with pytest.raises(InvalidInputError):
            run_test(_ar1(), c=-1)

    def test_bad_bandwidth_before_numeric_work(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("numeric work started")

        monkeypatch.setattr(runner, 'compute_statistic', fail)
        monkeypatch.setattr(runner, 'check_stationarity', fail)
        monkeypatch.setattr(runner, 'check_seasonality', fail)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            with pytest.raises(InvalidInputError):
                run_test(_ar1(), c=-1)
        assert not [w for w in caught if issubclass(w.category, NonStationaryWarning)]

    @pytest.mark.parametrize("value, n", [(4.2, 60), (0.1, 100), (1.1, 37), (3.0, 50)])
    def test_constant_series(self, value, n):
        with pytest.raises(NumericDomainError):
            run_test(np.full(n, value))


class TestAdvisoryWarnings:

    def test_seasonal_non_stationary_series(self):
        y = TimeSeries(values=_seasonal_trend(), frequency=12, name='sales')
        cfg = GaussianityConfig(seasonal='seas')

        with pytest.warns(NonStationaryWarning) as record:
            result = run_test(y, config=cfg)

        ours = [w for w in record if issubclass(w.category, NonStationaryWarning)]
        assert len(ours) == 2
        assert len(result.warnings) == 2
        assert 'unit root' in result.warnings[0]
        assert 'seasonal unit root' in result.warnings[1]
        assert np.isfinite(result.statistic)
        assert 0.0 <= result.p_value <= 1.0

    def test_seasonal_random_walk_default_config(self):
        y = TimeSeries(values=_seasonal_walk(), frequency=12, name='walk')

        with pytest.warns(NonStationaryWarning) as record:
            result = run_test(y)

        ours = [w for w in record if issubclass(w.category, NonStationaryWarning)]
        assert len(ours) == 2
        assert result.warnings == (
            "walk has a unit root, Lobato and Velasco's test requires a stationary process",
            "walk has a seasonal unit root, Lobato and Velasco's test requires a stationary process",
        )

    def test_frequency_one_skips_seasonal_check(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("seasonal check called")

        monkeypatch.setattr(runner, 'check_seasonality', fail)
        run_test(_ar1())

    def test_warnings_do_not_abort(self, monkeypatch):
        monkeypatch.setattr(runner, 'check_stationarity', lambda *a, **k: {'stationary': False})
        monkeypatch.setattr(runner, 'check_seasonality', lambda *a, **k: {'seasonal': True})

        with warnings.catch_warnings():
            warnings.simplefilter('ignore', NonStationaryWarning)
            result = run_test(_ar1(), frequency=4, data_name='q')

        assert result.warnings == (
            "q has a unit root, Lobato and Velasco's test requires a stationary process",
            "q has a seasonal unit root, Lobato and Velasco's test requires a stationary process",
        )
        assert result.statistic == compute_statistic(_ar1())

    def test_seasonal_check_uses_frequency(self, monkeypatch):
        seen = {}

        def fake(values, period, **kwargs):
            seen['period'] = period
            seen['method'] = kwargs['method']
            return {'seasonal': False}

        monkeypatch.setattr(runner, 'check_seasonality', fake)
        run_test(_ar1(), frequency=7)
        assert seen == {'period': 7, 'method': 'ocsb'}


class TestSummary:

    def test_summary_text(self):
        result = run_test(_ar1(), data_name='ar')
        text = result.summary()
        assert "Lobato and Velasco's test" in text
        assert "data:  ar" in text
        assert "df = 2" in text
        assert "WARNINGS" not in text

    def test_to_dict(self):
        d = run_test(_ar1()).to_dict()
        assert set(d) == {
            'statistic', 'df', 'p_value', 'alternative', 'method', 'data_name', 'warnings'
        }
        assert d['warnings'] == []
