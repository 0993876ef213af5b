"""
Tests for configuration defaults and YAML loading.
"""

import pydantic
import pytest

from gaussianity.config import (
    DEFAULT_CONFIG,
    GaussianityConfig,
    config_from_dict,
    load_config,
)
from gaussianity.validation import InvalidInputError


class TestDefaults:

    def test_values(self):
        assert DEFAULT_CONFIG.bandwidth == 1.0
        assert DEFAULT_CONFIG.alpha == 0.05
        assert DEFAULT_CONFIG.unit_root == 'adf'
        assert DEFAULT_CONFIG.seasonal == 'ocsb'
        assert DEFAULT_CONFIG.min_samples.stationarity == 20

    @pytest.mark.parametrize("kwargs", [
        {'bandwidth': 0},
        {'bandwidth': -2.0},
        {'alpha': 1.5},
        {'unit_root': 'pp'},
        {'seasonal': 'ch'},
        {'ocsb_max_lag': -1},
        {'seas_threshold': 2.0},
        {'bandwidth': float('inf')},
        {'ocsb_max_lag': 2.5},
        {'min_samples': {'stationarity': 1}},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidInputError):
            GaussianityConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_CONFIG.alpha = 0.1

    def test_schema_errors_become_invalid_input(self):
        """Every field problem is listed, and pydantic's error is kept as the cause."""
        with pytest.raises(InvalidInputError) as exc:
            GaussianityConfig.from_dict({'unit_root': 'pp', 'alpha': 2})
        assert 'unit_root' in str(exc.value)
        assert 'alpha' in str(exc.value)
        assert len(exc.value.errors) == 2
        assert isinstance(exc.value.__cause__, pydantic.ValidationError)


class TestFromDict:

    def test_merge_over_defaults(self):
        cfg = config_from_dict({'alpha': 0.01, 'unit_root': 'kpss'})
        assert cfg.alpha == 0.01
        assert cfg.unit_root == 'kpss'
        assert cfg.seasonal == DEFAULT_CONFIG.seasonal

    def test_nested_min_samples(self):
        cfg = config_from_dict({'min_samples': {'stationarity': 50}})
        assert cfg.min_samples.stationarity == 50

    def test_unknown_key(self):
        with pytest.raises(InvalidInputError) as exc:
            config_from_dict({'alhpa': 0.1})
        assert 'alhpa' in str(exc.value)

    def test_unknown_nested_key(self):
        with pytest.raises(InvalidInputError):
            config_from_dict({'min_samples': {'seasonal': 10}})


class TestLoadConfig:

    def test_yaml_file(self, tmp_path):
        path = tmp_path / 'custom.yaml'
        path.write_text("bandwidth: 2\nseasonal: seas\nmin_samples:\n  stationarity: 30\n")
        cfg = load_config(str(path))
        assert cfg.bandwidth == 2
        assert cfg.seasonal == 'seas'
        assert cfg.min_samples.stationarity == 30

    def test_directory(self, tmp_path):
        (tmp_path / 'gaussianity.yaml').write_text("alpha: 0.1\n")
        assert load_config(str(tmp_path)).alpha == 0.1

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'gaussianity.yaml'
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'gaussianity.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(InvalidInputError):
            load_config(str(path))
