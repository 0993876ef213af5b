"""
Gaussianity Configuration
=========================

Single source of truth for test defaults and diagnostic thresholds.

Usage:
    from gaussianity.config import DEFAULT_CONFIG, load_config

    cfg = load_config('/path/to/gaussianity.yaml')
    cfg.alpha, cfg.unit_root, cfg.min_samples.stationarity

YAML layout (every key optional):
    bandwidth: 1.0
    alpha: 0.05
    unit_root: adf          # adf | kpss
    seasonal: ocsb          # ocsb | seas
    ocsb_max_lag: 3
    seas_threshold: 0.64
    min_samples:
      stationarity: 20
"""

from pathlib import Path
from typing import Any, Dict, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

from gaussianity.validation import InvalidInputError


UNIT_ROOT_METHODS = ('adf', 'kpss')
SEASONAL_METHODS = ('ocsb', 'seas')


def _schema_errors(e: SchemaError) -> InvalidInputError:
    """Map pydantic errors onto the package's input error."""
    return InvalidInputError([
        f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
        for err in e.errors()
    ])


class _Strict(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except SchemaError as e:
            raise _schema_errors(e) from e


class MinSamples(_Strict):
    """Shortest series each diagnostic will test."""
    stationarity: int = Field(default=20, ge=2, description="ADF/KPSS minimum length")


class GaussianityConfig(_Strict):
    """Test and diagnostic settings"""
    bandwidth: float = Field(
        default=1.0, gt=0, allow_inf_nan=False,
        description="Lag-window scalar c: hn = ceil(c * sqrt(n) - 1)",
    )
    alpha: float = Field(
        default=0.05, gt=0, lt=1,
        description="Significance level for the stationarity / seasonality diagnostics",
    )
    unit_root: Literal['adf', 'kpss'] = 'adf'
    seasonal: Literal['ocsb', 'seas'] = 'ocsb'
    ocsb_max_lag: int = Field(
        default=3, ge=0,
        description="OCSB: highest AR order tried when picking lags by AIC",
    )
    seas_threshold: float = Field(
        default=0.64, ge=0, le=1,
        description="STL seasonal strength above which a series needs seasonal differencing",
    )
    min_samples: MinSamples = Field(default_factory=MinSamples)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GaussianityConfig":
        """Validate a plain dict (e.g. parsed YAML)."""
        try:
            return cls.model_validate(data)
        except SchemaError as e:
            raise _schema_errors(e) from e


DEFAULT_CONFIG = GaussianityConfig()


def config_from_dict(overrides: Dict[str, Any], base: GaussianityConfig = DEFAULT_CONFIG) -> GaussianityConfig:
    """
    Merge a plain dict over a base config.

    Unknown keys are rejected so typos do not silently fall back to defaults.
    """
    merged = base.model_dump()
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return GaussianityConfig.from_dict(merged)


def load_config(path: str) -> GaussianityConfig:
    """
    Load configuration from YAML.

    Tries:
        1. path itself (if it's a .yaml file)
        2. path/gaussianity.yaml
    """
    p = Path(path)

    if p.is_file() and p.suffix in ('.yaml', '.yml'):
        config_path = p
    else:
        config_path = p / 'gaussianity.yaml'

    if not config_path.exists():
        raise FileNotFoundError(f"No gaussianity.yaml in {path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise InvalidInputError(f"{config_path} must contain a mapping")

    return config_from_dict(raw)
