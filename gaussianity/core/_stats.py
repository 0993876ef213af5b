"""Inline central moments: population (denominator n) estimators only."""

from typing import NamedTuple

import numpy as np


class MomentSet(NamedTuple):
    mu1: float
    mu2: float
    mu3: float
    mu4: float


def central_moments(y) -> MomentSet:
    """Mean plus biased 2nd, 3rd and 4th central moments."""
    y = np.asarray(y, dtype=np.float64).ravel()
    mu1 = float(np.mean(y))
    centered = y - mu1
    sq = centered ** 2
    return MomentSet(
        mu1=mu1,
        mu2=float(np.mean(sq)),
        mu3=float(np.mean(sq * centered)),
        mu4=float(np.mean(sq ** 2)),
    )
