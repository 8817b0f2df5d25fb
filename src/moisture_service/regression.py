"""
Ordinary least-squares fit over (x, y) pairs.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, NamedTuple

import numpy as np


class DataPoint(NamedTuple):
    x: float  # hours since the earliest reading
    y: float  # moisture %


@dataclass(frozen=True)
class RegressionFit:
    slope: float
    intercept: float
    r_squared: float

    def at(self, x: float) -> float:
        return self.slope * x + self.intercept


def linear_regression(points: Iterable[tuple[float, float]]) -> RegressionFit:
    """
    Fit y = slope * x + intercept by least squares.

    Fewer than two points yield a flat line through the single point (or 0).
    Zero variance in x gives slope 0; zero variance in y gives r_squared 0,
    not 1. r_squared is clipped to [0, 1].
    """
    arr = np.asarray(list(points), dtype=float).reshape(-1, 2)
    x, y = arr[:, 0], arr[:, 1]
    n = len(arr)
    if n < 2:
        intercept = float(y[0]) if n and not np.isnan(y[0]) else 0.0
        return RegressionFit(slope=0.0, intercept=intercept, r_squared=0.0)

    dx = x - x.mean()
    dy = y - y.mean()
    num = float(np.dot(dx, dy))
    den = float(np.dot(dx, dx))
    ss_tot = float(np.dot(dy, dy))

    slope = num / den if den != 0 else 0.0
    intercept = float(y.mean()) - slope * float(x.mean())

    resid = y - (slope * x + intercept)
    ss_res = float(np.dot(resid, resid))
    r2 = 1 - ss_res / ss_tot if ss_tot != 0 else 0.0
    return RegressionFit(slope=slope, intercept=intercept, r_squared=float(np.clip(r2, 0.0, 1.0)))
