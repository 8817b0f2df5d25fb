"""
Soil moisture trend prediction.

Sorts a batch of readings, fits a straight line over elapsed hours and turns
the fit into a projected value, a trend label, a days-until-watering estimate
and a heuristic confidence score. Every call is a pure function of its input.
"""
from __future__ import annotations
import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from . import config
from .preprocessing import Reading, readings_frame, to_data_points
from .regression import linear_regression

logger = logging.getLogger(__name__)

TREND_SLOPE_THRESHOLD = 0.1  # %/hour
WATERING_THRESHOLD = 30.0  # %
MOISTURE_MIN, MOISTURE_MAX = 0.0, 100.0
R2_WEIGHT, VOLUME_WEIGHT = 0.7, 0.3
VOLUME_SATURATION = 100

INCREASING, DECREASING, STABLE = "increasing", "decreasing", "stable"


@dataclass(frozen=True)
class PredictionResult:
    current_moisture: float
    predicted_moisture_24h: float
    slope: float
    intercept: float
    trend: str
    days_until_watering: Optional[float]
    confidence: float
    data_points: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def empty(cls) -> "PredictionResult":
        return cls(
            current_moisture=0,
            predicted_moisture_24h=0,
            slope=0,
            intercept=0,
            trend=STABLE,
            days_until_watering=None,
            confidence=0,
            data_points=0,
        )


def round_half_up(value: float, ndigits: int) -> float:
    # round() is banker's rounding; dashboard clients expect half-up
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def classify_trend(slope: float) -> str:
    if slope > TREND_SLOPE_THRESHOLD:
        return INCREASING
    if slope < -TREND_SLOPE_THRESHOLD:
        return DECREASING
    return STABLE


def days_until_watering(current_moisture: float, slope: float) -> Optional[float]:
    """Days for the fitted line to fall from ``current_moisture`` to the watering threshold.

    0 when already at or below it, None when the line is not falling.
    """
    if slope < 0 and current_moisture > WATERING_THRESHOLD:
        hours = (WATERING_THRESHOLD - current_moisture) / slope
        return max(0.0, hours / 24)
    if current_moisture <= WATERING_THRESHOLD:
        return 0.0
    return None


def confidence_score(r_squared: float, data_points: int) -> float:
    volume = min(1.0, data_points / VOLUME_SATURATION)
    return r_squared * R2_WEIGHT + volume * VOLUME_WEIGHT


def predict_moisture(readings: Iterable[Reading], hours_ahead: float = 24) -> PredictionResult:
    readings = list(readings)
    if not readings:
        return PredictionResult.empty()

    df = readings_frame(readings)
    points = to_data_points(df)
    current = points[-1].y

    fit = linear_regression(points)
    logger.debug("Fitted %d points: slope=%.4f intercept=%.2f r2=%.3f",
                 len(points), fit.slope, fit.intercept, fit.r_squared)

    projected = fit.at(points[-1].x + hours_ahead)
    projected = max(MOISTURE_MIN, min(MOISTURE_MAX, projected))
    days = days_until_watering(current, fit.slope)

    return PredictionResult(
        current_moisture=current,
        predicted_moisture_24h=round_half_up(projected, 1),
        slope=round_half_up(fit.slope, 3),
        intercept=round_half_up(fit.intercept, 1),
        trend=classify_trend(fit.slope),
        days_until_watering=round_half_up(days, 1) if days is not None else None,
        confidence=round_half_up(confidence_score(fit.r_squared, len(points)), 2),
        data_points=len(points),
    )


class MoisturePredictor:
    def __init__(self, hours_ahead: float | None = None):
        self.hours_ahead = config.HORIZON_HOURS if hours_ahead is None else hours_ahead

    def predict(self, readings: Iterable[Reading], hours_ahead: float | None = None) -> PredictionResult:
        return predict_moisture(readings, self.hours_ahead if hours_ahead is None else hours_ahead)
