from __future__ import annotations
import math
from typing import Any, Dict, Iterable, Mapping

from . import config
from .predictor import DECREASING, INCREASING, PredictionResult, predict_moisture
from .preprocessing import Reading

TARGET_MARGIN = 20


def status_message(prediction: PredictionResult, target_moisture: float) -> str:
    days = prediction.days_until_watering
    if prediction.trend == DECREASING:
        if days is not None and days <= 1:
            msg = "Water soon! Moisture is dropping and will reach low levels within 24 hours."
        elif days is not None and days <= 3:
            msg = f"Consider watering in {math.ceil(days)} days."
        else:
            msg = "Moisture is slowly decreasing but still at healthy levels."
    elif prediction.trend == INCREASING:
        msg = "Moisture is increasing - plant was recently watered or absorbing water."
    else:
        msg = "Moisture levels are stable."

    if prediction.predicted_moisture_24h < target_moisture - TARGET_MARGIN:
        msg += " Warning: Predicted moisture will be below target range."
    return msg


def prediction_body(
    plant: Mapping[str, Any],
    readings: Iterable[Reading],
    hours_ahead: float | None = None,
) -> Dict[str, Any]:
    """Response body for a plant's moisture forecast."""
    readings = list(readings)
    if len(readings) < config.MIN_READINGS:
        return {
            "success": True,
            "plant_id": plant["id"],
            "plant_name": plant.get("name"),
            "prediction": None,
            "message": f"Not enough data for prediction (need at least {config.MIN_READINGS} readings)",
        }

    if hours_ahead is None:
        hours_ahead = config.HORIZON_HOURS
    target = plant.get("target_moisture") or config.DEFAULT_TARGET_MOISTURE
    prediction = predict_moisture(readings, hours_ahead)
    return {
        "success": True,
        "plant_id": plant["id"],
        "plant_name": plant.get("name"),
        "target_moisture": target,
        "prediction": {**prediction.to_dict(), "status_message": status_message(prediction, target)},
    }
