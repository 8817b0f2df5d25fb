# app.py

import logging
import math
from datetime import datetime, timezone
from typing import List, Literal, Optional

import requests
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import config
from .data_fetcher import PlantNotFound
from .handler import forecast_for_plant
from .predictor import predict_moisture

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Moisture trend service")


class ReadingIn(BaseModel):
    soil_moisture: Optional[float] = None
    timestamp: datetime

    def as_reading(self):
        ts = self.timestamp
        if ts.tzinfo is None:  # naive means UTC
            ts = ts.replace(tzinfo=timezone.utc)
        return {"soil_moisture": self.soil_moisture, "timestamp": ts.isoformat()}


class PredictRequest(BaseModel):
    readings: List[ReadingIn]
    hours_ahead: float = Field(default=config.HORIZON_HOURS, allow_inf_nan=False)


class PredictResponse(BaseModel):
    current_moisture: float
    predicted_moisture_24h: float
    slope: float
    intercept: float
    trend: Literal["increasing", "decreasing", "stable"]
    days_until_watering: Optional[float]
    confidence: float
    data_points: int


@app.get('/health')
def health():
    return {"ok": True}


@app.post('/predict', response_model=PredictResponse)
def predict(req: PredictRequest):
    readings = [r.as_reading() for r in req.readings]
    result = predict_moisture(readings, req.hours_ahead)
    return PredictResponse(**result.to_dict())


@app.get('/predict/{plant_id}')
def predict_plant(plant_id: str, hours: Optional[float] = None):
    if hours is not None and not math.isfinite(hours):
        return JSONResponse(status_code=400, content={"error": "hours must be a finite number"})
    try:
        return forecast_for_plant(plant_id, hours)
    except PlantNotFound:
        return JSONResponse(status_code=404, content={"error": "Plant not found"})
    except requests.RequestException:
        logger.exception("[Predict API] Error fetching readings")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch sensor data"})
    except Exception:
        logger.exception("[Predict API] Error")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
