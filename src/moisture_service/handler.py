import json
import logging
import math
import datetime as dt

import requests

from . import config
from .data_fetcher import ApiClient, PlantNotFound
from .report import prediction_body

# ---------- Logging ----------
logger = logging.getLogger()
if not logger.handlers:
    logging.basicConfig(level=config.LOG_LEVEL)
logger.setLevel(config.LOG_LEVEL)

api = ApiClient()


def forecast_for_plant(plant_id: str, hours_ahead: float | None = None, client: ApiClient | None = None) -> dict:
    client = client or api
    try:
        plant = client.get_plant(plant_id)
    except requests.RequestException as exc:
        # any failed plant lookup reads as a missing plant
        raise PlantNotFound(plant_id) from exc
    readings = client.recent_readings(plant_id)
    return prediction_body(plant, readings, hours_ahead)


# ---------- Lambda Entry ----------
def lambda_handler(event, context):
    """
    API Gateway proxy event for GET /predict/{plant_id}.
      - pathParameters.plant_id (required)
      - queryStringParameters.hours (optional, default HORIZON_HOURS)
      - {"action":"ping"} for health checks
    """
    event = event or {}
    try:
        if event.get("action") == "ping":
            return _response(200, {"ok": True, "ts": dt.datetime.now(dt.timezone.utc).isoformat()})

        plant_id = (event.get("pathParameters") or {}).get("plant_id")
        if not plant_id:
            return _response(400, {"error": "plant_id is required"})
        hours = (event.get("queryStringParameters") or {}).get("hours")
        try:
            hours_ahead = float(hours) if hours is not None else None
        except ValueError:
            return _response(400, {"error": "hours must be a number"})
        if hours_ahead is not None and not math.isfinite(hours_ahead):
            return _response(400, {"error": "hours must be a finite number"})

        logger.info(f"Predict request for plant {plant_id}")
        return _response(200, forecast_for_plant(plant_id, hours_ahead))

    except PlantNotFound:
        return _response(404, {"error": "Plant not found"})
    except requests.RequestException:
        logger.exception("Error fetching readings")
        return _response(500, {"error": "Failed to fetch sensor data"})
    except Exception:
        logger.exception("Unhandled error")
        return _response(500, {"error": "Internal server error"})


def _response(status: int, body: dict):
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
