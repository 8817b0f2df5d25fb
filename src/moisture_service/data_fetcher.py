from __future__ import annotations
import datetime as dt
import logging
from typing import Any, Dict, List

import requests

from . import config

logger = logging.getLogger(__name__)


class PlantNotFound(LookupError):
    pass


class ApiClient:
    """Read-only client for the hosted backend's REST tables."""

    def __init__(self, base_url: str | None = None, api_key: str | None = None):
        self.base_url = (base_url or config.SUPABASE_URL).rstrip("/")
        self.api_key = api_key or config.SUPABASE_KEY

    def get_plant(self, plant_id: str) -> Dict[str, Any]:
        rows = self._select("plants", {"select": "id,name,target_moisture", "id": f"eq.{plant_id}"})
        if not rows:
            raise PlantNotFound(plant_id)
        return rows[0]

    def recent_readings(
        self,
        plant_id: str,
        days: int | None = None,
        now: dt.datetime | None = None,
    ) -> List[Dict[str, Any]]:
        if days is None:
            days = config.LOOKBACK_DAYS
        if now is None:
            now = dt.datetime.now(dt.timezone.utc)
        since = (now - dt.timedelta(days=days)).isoformat()
        rows = self._select(
            "sensor_readings",
            {
                "select": "soil_moisture,timestamp",
                "plant_id": f"eq.{plant_id}",
                "timestamp": f"gte.{since}",
                "order": "timestamp.asc",
            },
        )
        logger.info("Fetched %d readings for plant %s since %s", len(rows), plant_id, since)
        return rows

    def _select(self, table: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        resp = requests.get(
            f"{self.base_url}/rest/v1/{table}",
            params=params,
            headers=self._headers(),
            timeout=config.TIMEOUT,
            verify=config.VERIFY_SSL,
        )
        resp.raise_for_status()
        return resp.json()

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise RuntimeError("SUPABASE_KEY must be set.")
        return {"apikey": self.api_key, "Authorization": f"Bearer {self.api_key}"}
