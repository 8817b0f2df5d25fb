from __future__ import annotations
import os

SUPABASE_URL: str = os.getenv("SUPABASE_URL", "http://localhost:54321")
SUPABASE_KEY: str | None = os.getenv("SUPABASE_KEY")

LOOKBACK_DAYS: int = int(os.getenv("LOOKBACK_DAYS", 7))
MIN_READINGS: int = int(os.getenv("MIN_READINGS", 2))
HORIZON_HOURS: float = float(os.getenv("HORIZON_HOURS", 24))
DEFAULT_TARGET_MOISTURE: float = float(os.getenv("DEFAULT_TARGET_MOISTURE", 50))

VERIFY_SSL: bool = os.getenv("VERIFY_SSL", "true").lower() == "true"
TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", 10))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
