from __future__ import annotations
from typing import Any, Iterable, List, Mapping

import pandas as pd

from .regression import DataPoint

Reading = Mapping[str, Any]


def readings_frame(readings: Iterable[Reading]) -> pd.DataFrame:
    """
    Build a chronologically sorted frame of ``soil_moisture``/``timestamp``.

    Timestamps are parsed as UTC; the sort is stable so ties keep input order.
    Missing moisture values are kept as NaN here.
    """
    df = pd.DataFrame(
        [{"soil_moisture": r.get("soil_moisture"), "timestamp": r["timestamp"]} for r in readings],
        columns=["soil_moisture", "timestamp"],
    )
    df["soil_moisture"] = pd.to_numeric(df["soil_moisture"])
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, format="ISO8601")
    return df.sort_values("timestamp", kind="mergesort").reset_index(drop=True)


def to_data_points(df: pd.DataFrame) -> List[DataPoint]:
    # null moisture counts as 0, not imputed
    hours = (df["timestamp"] - df["timestamp"].iloc[0]).dt.total_seconds() / 3600.0
    soil = df["soil_moisture"].fillna(0.0).astype(float)
    return [DataPoint(float(x), float(y)) for x, y in zip(hours, soil)]
