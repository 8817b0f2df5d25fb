"""
Predict soil moisture from a CSV export of sensor readings.
"""
import argparse
import json
import logging
import sys

import pandas as pd

from . import config
from .predictor import predict_moisture
from .report import status_message


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("csv", help="file with soil_moisture,timestamp columns")
    parser.add_argument("--hours-ahead", type=float, default=config.HORIZON_HOURS)
    parser.add_argument("--target-moisture", type=float, default=config.DEFAULT_TARGET_MOISTURE)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL)

    df = pd.read_csv(args.csv, usecols=["soil_moisture", "timestamp"], dtype={"timestamp": str})
    if len(df) < config.MIN_READINGS:
        print(f"Need at least {config.MIN_READINGS} readings, got {len(df)}.", file=sys.stderr)
        return 1

    prediction = predict_moisture(df.to_dict("records"), args.hours_ahead)
    out = {**prediction.to_dict(), "status_message": status_message(prediction, args.target_moisture)}
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
