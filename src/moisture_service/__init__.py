from .predictor import MoisturePredictor, PredictionResult, predict_moisture
from .regression import DataPoint, RegressionFit, linear_regression

__all__ = [
    "DataPoint",
    "MoisturePredictor",
    "PredictionResult",
    "RegressionFit",
    "linear_regression",
    "predict_moisture",
]
