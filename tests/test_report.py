from moisture_service.predictor import PredictionResult
from moisture_service.report import prediction_body, status_message


def make(trend="stable", days=None, predicted=50.0):
    return PredictionResult(
        current_moisture=50, predicted_moisture_24h=predicted, slope=0,
        intercept=50, trend=trend, days_until_watering=days,
        confidence=0.5, data_points=10,
    )


def test_status_messages():
    assert status_message(make("decreasing", 0.5), 50).startswith("Water soon!")
    assert status_message(make("decreasing", 2.2), 50) == "Consider watering in 3 days."
    assert status_message(make("decreasing", 5.0), 50) == "Moisture is slowly decreasing but still at healthy levels."
    assert status_message(make("increasing"), 50).startswith("Moisture is increasing")
    assert status_message(make(), 50) == "Moisture levels are stable."


def test_below_target_warning():
    msg = status_message(make(predicted=29.9), 50)
    assert msg.endswith("Warning: Predicted moisture will be below target range.")
    assert "Warning" not in status_message(make(predicted=30), 50)


def test_body_needs_two_readings():
    body = prediction_body({"id": "p1", "name": "Fern"}, [{"soil_moisture": 40, "timestamp": "2024-05-01T00:00:00Z"}])
    assert body["prediction"] is None
    assert "need at least 2" in body["message"]


def test_body_with_prediction():
    readings = [
        {"soil_moisture": 50, "timestamp": "2024-05-01T00:00:00Z"},
        {"soil_moisture": 45, "timestamp": "2024-05-01T01:00:00Z"},
    ]
    body = prediction_body({"id": "p1", "name": "Fern", "target_moisture": None}, readings)
    assert body["target_moisture"] == 50
    pred = body["prediction"]
    assert pred["trend"] == "decreasing"
    assert pred["days_until_watering"] == 0.1
    assert pred["status_message"].startswith("Water soon!")
