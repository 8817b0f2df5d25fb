import pytest
from moisture_service import handler


class FakeClient:
    def __init__(self, plant=None, readings=None, error=None, plant_error=None):
        self.plant = plant
        self.readings = readings or []
        self.error = error
        self.plant_error = plant_error

    def get_plant(self, plant_id):
        from moisture_service.data_fetcher import PlantNotFound
        if self.plant_error:
            raise self.plant_error
        if self.plant is None:
            raise PlantNotFound(plant_id)
        return self.plant

    def recent_readings(self, plant_id, days=None, now=None):
        if self.error:
            raise self.error
        return self.readings


@pytest.fixture
def fake_api(monkeypatch):
    def install(**kw):
        client = FakeClient(**kw)
        monkeypatch.setattr(handler, "api", client)
        return client
    return install


@pytest.fixture
def readings():
    return [
        {"soil_moisture": 70, "timestamp": "2024-05-01T00:00:00Z"},
        {"soil_moisture": 66, "timestamp": "2024-05-01T06:00:00Z"},
        {"soil_moisture": 62, "timestamp": "2024-05-01T12:00:00Z"},
    ]
