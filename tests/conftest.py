from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from labinsights.main import app
from labinsights.schemas.biomarker import BiomarkerReading


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def make_reading() -> Callable[..., BiomarkerReading]:
    def _make(**overrides) -> BiomarkerReading:
        fields = {
            "id": "glucose",
            "name": "Fasting Glucose",
            "unit": "mg/dL",
            "last_updated": "1 week ago",
            "value": 88,
            "status": "optimal",
            "trend": "stable",
            "trend_percent": 0,
        }
        fields.update(overrides)
        return BiomarkerReading(**fields)

    return _make
