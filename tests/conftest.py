import os
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from backend.api import app
from backend.config import Settings
from backend.models.prices import PriceDay


@pytest.fixture
def test_client():
    """FastAPI test client fixture."""
    return TestClient(app)


@pytest.fixture
def test_settings():
    """Settings with a dummy RapidAPI key."""
    return Settings(
        rapidapi_key="test-key",
        rapidapi_host="sky-scrapper.p.rapidapi.com",
        price_api_base_url="https://sky-scrapper.p.rapidapi.com/api/v1/flights",
    )


@pytest.fixture
def mock_rapidapi_env():
    """Mock RapidAPI key environment variable."""
    original_key = os.environ.get("RAPIDAPI_KEY")
    os.environ["RAPIDAPI_KEY"] = "test-api-key"
    yield
    if original_key:
        os.environ["RAPIDAPI_KEY"] = original_key
    else:
        os.environ.pop("RAPIDAPI_KEY", None)


@pytest.fixture
def make_price_days():
    """Factory for consecutive price days with increasing prices."""

    def _make(count: int, start: date = date(2025, 6, 1), base_price: int = 100):
        return [
            PriceDay(day=start + timedelta(days=i), group="low", price=base_price + i)
            for i in range(count)
        ]

    return _make


@pytest.fixture
def sample_price_days():
    """Three days priced 100, 200 and 300."""
    return [
        PriceDay(day=date(2025, 6, 1), group="low", price=100),
        PriceDay(day=date(2025, 6, 2), group="medium", price=200),
        PriceDay(day=date(2025, 6, 3), group="high", price=300),
    ]


@pytest.fixture
def sample_api_payload():
    """Price calendar body as returned by the Sky Scrapper API."""
    return {
        "status": True,
        "message": "Successful",
        "timestamp": 1717000000000,
        "data": {
            "flights": {
                "noPriceLabel": "N/A",
                "groups": [
                    {"id": "low", "label": "cheap"},
                    {"id": "medium", "label": "average"},
                    {"id": "high", "label": "expensive"},
                ],
                "days": [
                    {"day": "2025-06-01", "group": "low", "price": 120.5},
                    {"day": "2025-06-02", "group": "medium", "price": 180},
                    {"day": "2025-06-03", "group": "high", "price": 260.25},
                ],
            }
        },
    }
