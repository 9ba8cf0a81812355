from datetime import date

import requests

from backend.models.api import PriceCalendarResponse
from frontend.config import API_BASE_URL, API_TIMEOUT, DEFAULT_CURRENCY, HEALTH_CHECK_TIMEOUT


def check_api_health() -> bool:
    """Check if the backend API is running."""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=HEALTH_CHECK_TIMEOUT)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def get_price_calendar(
    origin: str, destination: str, departure: date, currency: str = DEFAULT_CURRENCY
) -> dict:
    """Request the daily price calendar from the backend API."""
    try:
        response = requests.get(
            f"{API_BASE_URL}/prices",
            params={
                "origin": origin,
                "destination": destination,
                "date": departure.strftime("%Y-%m-%d"),
                "currency": currency,
            },
            timeout=API_TIMEOUT,
        )
        response.raise_for_status()

        return {
            "success": True,
            "results": PriceCalendarResponse.model_validate(response.json()),
        }
    except requests.exceptions.Timeout:
        return {
            "success": False,
            "error": "Request timed out. Please try again.",
        }
    except (requests.exceptions.RequestException, ValueError) as e:
        return {"success": False, "error": str(e)}
