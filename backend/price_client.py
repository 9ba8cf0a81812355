import logging
from datetime import date
from typing import Optional

import requests
from pydantic import ValidationError

from backend.config import ConfigurationError, Settings, get_settings
from backend.models.prices import PriceCalendar, PriceCalendarPayload, PriceDay
from backend.observability import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

PRICE_CALENDAR_PATH = "/getPriceCalendar"


class PriceFetchError(Exception):
    """Raised when the price calendar could not be fetched or understood."""


class PriceCalendarClient:
    """Client for the Sky Scrapper price calendar endpoint."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        if not self.settings.pricing_configured():
            raise ConfigurationError("RAPIDAPI_KEY environment variable is required")

        self.url = self.settings.price_api_base_url.rstrip("/") + PRICE_CALENDAR_PATH

    def _headers(self) -> dict:
        return {
            "X-RapidAPI-Key": self.settings.rapidapi_key,
            "X-RapidAPI-Host": self.settings.rapidapi_host,
        }

    def _request(self, params: dict) -> dict:
        try:
            response = requests.get(
                self.url,
                params=params,
                headers=self._headers(),
                timeout=self.settings.price_api_timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            # Also covers JSON decoding errors raised by response.json()
            raise PriceFetchError(f"Price calendar request failed: {e}") from e

    def fetch_price_calendar(
        self,
        origin: str,
        destination: str,
        departure: date,
        currency: Optional[str] = None,
    ) -> PriceCalendar:
        """
        Fetch the daily price calendar for a route.

        Args:
            origin: Origin airport code (Sky ID).
            destination: Destination airport code (Sky ID).
            departure: First day of the calendar.
            currency: ISO currency code, defaults to the configured currency.

        Returns:
            PriceCalendar with one record per day and the tier legend.

        Raises:
            PriceFetchError: on any network, status or payload problem.
        """
        params = {
            "originSkyId": origin,
            "destinationSkyId": destination,
            "fromDate": departure.strftime("%Y-%m-%d"),
            "currency": currency or self.settings.default_currency,
        }

        with tracer.start_as_current_span("price_calendar_fetch") as span:
            span.set_attribute("route.origin", origin)
            span.set_attribute("route.destination", destination)
            span.set_attribute("route.from_date", params["fromDate"])

            logger.info(
                f"Fetching price calendar {origin} -> {destination} from {params['fromDate']}"
            )
            body = self._request(params)

            try:
                payload = PriceCalendarPayload.model_validate(body)
            except ValidationError as e:
                span.set_attribute("error.type", "malformed_response")
                raise PriceFetchError(f"Malformed price calendar response: {e}") from e

            if not payload.status or payload.data is None:
                span.set_attribute("error.type", "unsuccessful_response")
                raise PriceFetchError(
                    f"Price calendar API reported failure: {payload.message or 'no data'}"
                )

            calendar = payload.data.flights
            span.set_attribute("response.days", len(calendar.days))
            logger.info(f"Received {len(calendar.days)} price days")
            return calendar

    def fetch_prices(
        self,
        origin: str,
        destination: str,
        departure: date,
        currency: Optional[str] = None,
    ) -> list[PriceDay]:
        return self.fetch_price_calendar(origin, destination, departure, currency).days


def fetch_prices(
    origin: str, destination: str, departure: date, currency: str = "USD"
) -> list[PriceDay]:
    """Fetch daily prices with a client built from the environment."""
    return PriceCalendarClient().fetch_prices(origin, destination, departure, currency)
