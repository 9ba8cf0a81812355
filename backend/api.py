import logging
import os
from datetime import date, datetime

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from backend.airports import Airport, is_valid_airport_code, list_airports
from backend.config import ConfigurationError, get_settings
from backend.models.api import HealthResponse, PriceCalendarResponse
from backend.models.search import SearchQuery
from backend.observability import setup_tracing
from backend.price_client import PriceCalendarClient, PriceFetchError

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

setup_tracing()

app = FastAPI(
    title="Flight Price Calendar API",
    description="Daily flight prices for a route, proxied from the Sky Scrapper price calendar",
    version="1.0.0",
)

# Add CORS middleware to allow browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_price_client() -> PriceCalendarClient:
    return PriceCalendarClient(get_settings())


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Flight Price Calendar API is running"}


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(status="healthy", service="flight-price-calendar-api")


@app.get("/airports", response_model=list[Airport])
async def airports():
    return list_airports()


@app.get("/prices", response_model=PriceCalendarResponse)
def prices(
    origin: str = Query(..., min_length=3, max_length=3, description="Origin airport IATA code."),
    destination: str = Query(..., min_length=3, max_length=3, description="Destination airport IATA code."),
    date: date = Query(..., description="First calendar day in YYYY-MM-DD format."),
    currency: str = Query("USD", min_length=3, max_length=3, description="ISO currency code."),
):
    """
    Get the daily price calendar for a route.
    """
    origin = origin.upper()
    destination = destination.upper()

    if not is_valid_airport_code(origin):
        raise HTTPException(status_code=400, detail=f"Invalid origin airport code: {origin}")
    if not is_valid_airport_code(destination):
        raise HTTPException(status_code=400, detail=f"Invalid destination airport code: {destination}")
    if origin == destination:
        raise HTTPException(status_code=400, detail="Origin and destination cannot be the same.")

    query = SearchQuery(origin=origin, destination=destination, date=date)

    try:
        client = get_price_client()
    except ConfigurationError as e:
        logger.error(f"Price client is not configured: {e}")
        raise HTTPException(status_code=503, detail="Price calendar service is not configured.") from e

    now = datetime.now()
    try:
        calendar = client.fetch_price_calendar(origin, destination, date, currency.upper())
    except PriceFetchError as e:
        logger.error(f"Error fetching price calendar: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch flight prices.") from e

    duration = datetime.now() - now

    return PriceCalendarResponse(
        success=True,
        query=query,
        currency=currency.upper(),
        prices=calendar.days,
        groups=calendar.groups,
        no_price_label=calendar.no_price_label,
        duration_seconds=duration.total_seconds(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
