from typing import Optional

from pydantic import BaseModel

from backend.models.prices import PriceDay, PriceGroup
from backend.models.search import SearchQuery


class HealthResponse(BaseModel):
    status: str
    service: str


class PriceCalendarResponse(BaseModel):
    success: bool
    query: Optional[SearchQuery] = None
    currency: str = "USD"
    prices: list[PriceDay] = []
    groups: list[PriceGroup] = []
    no_price_label: Optional[str] = None
    error: Optional[str] = None
    duration_seconds: Optional[float] = None
