from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PriceDay(BaseModel):
    """One calendar day's quoted fare."""

    model_config = ConfigDict(frozen=True)

    day: date = Field(description="Calendar day of departure")
    group: Tier = Field(description="Tier reported by the pricing API")
    price: Decimal = Field(description="Cheapest quoted fare for the day")


class PriceGroup(BaseModel):
    """Legend entry for a tier, as labelled by the pricing API."""

    id: str
    label: str


class PriceCalendar(BaseModel):
    """The `data.flights` object of a price calendar response."""

    model_config = ConfigDict(populate_by_name=True)

    no_price_label: Optional[str] = Field(None, alias="noPriceLabel")
    groups: list[PriceGroup] = Field(default_factory=list)
    days: list[PriceDay] = Field(default_factory=list)


class PriceCalendarData(BaseModel):
    flights: PriceCalendar


class PriceCalendarPayload(BaseModel):
    """Raw JSON body returned by the price calendar endpoint."""

    status: bool
    data: Optional[PriceCalendarData] = None
    message: Optional[str] = None
