import datetime

from pydantic import BaseModel, ConfigDict, Field


class SearchQuery(BaseModel):
    """Validated, normalised price calendar search."""

    model_config = ConfigDict(frozen=True)

    origin: str = Field(description="Origin airport IATA code, uppercase")
    destination: str = Field(description="Destination airport IATA code, uppercase")
    date: datetime.date = Field(description="First day of the calendar")
