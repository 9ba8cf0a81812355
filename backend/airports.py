from typing import Optional

from pydantic import BaseModel


class Airport(BaseModel, frozen=True):
    code: str
    name: str


AIRPORTS: dict[str, str] = {
    "JFK": "New York John F. Kennedy",
    "LAX": "Los Angeles International",
    "ORD": "Chicago O'Hare",
    "LHR": "London Heathrow",
    "CDG": "Paris Charles de Gaulle",
    "DXB": "Dubai International",
    "BOM": "Mumbai Chhatrapati Shivaji",
    "DEL": "Delhi Indira Gandhi",
    "SIN": "Singapore Changi",
    "HKG": "Hong Kong International",
    "SYD": "Sydney Kingsford Smith",
    "NRT": "Tokyo Narita",
    "FRA": "Frankfurt International",
    "AMS": "Amsterdam Schiphol",
    "MAD": "Madrid Barajas",
}


def is_valid_airport_code(code: Optional[str]) -> bool:
    """Check that the code is a known 3-letter IATA code, ignoring case."""
    if not code:
        return False
    return len(code) == 3 and code.upper() in AIRPORTS


def lookup(code: Optional[str]) -> Optional[str]:
    """Get the display name for an airport code."""
    if not is_valid_airport_code(code):
        return None
    return AIRPORTS[code.upper()]


def list_airports() -> list[Airport]:
    return [Airport(code=code, name=name) for code, name in AIRPORTS.items()]


def airport_label(code: str) -> str:
    """Format an airport for selectors, e.g. 'JFK - New York John F. Kennedy'."""
    name = lookup(code)
    if name is None:
        return code
    return f"{code.upper()} - {name}"
