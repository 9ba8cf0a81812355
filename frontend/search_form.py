from datetime import date
from enum import Enum
from typing import Optional, Union

import streamlit as st
from pydantic import BaseModel

from backend.airports import AIRPORTS, airport_label, is_valid_airport_code
from backend.models.search import SearchQuery


class ValidationErrorKind(str, Enum):
    MISSING_FIELDS = "MissingFields"
    INVALID_ORIGIN = "InvalidOrigin"
    INVALID_DESTINATION = "InvalidDestination"
    SAME_AIRPORT = "SameAirport"


class ValidationError(BaseModel):
    """A rejected search, with the notification shown to the user."""

    kind: ValidationErrorKind
    title: str
    message: str


class FormStatus(str, Enum):
    INCOMPLETE = "Incomplete"
    READY = "Ready"


_ERRORS = {
    ValidationErrorKind.MISSING_FIELDS: (
        "Missing Information",
        "Please fill in all fields before searching.",
    ),
    ValidationErrorKind.INVALID_ORIGIN: (
        "Invalid Origin",
        "Please enter a valid origin airport code.",
    ),
    ValidationErrorKind.INVALID_DESTINATION: (
        "Invalid Destination",
        "Please enter a valid destination airport code.",
    ),
    ValidationErrorKind.SAME_AIRPORT: (
        "Invalid Route",
        "Origin and destination cannot be the same.",
    ),
}


def _error(kind: ValidationErrorKind) -> ValidationError:
    title, message = _ERRORS[kind]
    return ValidationError(kind=kind, title=title, message=message)


def form_status(
    origin: Optional[str], destination: Optional[str], departure: Optional[date]
) -> FormStatus:
    if origin and destination and departure:
        return FormStatus.READY
    return FormStatus.INCOMPLETE


def validate(
    origin: Optional[str], destination: Optional[str], departure: Optional[date]
) -> Union[SearchQuery, ValidationError]:
    """
    Validate the search form.

    Checks run in order and the first failure is returned: missing fields,
    origin code, destination code, then origin == destination. Codes are
    compared after uppercasing.
    """
    if not origin or not destination or not departure:
        return _error(ValidationErrorKind.MISSING_FIELDS)

    upper_origin = origin.upper()
    upper_destination = destination.upper()

    if not is_valid_airport_code(upper_origin):
        return _error(ValidationErrorKind.INVALID_ORIGIN)

    if not is_valid_airport_code(upper_destination):
        return _error(ValidationErrorKind.INVALID_DESTINATION)

    if upper_origin == upper_destination:
        return _error(ValidationErrorKind.SAME_AIRPORT)

    return SearchQuery(origin=upper_origin, destination=upper_destination, date=departure)


def show_validation_error(error: ValidationError) -> None:
    st.error(f"**{error.title}**: {error.message}")


def render_search_form() -> Optional[SearchQuery]:
    """Render the search inputs and return a query when a valid search is submitted."""
    codes = list(AIRPORTS)

    col1, col2, col3 = st.columns(3)
    with col1:
        origin = st.selectbox(
            "From",
            codes,
            index=None,
            format_func=airport_label,
            placeholder="Select origin airport",
            key="origin",
        )
    with col2:
        destination = st.selectbox(
            "To",
            codes,
            index=None,
            format_func=airport_label,
            placeholder="Select destination airport",
            key="destination",
        )
    with col3:
        departure = st.date_input(
            "Departure Date",
            value=None,
            min_value=date.today(),
            format="YYYY-MM-DD",
            key="departure",
        )

    search_button = st.button(
        "✈️ Search Flights",
        type="primary",
        use_container_width=True,
        help=None if form_status(origin, destination, departure) == FormStatus.READY
        else "Pick an origin, a destination and a date",
    )
    if not search_button:
        return None

    result = validate(origin, destination, departure)
    if isinstance(result, ValidationError):
        show_validation_error(result)
        return None
    return result
