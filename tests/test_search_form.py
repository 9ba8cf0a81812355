from datetime import date

import pytest

from backend.models.search import SearchQuery
from frontend.search_form import (
    FormStatus,
    ValidationError,
    ValidationErrorKind,
    form_status,
    validate,
)

DEPARTURE = date(2025, 6, 1)


class TestValidate:
    """Test suite for search form validation."""

    def test_valid_query_is_normalised(self):
        result = validate("jfk", "Lax", DEPARTURE)
        assert result == SearchQuery(origin="JFK", destination="LAX", date=DEPARTURE)

    @pytest.mark.parametrize(
        "origin,destination,departure",
        [
            ("", "LAX", DEPARTURE),
            ("JFK", "", DEPARTURE),
            ("JFK", "LAX", None),
            (None, None, None),
        ],
    )
    def test_missing_fields(self, origin, destination, departure):
        result = validate(origin, destination, departure)
        assert isinstance(result, ValidationError)
        assert result.kind == ValidationErrorKind.MISSING_FIELDS
        assert result.title == "Missing Information"

    def test_invalid_origin(self):
        result = validate("XYZ", "LAX", DEPARTURE)
        assert result.kind == ValidationErrorKind.INVALID_ORIGIN
        assert result.title == "Invalid Origin"

    def test_invalid_destination(self):
        result = validate("JFK", "ZZZ", DEPARTURE)
        assert result.kind == ValidationErrorKind.INVALID_DESTINATION
        assert result.title == "Invalid Destination"

    @pytest.mark.parametrize("origin,destination", [("JFK", "JFK"), ("jfk", "JFK"), ("Lhr", "lHR")])
    def test_same_airport_after_normalisation(self, origin, destination):
        result = validate(origin, destination, DEPARTURE)
        assert result.kind == ValidationErrorKind.SAME_AIRPORT
        assert result.title == "Invalid Route"
        assert result.message == "Origin and destination cannot be the same."

    def test_first_failure_wins(self):
        # Both codes invalid: origin is reported
        assert validate("XYZ", "ZZZ", DEPARTURE).kind == ValidationErrorKind.INVALID_ORIGIN
        # Missing date beats an invalid origin
        assert validate("XYZ", "LAX", None).kind == ValidationErrorKind.MISSING_FIELDS

    def test_each_error_has_distinct_title(self):
        errors = [
            validate("", "", None),
            validate("XYZ", "LAX", DEPARTURE),
            validate("JFK", "XYZ", DEPARTURE),
            validate("JFK", "JFK", DEPARTURE),
        ]
        assert len({error.title for error in errors}) == 4
        assert len({error.message for error in errors}) == 4


class TestFormStatus:
    """Test suite for the Incomplete/Ready form status."""

    def test_incomplete(self):
        assert form_status("JFK", None, DEPARTURE) == FormStatus.INCOMPLETE
        assert form_status("", "LAX", DEPARTURE) == FormStatus.INCOMPLETE

    def test_ready(self):
        # Ready only means every field is filled in, not that it validates
        assert form_status("JFK", "JFK", DEPARTURE) == FormStatus.READY
