from datetime import date, timedelta
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from streamlit.testing.v1 import AppTest

from frontend.config import EMPTY_STATE_MESSAGE, SKELETON_CELLS

APP_PATH = Path(__file__).resolve().parent.parent / "frontend" / "app.py"
RUN_TIMEOUT = 10


def _calendar_page():
    """Standalone page rendering the calendar from session state."""
    from datetime import date, timedelta

    import streamlit as st

    from backend.models.prices import PriceDay
    from frontend.coordinator import CalendarCoordinator, CalendarState
    from frontend.price_calendar import render_price_calendar

    if "calendar_state" not in st.session_state:
        count = st.session_state.get("record_count", 0)
        prices = [
            PriceDay(day=date(2025, 6, 1) + timedelta(days=i), group="low", price=100 + i)
            for i in range(count)
        ]
        st.session_state.calendar_state = CalendarState(
            prices=prices, loading=st.session_state.get("loading", False)
        )

    def change_page(page):
        coordinator = CalendarCoordinator(st.session_state.calendar_state)
        st.session_state.calendar_state = coordinator.change_page(page)

    state = st.session_state.calendar_state
    render_price_calendar(
        state.prices, loading=state.loading, page=state.page, on_page_change=change_page
    )


def _cards(at: AppTest) -> list:
    return [md for md in at.markdown if "price-card" in md.value]


def _skeleton_cells(at: AppTest) -> list:
    return [md for md in at.markdown if "price-skeleton" in md.value]


def _button(at: AppTest, label: str):
    return next(button for button in at.button if button.label == label)


def _calendar_app(record_count: int = 0, loading: bool = False) -> AppTest:
    at = AppTest.from_function(_calendar_page, default_timeout=RUN_TIMEOUT)
    at.session_state["record_count"] = record_count
    at.session_state["loading"] = loading
    return at


class TestRenderPriceCalendar:
    """Test suite for the calendar view's render branches."""

    def test_loading_shows_skeleton_without_computing(self):
        at = _calendar_app(record_count=30, loading=True)

        with patch("frontend.price_calendar.annotate_prices") as mock_annotate:
            at.run()

        assert not at.exception
        assert len(_skeleton_cells(at)) == SKELETON_CELLS
        assert _cards(at) == []
        assert len(at.button) == 0
        mock_annotate.assert_not_called()

    def test_empty_results_show_message(self):
        at = _calendar_app(record_count=0)
        at.run()

        assert not at.exception
        assert [info.value for info in at.info] == [EMPTY_STATE_MESSAGE]
        assert _cards(at) == []

    def test_thirty_records_paginate(self):
        at = _calendar_app(record_count=30)
        at.run()

        assert not at.exception
        assert len(_cards(at)) == 21
        assert _button(at, "Previous").disabled
        assert not _button(at, "Next").disabled
        assert "Page 1 of 2" in [caption.value for caption in at.caption]

        _button(at, "Next").click().run()

        assert len(_cards(at)) == 9
        assert not _button(at, "Previous").disabled
        assert _button(at, "Next").disabled
        assert "Page 2 of 2" in [caption.value for caption in at.caption]

    def test_cards_show_day_price_and_labels(self):
        at = _calendar_app(record_count=3)
        at.run()

        cards = [card.value for card in _cards(at)]
        assert "Jun 1" in cards[0]
        assert "$100.00" in cards[0]
        assert "Lowest Price" in cards[0]
        assert "Peak Price" in cards[2]
        assert "Lowest Price" not in cards[1] and "Peak Price" not in cards[1]


def _price_day_json(count: int, start: date) -> list[dict]:
    return [
        {"day": (start + timedelta(days=i)).isoformat(), "group": "low", "price": 100 + i}
        for i in range(count)
    ]


@pytest.fixture
def mock_backend():
    """Patch the frontend's HTTP calls to the backend API."""
    departure = date.today() + timedelta(days=30)

    def fake_get(url, params=None, timeout=None):
        if url.endswith("/health"):
            return Mock(status_code=200)
        response = Mock(status_code=200)
        response.json.return_value = {
            "success": True,
            "prices": _price_day_json(30, departure),
        }
        return response

    with patch("frontend.api.requests.get", side_effect=fake_get) as mock_get:
        yield mock_get, departure


def _search(at: AppTest, origin: str, destination: str, departure: date) -> None:
    at.selectbox(key="origin").set_value(origin)
    at.selectbox(key="destination").set_value(destination)
    at.date_input(key="departure").set_value(departure)
    _button(at, "✈️ Search Flights").click().run()


class TestPriceCalendarApp:
    """End-to-end runs of the Streamlit page with the backend mocked out."""

    def test_same_airport_is_rejected_before_fetching(self, mock_backend):
        mock_get, departure = mock_backend
        at = AppTest.from_file(str(APP_PATH), default_timeout=RUN_TIMEOUT)
        at.run()

        _search(at, "JFK", "JFK", departure)

        assert not at.exception
        assert any("Invalid Route" in error.value for error in at.error)
        urls = [call.args[0] for call in mock_get.call_args_list]
        assert not any(url.endswith("/prices") for url in urls)
        assert _cards(at) == []

    def test_search_then_next_page(self, mock_backend):
        mock_get, departure = mock_backend
        at = AppTest.from_file(str(APP_PATH), default_timeout=RUN_TIMEOUT)
        at.run()

        _search(at, "JFK", "LAX", departure)

        assert not at.exception
        assert len(_cards(at)) == 21
        assert not _button(at, "Next").disabled

        _button(at, "Next").click().run()
        assert len(_cards(at)) == 9

        # A new search starts again on the first page
        _button(at, "✈️ Search Flights").click().run()
        assert len(_cards(at)) == 21
