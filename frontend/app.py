import streamlit as st

from frontend.api import check_api_health
from frontend.coordinator import CalendarCoordinator, CalendarState
from frontend.price_calendar import render_price_calendar
from frontend.search_form import render_search_form

# Configure the page
st.set_page_config(
    page_title="Flight Price Calendar",
    page_icon="✈️",
    layout="wide",
)


def get_coordinator() -> CalendarCoordinator:
    """Coordinator bound to this session's calendar state."""
    if "calendar_state" not in st.session_state:
        st.session_state.calendar_state = CalendarState()
    return CalendarCoordinator(st.session_state.calendar_state)


def save_state(coordinator: CalendarCoordinator) -> None:
    st.session_state.calendar_state = coordinator.state


def handle_page_change(page: int) -> None:
    coordinator = get_coordinator()
    coordinator.change_page(page)
    save_state(coordinator)


def main():
    """Main application function."""
    st.title("✈️ Flight Price Calendar")

    # Check API health
    if not check_api_health():
        st.error("🔴 Backend API is not running. Please start the backend server.")
        st.stop()

    coordinator = get_coordinator()

    query = render_search_form()
    if query is not None:
        calendar_slot = st.empty()
        with calendar_slot.container():
            render_price_calendar([], loading=True, page=1, on_page_change=handle_page_change)
        coordinator.search(query)
        save_state(coordinator)
        calendar_slot.empty()

    state = coordinator.state
    if query is not None and state.error:
        st.toast(state.error, icon="❌")
        st.error(f"❌ {state.error}")

    render_price_calendar(
        state.prices,
        loading=state.loading,
        page=state.page,
        on_page_change=handle_page_change,
    )


if __name__ == "__main__":
    main()
