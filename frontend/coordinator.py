import logging
from typing import Callable, Optional, Union

from pydantic import BaseModel

from backend.models.prices import PriceDay
from backend.models.search import SearchQuery
from frontend.api import get_price_calendar
from frontend.config import FETCH_ERROR_MESSAGE
from frontend.price_calendar import Pagination

logger = logging.getLogger(__name__)


class CalendarState(BaseModel):
    """Everything the page needs to render, owned by the coordinator."""

    prices: list[PriceDay] = []
    loading: bool = False
    error: Optional[str] = None
    page: int = 1
    query: Optional[SearchQuery] = None
    request_id: int = 0

    @property
    def pagination(self) -> Pagination:
        return Pagination(total_items=len(self.prices), page=self.page)


class SearchStarted(BaseModel):
    query: SearchQuery


class SearchSucceeded(BaseModel):
    request_id: int
    prices: list[PriceDay]


class SearchFailed(BaseModel):
    request_id: int
    message: str


class PageRequested(BaseModel):
    page: int


Event = Union[SearchStarted, SearchSucceeded, SearchFailed, PageRequested]


def reduce(state: CalendarState, event: Event) -> CalendarState:
    """Return the state that results from applying an event."""
    if isinstance(event, SearchStarted):
        return state.model_copy(
            update={
                "loading": True,
                "error": None,
                "query": event.query,
                "request_id": state.request_id + 1,
            }
        )

    if isinstance(event, (SearchSucceeded, SearchFailed)) and event.request_id != state.request_id:
        # A newer search has started since this one was issued
        logger.info(f"Ignoring stale result for request {event.request_id}")
        return state

    if isinstance(event, SearchSucceeded):
        return state.model_copy(
            update={"prices": event.prices, "loading": False, "error": None, "page": 1}
        )

    if isinstance(event, SearchFailed):
        return state.model_copy(update={"loading": False, "error": event.message})

    if isinstance(event, PageRequested):
        pagination = state.pagination.go_to(event.page)
        return state.model_copy(update={"page": pagination.page})

    raise TypeError(f"Unknown event: {event!r}")


class CalendarCoordinator:
    """Owns the calendar state and is the only place that changes it."""

    def __init__(
        self,
        state: Optional[CalendarState] = None,
        fetch: Callable[..., dict] = get_price_calendar,
    ):
        self.state = state or CalendarState()
        self.fetch = fetch

    def dispatch(self, event: Event) -> CalendarState:
        self.state = reduce(self.state, event)
        return self.state

    def search(self, query: SearchQuery) -> CalendarState:
        """Fetch prices for a validated query and record the outcome."""
        self.dispatch(SearchStarted(query=query))
        request_id = self.state.request_id

        logger.info(f"Searching {query.origin} -> {query.destination} from {query.date}")
        try:
            result = self.fetch(query.origin, query.destination, query.date)
        except Exception as e:
            logger.error(f"Price calendar fetch raised: {e}")
            result = {"success": False, "error": str(e)}

        if result.get("success"):
            return self.dispatch(
                SearchSucceeded(request_id=request_id, prices=result["results"].prices)
            )

        logger.warning(f"Price calendar fetch failed: {result.get('error', 'Unknown error')}")
        return self.dispatch(SearchFailed(request_id=request_id, message=FETCH_ERROR_MESSAGE))

    def change_page(self, page: int) -> CalendarState:
        return self.dispatch(PageRequested(page=page))
