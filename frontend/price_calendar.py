import math
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable, Sequence, Union

import pandas as pd
import streamlit as st

from backend.models.prices import PriceDay, Tier
from frontend.config import (
    CALENDAR_COLUMNS,
    CURRENCY_SYMBOL,
    EMPTY_STATE_MESSAGE,
    PAGE_SIZE,
    PRICE_DECIMAL_PLACES,
    SKELETON_CELLS,
)

LOW_THRESHOLD = Decimal("0.33")
MEDIUM_THRESHOLD = Decimal("0.66")

ELLIPSIS = "..."

TIER_COLORS = {
    Tier.LOW: "#f0fdf4",
    Tier.MEDIUM: "#fefce8",
    Tier.HIGH: "#fef2f2",
}

LOWEST_PRICE_LABEL = "✨ Lowest Price"
PEAK_PRICE_LABEL = "📈 Peak Price"


def _as_decimal(value: Union[Decimal, float, int]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def price_bounds(records: Sequence[PriceDay]) -> tuple[Decimal, Decimal]:
    """Lowest and highest price over the whole result set."""
    if not records:
        raise ValueError("Cannot compute price bounds of an empty result set")
    prices = [record.price for record in records]
    return min(prices), max(prices)


def tier_thresholds(lowest: Decimal, highest: Decimal) -> tuple[Decimal, Decimal]:
    price_range = highest - lowest
    return (
        lowest + price_range * LOW_THRESHOLD,
        lowest + price_range * MEDIUM_THRESHOLD,
    )


def price_tier(price, lowest, highest) -> Tier:
    """
    Bucket a price relative to the result set's min/max.

    Prices up to a third of the range above the minimum are low, up to two
    thirds are medium, the rest high. When every price is equal the range is
    zero and every price is low.
    """
    price = _as_decimal(price)
    threshold1, threshold2 = tier_thresholds(_as_decimal(lowest), _as_decimal(highest))

    if price <= threshold1:
        return Tier.LOW
    if price <= threshold2:
        return Tier.MEDIUM
    return Tier.HIGH


def annotate_prices(records: Sequence[PriceDay]) -> pd.DataFrame:
    """Build a frame of records with their display tier, colour and extreme-price labels."""
    columns = ["day", "price", "group", "tier", "color", "is_lowest", "is_peak"]
    if not records:
        return pd.DataFrame(columns=columns)

    lowest, highest = price_bounds(records)

    df = pd.DataFrame([record.model_dump() for record in records])
    df["tier"] = df["price"].apply(lambda price: price_tier(price, lowest, highest))
    df["color"] = df["tier"].map(TIER_COLORS)
    df["is_lowest"] = df["price"] == lowest
    df["is_peak"] = df["price"] == highest
    return df[columns]


@dataclass(frozen=True)
class Pagination:
    """Fixed-size pages over a result set; pages are 1-indexed."""

    total_items: int
    page: int = 1
    page_size: int = PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @property
    def start(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end(self) -> int:
        return self.page * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def accepts(self, page: int) -> bool:
        return 1 <= page <= self.total_pages

    def go_to(self, page: int) -> "Pagination":
        """Move to a page; out-of-range requests leave the pagination unchanged."""
        if not self.accepts(page):
            return self
        return replace(self, page=page)

    def page_slice(self, items: Sequence) -> list:
        return list(items[self.start : self.end])


def page_strip(current: int, total: int) -> list[Union[int, str]]:
    """
    Condensed page numbers: first page, ellipsis, up to three pages starting
    just before the current one, ellipsis, last page.
    """
    if total < 1:
        return []

    window_start = max(1, current - 1)
    window = [
        page for page in range(window_start, window_start + min(3, total)) if page <= total
    ]

    strip: list[Union[int, str]] = []
    if window[0] > 1:
        strip.append(1)
        if window[0] > 2:
            strip.append(ELLIPSIS)
    strip.extend(window)
    if window[-1] < total:
        if window[-1] < total - 1:
            strip.append(ELLIPSIS)
        strip.append(total)
    return strip


def format_day(record_day) -> str:
    """Format a day like 'Jun 1'."""
    return f"{record_day.strftime('%b')} {record_day.day}"


def format_price(price) -> str:
    return f"{CURRENCY_SYMBOL}{price:.{PRICE_DECIMAL_PLACES}f}"


def price_labels(row) -> list[str]:
    labels = []
    if row["is_lowest"]:
        labels.append(LOWEST_PRICE_LABEL)
    if row["is_peak"]:
        labels.append(PEAK_PRICE_LABEL)
    return labels


def _render_skeleton() -> None:
    st.subheader("Price Calendar")
    cols = st.columns(CALENDAR_COLUMNS)
    for i in range(SKELETON_CELLS):
        with cols[i % CALENDAR_COLUMNS]:
            st.markdown(
                "<div class='price-skeleton' style='height:6rem;background:#e5e7eb;border-radius:0.5rem;"
                "margin-bottom:1rem'></div>",
                unsafe_allow_html=True,
            )


def _render_card(row) -> None:
    labels = "<br>".join(price_labels(row))
    st.markdown(
        f"""
        <div class="price-card" style="background:{row['color']};padding:1rem;border-radius:0.5rem;
                    border:1px solid #e5e7eb;margin-bottom:1rem;min-height:7rem">
            <div style="font-size:0.875rem;font-weight:500">{format_day(row['day'])}</div>
            <div style="margin-top:0.5rem;font-size:1.125rem;font-weight:700">{format_price(row['price'])}</div>
            <div style="margin-top:0.25rem;font-size:0.75rem;color:#6b7280">{labels}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _render_pagination(pagination: Pagination, on_page_change: Callable[[int], None]) -> None:
    prev_col, strip_col, next_col = st.columns([1, 4, 1])

    with prev_col:
        st.button(
            "Previous",
            disabled=not pagination.has_previous,
            on_click=on_page_change,
            args=(pagination.page - 1,),
            key="page_previous",
            use_container_width=True,
        )

    with strip_col:
        strip = page_strip(pagination.page, pagination.total_pages)
        cols = st.columns(len(strip) + 1)
        for i, entry in enumerate(strip):
            with cols[i]:
                if entry == ELLIPSIS:
                    st.markdown(ELLIPSIS)
                    continue
                st.button(
                    str(entry),
                    type="primary" if entry == pagination.page else "secondary",
                    on_click=on_page_change,
                    args=(entry,),
                    key=f"page_{entry}_{i}",
                )
        with cols[-1]:
            st.caption(f"Page {pagination.page} of {pagination.total_pages}")

    with next_col:
        st.button(
            "Next",
            disabled=not pagination.has_next,
            on_click=on_page_change,
            args=(pagination.page + 1,),
            key="page_next",
            use_container_width=True,
        )


def render_price_calendar(
    prices: Sequence[PriceDay],
    loading: bool,
    page: int,
    on_page_change: Callable[[int], None],
) -> None:
    """Display the paginated, colour-coded price calendar."""
    if loading:
        _render_skeleton()
        return

    if not prices:
        st.info(EMPTY_STATE_MESSAGE)
        return

    st.subheader("Price Calendar")

    # Tiers and labels come from the full result set, not just the visible page
    annotated = annotate_prices(prices)
    pagination = Pagination(total_items=len(prices), page=page)
    visible = annotated.iloc[pagination.start : pagination.end]

    cols = st.columns(CALENDAR_COLUMNS)
    for i, (_, row) in enumerate(visible.iterrows()):
        with cols[i % CALENDAR_COLUMNS]:
            _render_card(row)

    _render_pagination(pagination, on_page_change)
