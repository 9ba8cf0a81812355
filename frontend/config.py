import os

# API configuration
API_BASE_URL = os.getenv("PRICE_CALENDAR_API_URL", "http://localhost:8000")
API_TIMEOUT = 30
HEALTH_CHECK_TIMEOUT = 5

# Calendar display constants
PAGE_SIZE = 21
CALENDAR_COLUMNS = 7
SKELETON_CELLS = 14
PRICE_DECIMAL_PLACES = 2
DEFAULT_CURRENCY = "USD"
CURRENCY_SYMBOL = "$"

# Messages
EMPTY_STATE_MESSAGE = "Search for flights to see the price calendar"
FETCH_ERROR_MESSAGE = "Failed to fetch flight prices. Please try again."
