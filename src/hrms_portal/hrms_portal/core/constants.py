"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (5, 10, 20, 50)
DEFAULT_SEARCH_PLACEHOLDER = "Search..."
EMPTY_TABLE_MESSAGE = "No results found."

DEFAULT_API_TIMEOUT_SECONDS = 10
MIN_RESET_PASSWORD_LENGTH = 8
DEFAULT_UPCOMING_HOLIDAYS = 5
