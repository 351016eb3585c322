"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PRICE_PER_VISIT = 1250
DEFAULT_MONTH_LOCALE = "ru"

WEEKS_IN_GRID = 6
DAYS_IN_WEEK = 7
DAYS_IN_GRID = WEEKS_IN_GRID * DAYS_IN_WEEK
