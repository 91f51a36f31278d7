"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_REPORT_DAYS = 7
WEEKLY_INCOME_DAYS = 7
MIN_SEARCH_LENGTH = 2
MIN_PASSWORD_LENGTH = 6
DEFAULT_DASHBOARD_WORKERS = 5

UNKNOWN = "Unknown"
NOT_ASSIGNED = "Not assigned"
ENGLISH_MARKER = "english"

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
