"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 100
DEFAULT_CLASS_LABEL = "General"
FILTER_ALL = "all"

DASHBOARD_STUDENT_LIMIT = 10
DASHBOARD_RECENT_GRADES = 5
PENDING_GRADES_RATIO = 0.15

DEFAULT_STORE_TIMEOUT = 15
DEFAULT_STORE_MAX_RETRIES = 3
DEFAULT_STORE_RETRY_BACKOFF = 0.5
