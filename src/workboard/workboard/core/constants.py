"""Defaults shared by the status views and the submission workflow."""

DEFAULT_HISTORY_PAGE_SIZE = 10
DEFAULT_ANALYTICS_DAYS = 30
MAX_HOURS_PER_DAY = 24

DATE_KEY_FORMAT = "%Y-%m-%d"
