import os

DATA_DIR = os.getenv("WORKBOARD_DATA_DIR", "tests/data")
HISTORY_PAGE_SIZE = 10
ANALYTICS_DAYS = 30

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
