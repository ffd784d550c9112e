import os

from .config import Config

DATA_DIR = os.getenv("WORKBOARD_DATA_DIR", "examples/data")
HISTORY_PAGE_SIZE = Config.HISTORY_PAGE_SIZE
ANALYTICS_DAYS = Config.ANALYTICS_DAYS

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True
