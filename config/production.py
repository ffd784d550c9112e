import os

from .config import Config

DATA_DIR = Config.DATA_DIR
HISTORY_PAGE_SIZE = Config.HISTORY_PAGE_SIZE
ANALYTICS_DAYS = Config.ANALYTICS_DAYS

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
DEBUG = False
