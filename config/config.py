import os


class Config:
    # Folder holding assignments.json / work_submissions.json API dumps
    DATA_DIR = os.environ.get("WORKBOARD_DATA_DIR", "data")

    # History view: day groups per page (the dashboard shows 10)
    HISTORY_PAGE_SIZE = int(os.environ.get("HISTORY_PAGE_SIZE", "10"))

    # Manager staff analytics look-back window
    ANALYTICS_DAYS = int(os.environ.get("ANALYTICS_DAYS", "30"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
