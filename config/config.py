"""Settings shared by every environment, read from the process environment."""

import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "metalflow"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Late cutoffs. For a single-shift workshop set both cutoffs to the same
# time (e.g. 09:00).
SHIFT_MORNING_CUTOFF = os.getenv("SHIFT_MORNING_CUTOFF", "06:40")
SHIFT_AFTERNOON_CUTOFF = os.getenv("SHIFT_AFTERNOON_CUTOFF", "13:10")
SHIFT_SPLIT_HOUR = int(os.getenv("SHIFT_SPLIT_HOUR", "12"))

LUNCH_START = os.getenv("LUNCH_START", "12:00")
LUNCH_END = os.getenv("LUNCH_END", "13:00")

# recordCount: newest N records; calendarDays: last N days
STATS_WINDOW = int(os.getenv("STATS_WINDOW", "30"))
STATS_WINDOW_BY = os.getenv("STATS_WINDOW_BY", "recordCount")
