"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_MORNING_CUTOFF = time(6, 40)
DEFAULT_AFTERNOON_CUTOFF = time(13, 10)
DEFAULT_SPLIT_HOUR = 12

DEFAULT_LUNCH_START = time(12, 0)
DEFAULT_LUNCH_END = time(13, 0)

DEFAULT_STATS_WINDOW = 30
WORK_WEEK_DAYS = 5
