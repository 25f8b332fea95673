"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Stored in attendance.hour for whole-day marks so the composite UNIQUE
# index treats "no hour" as an ordinary comparable value.
WHOLE_DAY_HOUR = -1

DEFAULT_PORT = 3000
DEFAULT_CONNECT_TIMEOUT = 5.0

LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
