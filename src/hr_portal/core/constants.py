"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
MONTH_FORMAT = "%Y-%m"

DEFAULT_WORK_MODE = "office"
EMPLOYEE_CODE_PREFIX = "EMP"
HOURS_PRECISION = "0.01"
