"""
Service-wide constants
"""

SERVICE_NAME = "hk-holiday-calendar"

# Weekday index (0 = Sunday) highlighted as the default non-working day
REST_DAY_INDEX = 0

DAYS_PER_WEEK = 7

LOCALE_ZH = "zh"
LOCALE_EN = "en"

# Year range accepted by the calendar routes (datetime.date limits)
MIN_YEAR = 1
MAX_YEAR = 9999
