"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"

DEFAULT_APP_SLUG = "rana-hazir-hai"
DEFAULT_DATA_DIR = "data"

# Percentage bands used by the reports view.
GOOD_ATTENDANCE_PERCENT = 75
WARNING_ATTENDANCE_PERCENT = 50

EXPORT_INDENT = 2
