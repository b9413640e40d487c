"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

UNSPECIFIED_LABEL = "Não informado"

AGE_BANDS = ("18-25", "26-35", "36-45", "46-55", "56+")

DEFAULT_ROLLING_DAYS = 30
DEFAULT_PAGE_SIZE = 10
DEFAULT_RECENT_LIMIT = 5
MAX_PHONE_DIGITS = 11
