"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LEADERBOARD_SIZE = 3
MIN_RECORDS_TO_RANK = 1
TREND_RATE_DECIMALS = 1
EMPTY_WIN_RATE_LABEL = "—"
