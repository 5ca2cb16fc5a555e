"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 8
DEFAULT_TREND_DAYS = 30
DEFAULT_POOL_SIZE = 10
JWT_ALGORITHM = "HS256"
