"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HISTORY_LIMIT = 30
RECENT_TRANSACTIONS_LIMIT = 50
DEFAULT_LOCK_TIMEOUT_SECONDS = 30
DEFAULT_SESSION_YEAR = "2024-25"
STATS_CACHE_SECONDS = 300
CLIENT_CACHE_SECONDS = 30 * 60
LAKH = 100_000
