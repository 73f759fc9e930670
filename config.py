"""
config.py
---------
Central configuration for the vacation planner.
All values loaded from environment variables with typed defaults.
"""

import os

# ── Storage ──────────────────────────────────────────────────────────────────
# Empty path keeps every trip in memory for the lifetime of the process.
TRIP_STORE_PATH: str = os.getenv("TRIP_STORE_PATH", "")
TRIP_STORE_VERSION: int = 1

# ── Images ───────────────────────────────────────────────────────────────────
IMAGE_FETCH_TIMEOUT_SECONDS: float = float(os.getenv("IMAGE_FETCH_TIMEOUT_SECONDS", "10"))
DEFAULT_DESTINATION_IMAGE_URL: str = os.getenv(
    "DEFAULT_DESTINATION_IMAGE_URL",
    "https://images.unsplash.com/photo-1484589065579-248aad0d8b13"
    "?q=80&w=3459&auto=format&fit=crop&ixlib=rb-4.0.3",
)

# ── Units & Display ──────────────────────────────────────────────────────────
CURRENCY_UNIT: str     = os.getenv("CURRENCY_UNIT", "USD")
DAY_HEADER_FORMAT: str = os.getenv("DAY_HEADER_FORMAT", "%A, %b %d")   # "Monday, Jun 02"
TIME_FORMAT: str       = os.getenv("TIME_FORMAT", "%H:%M")
DATE_FORMAT: str       = os.getenv("DATE_FORMAT", "%Y-%m-%d")

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
