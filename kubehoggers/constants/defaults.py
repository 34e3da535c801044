"""Default values for settings.

All default values used in AppSettings model and CLI option fallbacks.
"""

from typing import Final

# ============================================================================
# Refresh defaults (seconds)
# ============================================================================

TOP_REFRESH_INTERVAL_DEFAULT: Final = 10
STATUS_REFRESH_INTERVAL_DEFAULT: Final = 1

# ============================================================================
# Display defaults
# ============================================================================

ROWS_LIMIT_DEFAULT: Final = 20

# ============================================================================
# Error handling defaults
# ============================================================================

ABORT_ON_CYCLE_ERROR_DEFAULT: Final = True

__all__ = [
    "ABORT_ON_CYCLE_ERROR_DEFAULT",
    "ROWS_LIMIT_DEFAULT",
    "STATUS_REFRESH_INTERVAL_DEFAULT",
    "TOP_REFRESH_INTERVAL_DEFAULT",
]
