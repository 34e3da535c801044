"""Limit and threshold constants.

All validation ranges for settings values.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1
ROWS_LIMIT_MIN: Final = 1

__all__ = [
    "REFRESH_INTERVAL_MIN",
    "ROWS_LIMIT_MIN",
]
