"""All enum definitions.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# View Enums
# =============================================================================

class ViewMode(Enum):
    """Which reporting flow the app runs."""

    REPORT = "report"
    TOP = "top"


# =============================================================================
# Refresh Loop Enums
# =============================================================================

class RefreshPhase(Enum):
    """Phases of the live view refresh loop."""

    IDLE = "idle"
    FETCHING = "fetching"
    RESOLVING = "resolving"
    RENDERING = "rendering"
    SLEEPING = "sleeping"


__all__ = [
    "RefreshPhase",
    "ViewMode",
]
