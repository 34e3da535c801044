"""Top screen configuration - titles, column definitions and widget IDs."""

from __future__ import annotations

TOP_SCREEN_TITLE = "Top pods"
TOP_TITLE_TEMPLATE = "Pods consuming most CPU (refreshes every {interval} seconds)"

PODS_TABLE_ID = "pods-table"
TOP_TITLE_ID = "top-title"
REFRESH_GAUGE_ID = "refresh-gauge"

REFRESH_WORKER_NAME = "top-refresh"

# =============================================================================
# Table Column Definitions: list[tuple[str, str]] = [(label, key), ...]
# =============================================================================

TOP_PODS_COLUMNS: list[tuple[str, str]] = [
    ("namespace", "namespace"),
    ("name", "name"),
    ("node", "node"),
    ("CPU", "cpu"),
    ("RAM", "memory"),
]


def format_top_title(interval: int) -> str:
    return TOP_TITLE_TEMPLATE.format(interval=interval)
