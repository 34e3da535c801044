"""Report screen configuration - titles, column definitions and widget IDs."""

from __future__ import annotations

REPORT_TITLE = "Resources reservations and limits by pods for each node"
REPORT_SCREEN_TITLE = "Node report"

NODES_TABLE_ID = "nodes-table"
REPORT_TITLE_ID = "report-title"

# =============================================================================
# Table Column Definitions: list[tuple[str, str]] = [(label, key), ...]
# =============================================================================

NODE_REPORT_COLUMNS: list[tuple[str, str]] = [
    ("name", "name"),
    ("total pods", "total_pods"),
    ("unrestricted pods", "unrestricted_pods"),
    ("CPU reservations", "reserved_cpu"),
    ("CPU limits", "committed_cpu"),
    ("RAM reservations", "reserved_memory"),
    ("RAM limits", "committed_memory"),
]
