"""Error taxonomy for cluster and metrics data operations."""

from __future__ import annotations


class HoggersError(Exception):
    """Base exception for failed upstream data operations."""


class UpstreamListingError(HoggersError):
    """Raised when listing nodes, pods or pod metrics fails."""

    def __init__(self, source: str, detail: str, hint: str | None = None) -> None:
        self.source = source
        self.detail = detail
        self.hint = hint
        message = f"Failed to list {source}: {detail}"
        if hint:
            message = f"{hint}\n\n{message}"
        super().__init__(message)


class ResolutionError(HoggersError):
    """Raised when a pod's node assignment cannot be fetched."""

    def __init__(self, namespace: str, name: str, detail: str) -> None:
        self.namespace = namespace
        self.name = name
        self.detail = detail
        super().__init__(f"Failed to resolve node for pod {namespace}/{name}: {detail}")
