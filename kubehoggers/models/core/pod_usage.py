"""Live pod usage models for the top/status view."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PodUsageSample(BaseModel):
    """Point-in-time CPU/RAM usage of one pod from the metrics API."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    cpu_usage: int = 0  # millicores
    memory_usage: int = 0  # bytes
    node_name: str | None = None


class TopSnapshot(BaseModel):
    """Everything one refresh cycle hands to the display."""

    model_config = ConfigDict(frozen=True)

    rows: list[PodUsageSample] = Field(default_factory=list)
    total_pods: int = 0
    refreshed_at: datetime
