"""Node models."""

from pydantic import BaseModel, ConfigDict


class NodeInfo(BaseModel):
    """Schedulable capacity of one cluster node."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu_allocatable: int = 0  # millicores
    memory_allocatable: int = 0  # bytes
