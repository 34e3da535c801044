"""Pod and container resource models."""

from pydantic import BaseModel, ConfigDict, Field


class ContainerResources(BaseModel):
    """Declared requests and limits of one container.

    ``None`` means the container does not declare that value at all, which is
    different from declaring zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    cpu_request: int | None = None  # millicores
    memory_request: int | None = None  # bytes
    cpu_limit: int | None = None  # millicores
    memory_limit: int | None = None  # bytes

    @property
    def has_requests(self) -> bool:
        return self.cpu_request is not None or self.memory_request is not None

    @property
    def has_limits(self) -> bool:
        return self.cpu_limit is not None or self.memory_limit is not None


class PodInfo(BaseModel):
    """A pod with its node assignment and container resources."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    node_name: str | None = None
    containers: list[ContainerResources] = Field(default_factory=list)

    @property
    def is_restricted(self) -> bool:
        """True when any container declares a request or a limit."""
        return any(c.has_requests or c.has_limits for c in self.containers)
