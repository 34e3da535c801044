"""Per-node aggregation of pod reservations and commitments."""

from pydantic import BaseModel

from kubehoggers.utils.formatting import capacity_fraction


class NodeAggregate(BaseModel):
    """Reservation and limit totals of the pods bound to one node.

    Percent fractions are derived from the stored sums, so they are always
    consistent with them. A zero allocatable capacity yields a non-finite
    fraction instead of zero.
    """

    name: str
    total_pods: int = 0
    unrestricted_pods: int = 0
    cpu_allocatable: int = 0  # millicores
    memory_allocatable: int = 0  # bytes
    reserved_cpu: int = 0  # millicores, from requests
    reserved_memory: int = 0  # bytes, from requests
    committed_cpu: int = 0  # millicores, from limits
    committed_memory: int = 0  # bytes, from limits

    @property
    def reserved_cpu_fraction(self) -> float:
        return capacity_fraction(self.reserved_cpu, self.cpu_allocatable)

    @property
    def reserved_memory_fraction(self) -> float:
        return capacity_fraction(self.reserved_memory, self.memory_allocatable)

    @property
    def committed_cpu_fraction(self) -> float:
        return capacity_fraction(self.committed_cpu, self.cpu_allocatable)

    @property
    def committed_memory_fraction(self) -> float:
        return capacity_fraction(self.committed_memory, self.memory_allocatable)
