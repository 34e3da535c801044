"""Utility functions for parsing and formatting resource quantities."""

from kubehoggers.utils.formatting import (
    capacity_fraction,
    format_cpu_mcores,
    format_memory_mebibytes,
    format_percentage,
)
from kubehoggers.utils.resource_parser import (
    parse_cpu_millicores,
    parse_memory_bytes,
)

__all__ = [
    # Formatting
    "capacity_fraction",
    "format_cpu_mcores",
    "format_memory_mebibytes",
    "format_percentage",
    # Parsing
    "parse_cpu_millicores",
    "parse_memory_bytes",
]
