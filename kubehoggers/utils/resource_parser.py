"""Resource parsing utilities for CPU and memory quantities.

Converts Kubernetes resource quantity strings into the integer units used
throughout the application:
- CPU: parsed to millicores (int)
- Memory: parsed to bytes (int)

Fractional results are rounded up, matching how the Kubernetes API rounds
``MilliValue()``/``Value()`` for quantities.
"""

from __future__ import annotations

import logging
from decimal import ROUND_CEILING, Decimal, InvalidOperation

logger = logging.getLogger(__name__)

# Module-level constants to avoid re-creating on every function call.
# Any suffix is valid on any resource, e.g. the API server serializes a
# "1.2Gi" memory request as "1288490188800m". Two-letter binary suffixes
# must be checked before the single-letter decimal ones.
_QUANTITY_SUFFIX_MULTIPLIERS: tuple[tuple[str, Decimal], ...] = (
    ("Ki", Decimal(1024)),
    ("Mi", Decimal(1024**2)),
    ("Gi", Decimal(1024**3)),
    ("Ti", Decimal(1024**4)),
    ("Pi", Decimal(1024**5)),
    ("Ei", Decimal(1024**6)),
    ("n", Decimal("1e-9")),
    ("u", Decimal("1e-6")),
    ("m", Decimal("1e-3")),
    ("k", Decimal(1000)),
    ("M", Decimal(1000**2)),
    ("G", Decimal(1000**3)),
    ("T", Decimal(1000**4)),
    ("P", Decimal(1000**5)),
    ("E", Decimal(1000**6)),
)
_CPU_CORE_TO_MILLICORES = Decimal(1000)


def _to_decimal(number: str) -> Decimal | None:
    """Parse a plain or exponent-form number, rejecting non-finite values."""
    try:
        value = Decimal(number)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _round_up(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def _parse_quantity(quantity: str) -> Decimal | None:
    """Parse a quantity string to its base unit (cores or bytes)."""
    for suffix, mult in _QUANTITY_SUFFIX_MULTIPLIERS:
        if quantity.endswith(suffix):
            value = _to_decimal(quantity[: -len(suffix)])
            return None if value is None else value * mult
    return _to_decimal(quantity)


def parse_cpu_millicores(cpu_str: str | None) -> int:
    """Parse a CPU quantity string to millicores.

    Handles various CPU resource formats:
    - Nanocores: "500000000n" -> 500
    - Microcores: "500000u" -> 500
    - Millicores: "100m" -> 100
    - Decimal: "1.5" -> 1500
    - Exponent: "1e-1" -> 100
    - Other suffixes: "1k" -> 1000000

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "2")

    Returns:
        CPU value in millicores. Returns 0 on parse error or empty string.
    """
    if not cpu_str:
        return 0

    cpu_str = str(cpu_str).strip()
    cores = _parse_quantity(cpu_str)
    if cores is None:
        logger.debug("Unparseable CPU quantity %r", cpu_str)
        return 0
    return _round_up(cores * _CPU_CORE_TO_MILLICORES)


def parse_memory_bytes(memory_str: str | None) -> int:
    """Parse a memory quantity string to bytes.

    Handles various memory resource formats:
    - Binary: "1024Ki", "512Mi", "1Gi", "1Ti"
    - Decimal: "128k", "129M", "2G"
    - Exponent: "129e6"
    - Plain bytes: "134217728"
    - Milli-bytes: "1288490188800m" -> 1288490189

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi")

    Returns:
        Memory value in bytes. Returns 0 on parse error or empty string.
    """
    if not memory_str:
        return 0

    memory_str = str(memory_str).strip()
    value = _parse_quantity(memory_str)
    if value is None:
        logger.debug("Unparseable memory quantity %r", memory_str)
        return 0
    return _round_up(value)
